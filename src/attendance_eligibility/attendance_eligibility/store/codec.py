"""Store <-> JSON-compatible dict."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..core.enums import AttendanceStatus
from ..core.exceptions import PersistenceCorrupt
from ..medical.model import Medical, Notification
from ..students.model import Student
from .model import AttendanceGrid, Store


def _grid_to_list(grid: AttendanceGrid) -> list[dict]:
    return [
        {
            "subject": code,
            "date": d.isoformat(),
            "marks": {person: status.value for person, status in marks.items()},
        }
        for code, d, marks in grid.cells()
    ]


def _grid_from_list(items: list[dict]) -> AttendanceGrid:
    grid = AttendanceGrid()
    for item in items:
        marks = {str(p): AttendanceStatus(s) for p, s in item["marks"].items()}
        grid.replace_cell(str(item["subject"]), date.fromisoformat(item["date"]), marks)
    return grid


def store_to_dict(store: Store) -> dict[str, Any]:
    return {
        "students": [{"reg_no": s.reg_no, "name": s.name} for s in store.students.values()],
        "holidays": sorted(d.isoformat() for d in store.holidays),
        "medicals": [
            {
                "reg_no": m.reg_no,
                "scope": m.scope,
                "start": m.start.isoformat(),
                "end": m.end.isoformat(),
                "note": m.note,
            }
            for m in store.medicals
        ],
        "notifications": [
            {
                "lecturer_username": n.lecturer_username,
                "message": n.message,
                "read": n.read,
                "created_at": n.created_at.isoformat(),
            }
            for n in store.notifications
        ],
        "student_attendance": _grid_to_list(store.student_attendance),
        "lecturer_attendance": _grid_to_list(store.lecturer_attendance),
    }


def store_from_dict(data: Any) -> Store:
    """Rebuild a Store; any shape or value problem is PersistenceCorrupt."""
    if not isinstance(data, dict):
        raise PersistenceCorrupt("Store document is not an object")

    try:
        students = {}
        for row in data.get("students", []):
            st = Student(reg_no=str(row["reg_no"]), name=str(row["name"]))
            students[st.reg_no] = st

        return Store(
            students=students,
            holidays={date.fromisoformat(d) for d in data.get("holidays", [])},
            medicals=[
                Medical(
                    reg_no=str(m["reg_no"]),
                    scope=str(m["scope"]),
                    start=date.fromisoformat(m["start"]),
                    end=date.fromisoformat(m["end"]),
                    note=str(m.get("note") or ""),
                )
                for m in data.get("medicals", [])
            ],
            notifications=[
                Notification(
                    lecturer_username=str(n["lecturer_username"]),
                    message=str(n["message"]),
                    created_at=datetime.fromisoformat(n["created_at"]),
                    read=bool(n.get("read", False)),
                )
                for n in data.get("notifications", [])
            ],
            student_attendance=_grid_from_list(data.get("student_attendance", [])),
            lecturer_attendance=_grid_from_list(data.get("lecturer_attendance", [])),
        )
    except (KeyError, TypeError, ValueError, AttributeError) as e:
        raise PersistenceCorrupt(f"Store document is malformed: {e}") from e
