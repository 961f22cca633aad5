from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, Mapping

from ..core.enums import AttendanceStatus, AttendeeKind
from ..medical.model import Medical, Notification
from ..students.model import Student

CellKey = tuple[str, date]


class AttendanceGrid:
    """Attendance marks indexed by (subject_code, date) -> {person_id: status}.

    A cell that was never written is absent from the index.
    """

    def __init__(self):
        self._cells: dict[CellKey, dict[str, AttendanceStatus]] = {}

    def replace_cell(self, subject_code: str, day: date, marks: Mapping[str, AttendanceStatus]) -> None:
        self._cells[(subject_code, day)] = dict(marks)

    def cell(self, subject_code: str, day: date) -> dict[str, AttendanceStatus]:
        return dict(self._cells.get((subject_code, day), {}))

    def dates_for(self, subject_code: str) -> list[date]:
        return sorted(d for (code, d) in self._cells if code == subject_code)

    def status(self, subject_code: str, day: date, person_id: str):
        return self._cells.get((subject_code, day), {}).get(person_id)

    def remove_person(self, person_id: str) -> int:
        removed = 0
        for marks in self._cells.values():
            if marks.pop(person_id, None) is not None:
                removed += 1
        return removed

    def cells(self) -> Iterator[tuple[str, date, dict[str, AttendanceStatus]]]:
        for (code, d), marks in self._cells.items():
            yield code, d, dict(marks)

    def __len__(self) -> int:
        return len(self._cells)


@dataclass
class Store:
    """In-memory aggregate of everything that gets persisted."""

    students: dict[str, Student] = field(default_factory=dict)
    holidays: set[date] = field(default_factory=set)
    medicals: list[Medical] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    student_attendance: AttendanceGrid = field(default_factory=AttendanceGrid)
    lecturer_attendance: AttendanceGrid = field(default_factory=AttendanceGrid)

    def grid(self, kind: AttendeeKind) -> AttendanceGrid:
        if kind == AttendeeKind.LECTURER:
            return self.lecturer_attendance
        return self.student_attendance

    def is_holiday(self, day: date) -> bool:
        return day in self.holidays

    def is_empty(self) -> bool:
        return not (
            self.students
            or self.holidays
            or self.medicals
            or self.notifications
            or len(self.student_attendance)
            or len(self.lecturer_attendance)
        )
