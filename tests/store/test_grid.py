from __future__ import annotations

from datetime import date

from src.attendance_eligibility.attendance_eligibility.core.enums import AttendanceStatus, AttendeeKind
from src.attendance_eligibility.attendance_eligibility.store.model import AttendanceGrid, Store

P = AttendanceStatus.PRESENT
A = AttendanceStatus.ABSENT


def test_cell_returns_copy():
    grid = AttendanceGrid()
    grid.replace_cell("S1", date(2026, 1, 5), {"R1": P})

    grid.cell("S1", date(2026, 1, 5))["R2"] = A

    assert grid.cell("S1", date(2026, 1, 5)) == {"R1": P}


def test_dates_for_subject_are_distinct_and_scoped():
    grid = AttendanceGrid()
    grid.replace_cell("S1", date(2026, 1, 6), {"R1": P})
    grid.replace_cell("S1", date(2026, 1, 5), {"R1": A})
    grid.replace_cell("S1", date(2026, 1, 5), {"R2": A})
    grid.replace_cell("S2", date(2026, 1, 7), {"R1": P})

    assert grid.dates_for("S1") == [date(2026, 1, 5), date(2026, 1, 6)]
    assert grid.dates_for("S3") == []


def test_remove_person_across_subjects():
    grid = AttendanceGrid()
    grid.replace_cell("S1", date(2026, 1, 5), {"R1": P, "R2": P})
    grid.replace_cell("S2", date(2026, 1, 6), {"R1": A})

    assert grid.remove_person("R1") == 2
    assert grid.cell("S1", date(2026, 1, 5)) == {"R2": P}
    assert grid.cell("S2", date(2026, 1, 6)) == {}
    # the session itself still exists
    assert grid.dates_for("S2") == [date(2026, 1, 6)]


def test_store_grid_selection():
    store = Store()
    assert store.grid(AttendeeKind.STUDENT) is store.student_attendance
    assert store.grid(AttendeeKind.LECTURER) is store.lecturer_attendance
