from __future__ import annotations

from datetime import date

import pytest

from src.attendance_eligibility.attendance_eligibility.attendance.model import normalize_status
from src.attendance_eligibility.attendance_eligibility.core.enums import AttendanceStatus, AttendeeKind
from src.attendance_eligibility.attendance_eligibility.core.exceptions import (
    AuthorizationError,
    HolidayBlocked,
    InvalidDateFormat,
    ValidationError,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("A", AttendanceStatus.ABSENT),
        (" absent ", AttendanceStatus.ABSENT),
        ("P", AttendanceStatus.PRESENT),
        ("present", AttendanceStatus.PRESENT),
        ("", AttendanceStatus.PRESENT),
        (None, AttendanceStatus.PRESENT),
        ("x", AttendanceStatus.PRESENT),
        (AttendanceStatus.ABSENT, AttendanceStatus.ABSENT),
    ],
)
def test_normalize_status_defaults_to_present(raw, expected):
    assert normalize_status(raw) == expected


def test_record_and_query_cell(ledger):
    ledger.record_attendance("HNDIT 1012", date(2026, 1, 6), {"R001": "P", "R002": "a"})

    cell = ledger.query_cell("HNDIT 1012", date(2026, 1, 6))

    assert cell == {"R001": AttendanceStatus.PRESENT, "R002": AttendanceStatus.ABSENT}


def test_query_unrecorded_cell_is_empty(ledger):
    assert ledger.query_cell("HNDIT 1012", date(2026, 1, 6)) == {}


def test_record_replaces_whole_cell(ledger):
    day = date(2026, 1, 6)
    ledger.record_attendance("HNDIT 1012", day, {"R001": "P", "R002": "P"})
    ledger.record_attendance("HNDIT 1012", day, {"R001": "A"})

    assert ledger.query_cell("HNDIT 1012", day) == {"R001": AttendanceStatus.ABSENT}


def test_holiday_blocks_write_without_partial_state(ledger, store):
    day = date(2026, 1, 6)
    store.holidays.add(day)

    with pytest.raises(HolidayBlocked):
        ledger.record_attendance("HNDIT 1012", day, {"R001": "P"})

    assert ledger.query_cell("HNDIT 1012", day) == {}
    assert len(store.student_attendance) == 0


def test_holiday_blocks_overwrite_of_existing_cell(ledger, store):
    day = date(2026, 1, 6)
    ledger.record_attendance("HNDIT 1012", day, {"R001": "P"})
    store.holidays.add(day)

    with pytest.raises(HolidayBlocked):
        ledger.record_attendance("HNDIT 1012", day, {"R001": "A"})

    assert ledger.query_cell("HNDIT 1012", day) == {"R001": AttendanceStatus.PRESENT}


def test_string_dates_are_parsed(ledger):
    ledger.record_attendance("HNDIT 1012", "2026-01-06", {"R001": "P"})
    assert ledger.query_cell("HNDIT 1012", date(2026, 1, 6)) == {"R001": AttendanceStatus.PRESENT}


def test_bad_date_string_raises(ledger):
    with pytest.raises(InvalidDateFormat):
        ledger.record_attendance("HNDIT 1012", "06/01/2026", {"R001": "P"})


def test_unknown_subject_rejected(ledger):
    with pytest.raises(ValidationError):
        ledger.record_attendance("NOPE 0000", date(2026, 1, 6), {"R001": "P"})


def test_student_and_lecturer_grids_are_separate(ledger):
    day = date(2026, 1, 6)
    ledger.record_attendance("HNDIT 1012", day, {"R001": "P"}, AttendeeKind.STUDENT)
    ledger.record_attendance("HNDIT 1012", day, {"lect1012": "A"}, AttendeeKind.LECTURER)

    assert ledger.query_cell("HNDIT 1012", day, AttendeeKind.STUDENT) == {"R001": AttendanceStatus.PRESENT}
    assert ledger.query_cell("HNDIT 1012", day, AttendeeKind.LECTURER) == {"lect1012": AttendanceStatus.ABSENT}


def test_lecturer_attendance_goes_to_own_subject(ledger):
    code = ledger.record_lecturer_attendance("lect1022", date(2026, 1, 5), "P")

    assert code == "HNDIT 1022"
    assert ledger.query_cell("HNDIT 1022", date(2026, 1, 5), AttendeeKind.LECTURER) == {
        "lect1022": AttendanceStatus.PRESENT
    }


def test_lecturer_without_subject_rejected(ledger):
    with pytest.raises(AuthorizationError):
        ledger.record_lecturer_attendance("admin", date(2026, 1, 5), "P")


def test_roster_defaults_every_student_present(ledger, students):
    roster = ledger.roster()

    assert [(e.reg_no, e.status) for e in roster] == [
        ("R001", AttendanceStatus.PRESENT),
        ("R002", AttendanceStatus.PRESENT),
    ]
