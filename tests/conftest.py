from __future__ import annotations

from datetime import date, datetime

import pytest

from src.attendance_eligibility.attendance_eligibility.attendance.service import AttendanceLedger
from src.attendance_eligibility.attendance_eligibility.catalog.defaults import default_catalog
from src.attendance_eligibility.attendance_eligibility.eligibility.service import EligibilityCalculator
from src.attendance_eligibility.attendance_eligibility.medical.service import MedicalService
from src.attendance_eligibility.attendance_eligibility.store.model import Store
from src.attendance_eligibility.attendance_eligibility.students.service import StudentService


@pytest.fixture
def catalog():
    return default_catalog()


@pytest.fixture
def store():
    return Store()


@pytest.fixture
def fixed_now():
    return datetime(2026, 2, 2, 9, 0, 0)


@pytest.fixture
def students(store):
    svc = StudentService(store)
    svc.add_student("R001", "Nimal")
    svc.add_student("R002", "Kasuni")
    return svc


@pytest.fixture
def ledger(store, catalog):
    return AttendanceLedger(store, catalog)


@pytest.fixture
def calculator(store):
    return EligibilityCalculator(store)


@pytest.fixture
def medical(store, catalog, fixed_now):
    return MedicalService(store, catalog, clock=lambda: fixed_now)


@pytest.fixture
def record_sessions(ledger):
    """Write `sessions` consecutive dates, `reg_no` present on the first `present`."""

    def _record(subject_code, reg_no, *, sessions, present, start=date(2026, 1, 5)):
        days = []
        for i in range(sessions):
            d = date.fromordinal(start.toordinal() + i)
            ledger.record_attendance(subject_code, d, {reg_no: "P" if i < present else "A"})
            days.append(d)
        return days

    return _record
