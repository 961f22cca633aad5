from __future__ import annotations

import os
import stat
from datetime import date, datetime

import pytest

from src.attendance_eligibility.attendance_eligibility.core.enums import AttendanceStatus
from src.attendance_eligibility.attendance_eligibility.core.exceptions import PersistenceCorrupt, PersistenceWriteFailed
from src.attendance_eligibility.attendance_eligibility.medical.model import Medical, Notification
from src.attendance_eligibility.attendance_eligibility.store.gateway import StoreGateway
from src.attendance_eligibility.attendance_eligibility.store.model import Store
from src.attendance_eligibility.attendance_eligibility.students.model import Student


def test_missing_file_loads_empty_store_without_warning(tmp_path):
    result = StoreGateway(tmp_path / "nope.json").load()

    assert result.warning is None
    assert result.store.is_empty()
    assert result.store.students == {}
    assert result.store.holidays == set()
    assert result.store.medicals == []
    assert result.store.notifications == []


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        "[]",
        '{"students": [{"reg_no": "R1"}]}',
        '{"holidays": ["2026-13-01"]}',
        "[" * 200000 + "]" * 200000,
        '{"medicals": [{"reg_no": "R1", "scope": "ALL", "start": "2026-01-09", "end": "2026-01-01"}]}',
    ],
)
def test_corrupt_file_loads_empty_and_is_left_on_disk(tmp_path, content):
    path = tmp_path / "data.json"
    path.write_text(content, encoding="utf-8")

    result = StoreGateway(path).load()

    assert isinstance(result.warning, PersistenceCorrupt)
    assert result.store.is_empty()
    assert path.read_text(encoding="utf-8") == content


def test_binary_garbage_is_treated_as_corrupt(tmp_path):
    path = tmp_path / "data.json"
    path.write_bytes(b"\xac\xed\x00\x05sr\x00")

    result = StoreGateway(path).load()

    assert result.warning is not None
    assert path.exists()


def test_save_then_load_restores_store(tmp_path):
    store = Store()
    store.students["R001"] = Student("R001", "Nimal")
    store.holidays.add(date(2026, 1, 1))
    store.medicals.append(Medical("R001", "ALL", date(2026, 1, 5), date(2026, 1, 6), "flu"))
    store.notifications.append(Notification("lect1012", "msg", datetime(2026, 1, 5, 9, 30), read=True))
    store.student_attendance.replace_cell("HNDIT 1012", date(2026, 1, 6), {"R001": AttendanceStatus.ABSENT})
    store.lecturer_attendance.replace_cell("HNDIT 1012", date(2026, 1, 6), {"lect1012": AttendanceStatus.PRESENT})

    gateway = StoreGateway(tmp_path / "sub" / "data.json")
    gateway.save(store)
    loaded = gateway.load()

    assert loaded.warning is None
    s = loaded.store
    assert s.students == store.students
    assert s.holidays == store.holidays
    assert s.medicals == store.medicals
    assert s.notifications == store.notifications
    assert s.student_attendance.cell("HNDIT 1012", date(2026, 1, 6)) == {"R001": AttendanceStatus.ABSENT}
    assert s.lecturer_attendance.cell("HNDIT 1012", date(2026, 1, 6)) == {"lect1012": AttendanceStatus.PRESENT}


def test_save_leaves_no_temp_files(tmp_path):
    gateway = StoreGateway(tmp_path / "data.json")
    gateway.save(Store())
    gateway.save(Store())

    assert [p.name for p in tmp_path.iterdir()] == ["data.json"]


def test_failed_replace_keeps_previous_file(tmp_path, monkeypatch):
    path = tmp_path / "data.json"
    gateway = StoreGateway(path)
    old = Store()
    old.students["R001"] = Student("R001", "Nimal")
    gateway.save(old)
    before = path.read_text(encoding="utf-8")

    def boom(src, dst):
        raise OSError("disk full")

    monkeypatch.setattr("src.attendance_eligibility.attendance_eligibility.store.gateway.os.replace", boom)

    with pytest.raises(PersistenceWriteFailed):
        gateway.save(Store())

    assert path.read_text(encoding="utf-8") == before
    assert [p.name for p in tmp_path.iterdir()] == ["data.json"]


def test_save_into_unwritable_location_raises(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(PersistenceWriteFailed):
        StoreGateway(blocker / "data.json").save(Store())


def test_save_keeps_existing_file_mode(tmp_path):
    path = tmp_path / "data.json"
    gateway = StoreGateway(path)
    gateway.save(Store())
    os.chmod(path, 0o644)

    gateway.save(Store())

    assert stat.S_IMODE(os.stat(path).st_mode) == 0o644
