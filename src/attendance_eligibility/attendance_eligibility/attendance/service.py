from __future__ import annotations

import logging
from datetime import date
from typing import Any, Mapping

from ..catalog.model import Catalog
from ..common.datetime_utils import coerce_date
from ..core.enums import AttendanceStatus, AttendeeKind
from ..core.exceptions import AuthorizationError, HolidayBlocked, ValidationError
from ..store.model import Store
from .model import RosterEntry, normalize_status

logger = logging.getLogger(__name__)


class AttendanceLedger:
    """Reads and writes per-subject, per-date attendance cells."""

    def __init__(self, store: Store, catalog: Catalog):
        self._store = store
        self._catalog = catalog

    def record_attendance(
        self,
        subject_code: str,
        day: date | str,
        statuses_by_person: Mapping[str, Any],
        kind: AttendeeKind = AttendeeKind.STUDENT,
    ) -> None:
        """Replace the whole (subject, day) cell with the given marks."""
        d = coerce_date(day)
        if self._catalog.subject_by_code(subject_code) is None:
            raise ValidationError(f"Unknown subject {subject_code}")
        if self._store.is_holiday(d):
            raise HolidayBlocked(f"{d.isoformat()} is a HOLIDAY. No attendance allowed.")

        marks = {str(person): normalize_status(raw) for person, raw in statuses_by_person.items()}
        self._store.grid(AttendeeKind(kind)).replace_cell(subject_code, d, marks)
        logger.debug("Recorded %s attendance for %s on %s (%d marks)", kind, subject_code, d, len(marks))

    def query_cell(
        self,
        subject_code: str,
        day: date | str,
        kind: AttendeeKind = AttendeeKind.STUDENT,
    ) -> dict[str, AttendanceStatus]:
        return self._store.grid(AttendeeKind(kind)).cell(subject_code, coerce_date(day))

    def record_lecturer_attendance(self, lecturer_username: str, day: date | str, status: Any) -> str:
        """Mark the lecturer for the subject they own; returns that subject code."""
        sub = self._catalog.subject_for_lecturer(lecturer_username)
        if sub is None:
            raise AuthorizationError("Subject not assigned.")
        self.record_attendance(sub.code, day, {lecturer_username: status}, AttendeeKind.LECTURER)
        return sub.code

    def roster(self, default: Any = AttendanceStatus.PRESENT) -> list[RosterEntry]:
        status = normalize_status(default)
        return [RosterEntry(reg_no=s.reg_no, name=s.name, status=status) for s in self._store.students.values()]
