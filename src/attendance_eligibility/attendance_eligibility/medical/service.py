from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Callable, Optional

from ..catalog.model import Catalog
from ..common.datetime_utils import coerce_date, now_local
from ..common.validators import optional_text, require_non_empty
from ..core.constants import MEDICAL_BONUS_TEXT
from ..core.exceptions import InvalidDateRange, UnknownStudent, ValidationError
from ..store.model import Store
from .model import Medical, Notification

logger = logging.getLogger(__name__)


class MedicalService:
    """Use case: file medical leave and notify the affected subject owners."""

    def __init__(self, store: Store, catalog: Catalog, *, clock: Optional[Callable[[], datetime]] = None):
        self._store = store
        self._catalog = catalog
        self._clock = clock or now_local

    def _build_message(self, medical: Medical) -> str:
        student = self._store.students.get(medical.reg_no)
        name = student.name if student else ""
        return (
            f"Medical submitted for {medical.reg_no} - {name}"
            f" | {medical.start.isoformat()} to {medical.end.isoformat()}"
            f" | Subject: {medical.scope}"
            f" | {MEDICAL_BONUS_TEXT}"
        )

    def submit_medical(
        self,
        reg_no: str,
        scope: str,
        start: date | str,
        end: date | str,
        note: str = "",
    ) -> list[Notification]:
        """Append the medical, then notify owners. Returns the new notifications."""
        start_d = coerce_date(start)
        end_d = coerce_date(end)
        if end_d < start_d:
            raise InvalidDateRange("End date cannot be before start date.")
        reg_no = require_non_empty(reg_no, "Reg No")
        scope = require_non_empty(scope, "Subject")
        note = optional_text(note, "Note")
        if reg_no not in self._store.students:
            raise UnknownStudent(f"Unknown student {reg_no}")
        if not self._catalog.is_valid_scope(scope):
            raise ValidationError(f"Unknown subject {scope}")

        medical = Medical(reg_no=reg_no, scope=scope, start=start_d, end=end_d, note=note)
        self._store.medicals.append(medical)

        if medical.applies_to_all:
            owners = [s.lecturer_username for s in self._catalog.subjects]
        else:
            owners = [self._catalog.subject_by_code(scope).lecturer_username]

        message = self._build_message(medical)
        created = [Notification(lecturer_username=o, message=message, created_at=self._clock()) for o in owners]
        self._store.notifications.extend(created)

        logger.info("Medical filed for %s (%s), notified %d lecturer(s)", reg_no, scope, len(created))
        return created

    def delete_medical(self, reg_no: str, scope: str, start: date | str, end: date | str) -> int:
        """Remove every exact match. Notifications already sent stay."""
        reg_no = require_non_empty(reg_no, "Reg No")
        scope = require_non_empty(scope, "Subject")
        key = (reg_no, scope, coerce_date(start), coerce_date(end))
        before = len(self._store.medicals)
        self._store.medicals[:] = [m for m in self._store.medicals if m.key() != key]
        return before - len(self._store.medicals)

    def list_medicals(self) -> list[Medical]:
        return list(self._store.medicals)

    def notifications_for(self, lecturer_username: str) -> list[Notification]:
        items = [n for n in self._store.notifications if n.lecturer_username == lecturer_username]
        items.sort(key=lambda n: n.created_at, reverse=True)
        return items

    def unread_count(self, lecturer_username: str) -> int:
        return sum(1 for n in self._store.notifications if n.lecturer_username == lecturer_username and not n.read)

    def mark_all_read(self, lecturer_username: str) -> int:
        changed = 0
        for n in self._store.notifications:
            if n.lecturer_username == lecturer_username and not n.read:
                n.read = True
                changed += 1
        return changed
