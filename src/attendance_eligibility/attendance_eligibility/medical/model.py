from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..core.constants import ALL_SUBJECTS


@dataclass(frozen=True)
class Medical:
    """Medical leave. `scope` is a subject code or ALL_SUBJECTS."""

    reg_no: str
    scope: str
    start: date
    end: date
    note: str = ""

    def __post_init__(self):
        if self.end < self.start:
            raise ValueError("Medical ends before it starts")

    @property
    def applies_to_all(self) -> bool:
        return self.scope == ALL_SUBJECTS

    def covers(self, subject_code: str) -> bool:
        return self.applies_to_all or self.scope == subject_code

    def key(self) -> tuple[str, str, date, date]:
        return (self.reg_no, self.scope, self.start, self.end)


@dataclass
class Notification:
    """Message to a subject owner. Only `read` ever changes."""

    lecturer_username: str
    message: str
    created_at: datetime
    read: bool = False
