from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Mapping, Optional

from ..core.constants import ALL_SUBJECTS, DEFAULT_CLASS_TIME_RANGE


@dataclass(frozen=True)
class Subject:
    """Catalog entry. The lecturer username is the owner identity."""

    code: str
    title: str
    lecturer_name: str
    lecturer_username: str

    def __str__(self) -> str:
        return f"{self.code} - {self.title} ({self.lecturer_name})"


@dataclass(frozen=True)
class Catalog:
    """Immutable subject catalog plus weekday timetable.

    `timetable` maps `date.weekday()` (0 = Monday) to a subject code.
    """

    subjects: tuple[Subject, ...]
    timetable: Mapping[int, str] = field(default_factory=dict)
    time_range: str = DEFAULT_CLASS_TIME_RANGE

    def __post_init__(self):
        codes = [s.code for s in self.subjects]
        if len(codes) != len(set(codes)):
            raise ValueError("Subject codes must be unique")
        unknown = [c for c in self.timetable.values() if c not in codes]
        if unknown:
            raise ValueError(f"Timetable references unknown subjects: {unknown}")
        object.__setattr__(self, "subjects", tuple(self.subjects))
        object.__setattr__(self, "timetable", MappingProxyType(dict(self.timetable)))

    @property
    def codes(self) -> tuple[str, ...]:
        return tuple(s.code for s in self.subjects)

    def subject_by_code(self, code: str) -> Optional[Subject]:
        for s in self.subjects:
            if s.code == code:
                return s
        return None

    def subject_for_lecturer(self, lecturer_username: str) -> Optional[Subject]:
        for s in self.subjects:
            if s.lecturer_username == lecturer_username:
                return s
        return None

    def is_valid_scope(self, scope: str) -> bool:
        return scope == ALL_SUBJECTS or self.subject_by_code(scope) is not None

    def timetable_text(self, day: date) -> str:
        """Informational "today's class" line for the given day."""
        code = self.timetable.get(day.weekday())
        if code is None:
            return "No class today (Weekend)."
        sub = self.subject_by_code(code)
        weekday = day.strftime("%A").upper()
        return f"{weekday}: {sub.code} - {sub.title} | {self.time_range} | Lecturer: {sub.lecturer_name}"
