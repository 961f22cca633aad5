from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EligibilityResult:
    """Derived attendance figures for one (subject, student) pair."""

    subject_code: str
    reg_no: str
    present: int
    total: int
    raw_percent: float
    adjusted_percent: float
    has_medical: bool
    eligible: bool

    @property
    def verdict(self) -> str:
        return "YES" if self.eligible else "NO"
