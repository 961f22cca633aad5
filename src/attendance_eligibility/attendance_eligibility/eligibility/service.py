from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import AttendanceStatus
from ..store.model import Store
from .model import EligibilityResult
from .policy.base import EligibilityPolicy
from .policy.medical_bonus_policy import MedicalBonusPolicy


class EligibilityCalculator:
    """Derives sessions, presence and eligibility from the live Store.

    Holidays are checked at query time, so a date that became a holiday after
    attendance was recorded stops counting immediately.
    """

    def __init__(self, store: Store, *, policy: Optional[EligibilityPolicy] = None):
        self._store = store
        self._policy = policy or MedicalBonusPolicy()

    def _session_dates(self, subject_code: str) -> list[date]:
        grid = self._store.student_attendance
        return [d for d in grid.dates_for(subject_code) if not self._store.is_holiday(d)]

    def total_sessions(self, subject_code: str) -> int:
        return len(self._session_dates(subject_code))

    def present_count(self, subject_code: str, reg_no: str) -> int:
        grid = self._store.student_attendance
        return sum(
            1
            for d in self._session_dates(subject_code)
            if grid.status(subject_code, d, reg_no) == AttendanceStatus.PRESENT
        )

    def has_medical_coverage(self, reg_no: str, subject_code: str) -> bool:
        # Subject-scoped only: the leave's date range is not compared to sessions.
        return any(m.reg_no == reg_no and m.covers(subject_code) for m in self._store.medicals)

    @staticmethod
    def _percent(present: int, total: int) -> float:
        if total == 0:
            return 0.0
        return present * 100.0 / total

    def raw_percent(self, subject_code: str, reg_no: str) -> float:
        return self._percent(self.present_count(subject_code, reg_no), self.total_sessions(subject_code))

    def adjusted_percent(self, subject_code: str, reg_no: str) -> float:
        return self._policy.adjust(
            self.raw_percent(subject_code, reg_no),
            has_medical=self.has_medical_coverage(reg_no, subject_code),
        )

    def is_eligible(self, subject_code: str, reg_no: str) -> bool:
        return self._policy.is_eligible(self.adjusted_percent(subject_code, reg_no))

    def evaluate(self, subject_code: str, reg_no: str) -> EligibilityResult:
        """All figures for one pair in a single pass."""
        total = self.total_sessions(subject_code)
        present = self.present_count(subject_code, reg_no)
        raw = self._percent(present, total)
        covered = self.has_medical_coverage(reg_no, subject_code)
        adjusted = self._policy.adjust(raw, has_medical=covered)
        return EligibilityResult(
            subject_code=subject_code,
            reg_no=reg_no,
            present=present,
            total=total,
            raw_percent=raw,
            adjusted_percent=adjusted,
            has_medical=covered,
            eligible=self._policy.is_eligible(adjusted),
        )
