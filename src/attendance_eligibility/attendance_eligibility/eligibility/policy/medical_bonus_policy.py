from __future__ import annotations

from ...core.constants import ELIGIBILITY_THRESHOLD_PERCENT, MAX_PERCENT, MEDICAL_BONUS_PERCENT
from .base import EligibilityPolicy


class MedicalBonusPolicy(EligibilityPolicy):
    """Standard rule: flat +5 with medical cover, capped at 100; eligible at >= 80."""

    def __init__(
        self,
        *,
        bonus: float = MEDICAL_BONUS_PERCENT,
        cap: float = MAX_PERCENT,
        threshold: float = ELIGIBILITY_THRESHOLD_PERCENT,
    ):
        self.bonus = float(bonus)
        self.cap = float(cap)
        self.threshold = float(threshold)

    def adjust(self, raw_percent: float, *, has_medical: bool) -> float:
        if not has_medical:
            return raw_percent
        return min(self.cap, raw_percent + self.bonus)

    def is_eligible(self, adjusted_percent: float) -> bool:
        return adjusted_percent >= self.threshold
