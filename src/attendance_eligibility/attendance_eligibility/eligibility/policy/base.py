from __future__ import annotations

from abc import ABC, abstractmethod


class EligibilityPolicy(ABC):
    """Policy interface (Strategy Pattern for eligibility rules)."""

    @abstractmethod
    def adjust(self, raw_percent: float, *, has_medical: bool) -> float:
        raise NotImplementedError

    @abstractmethod
    def is_eligible(self, adjusted_percent: float) -> bool:
        raise NotImplementedError
