from __future__ import annotations

from datetime import date

from ..common.datetime_utils import coerce_date
from ..store.model import Store


class HolidayService:
    """Holiday set maintenance. Dates only, no payload."""

    def __init__(self, store: Store):
        self._store = store

    def add_holiday(self, day: date | str) -> date:
        d = coerce_date(day)
        self._store.holidays.add(d)
        return d

    def remove_holiday(self, day: date | str) -> bool:
        d = coerce_date(day)
        if d not in self._store.holidays:
            return False
        self._store.holidays.discard(d)
        return True

    def is_holiday(self, day: date) -> bool:
        return self._store.is_holiday(day)

    def list_holidays(self) -> list[date]:
        return sorted(self._store.holidays)
