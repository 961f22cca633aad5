from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import AttendanceStatus


def normalize_status(value: Any) -> AttendanceStatus:
    """Coerce a raw mark into PRESENT or ABSENT.

    Only text starting with "A" (case-insensitive, after trimming) is Absent.
    Everything else, including blanks and None, defaults to Present.
    """
    if isinstance(value, AttendanceStatus):
        return value
    text = str(value if value is not None else "").strip().upper()
    return AttendanceStatus.ABSENT if text.startswith("A") else AttendanceStatus.PRESENT


@dataclass(frozen=True)
class RosterEntry:
    """One row of a fresh attendance sheet."""

    reg_no: str
    name: str
    status: AttendanceStatus
