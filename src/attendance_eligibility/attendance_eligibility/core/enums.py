from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role resolved by the login collaborator."""

    ADMIN = "admin"
    LECTURER = "lecturer"


class AttendanceStatus(str, Enum):
    """Mark stored in an attendance cell."""

    PRESENT = "P"
    ABSENT = "A"


class AttendeeKind(str, Enum):
    """Which attendance grid a write targets."""

    STUDENT = "student"
    LECTURER = "lecturer"
