from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Static login directory entry.

    Note: credentials live outside the core; only identity and role flow in.
    """

    username: str
    password_hash: str
    role: Role
