from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from werkzeug.security import check_password_hash, generate_password_hash

from ..catalog.model import Catalog
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .model import User

DEFAULT_ADMIN_PASSWORD = "admin123"
DEFAULT_LECTURER_PASSWORD = "lect123"


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    username: str
    role: Role
    display_name: str
    subject_code: Optional[str]


def build_user_directory(
    catalog: Catalog,
    *,
    admin_password: str = DEFAULT_ADMIN_PASSWORD,
    lecturer_password: str = DEFAULT_LECTURER_PASSWORD,
) -> dict[str, User]:
    """One admin plus one lecturer account per catalog subject owner."""
    users = {"admin": User("admin", generate_password_hash(admin_password), Role.ADMIN)}
    lecturer_hash = generate_password_hash(lecturer_password)
    for sub in catalog.subjects:
        users[sub.lecturer_username] = User(sub.lecturer_username, lecturer_hash, Role.LECTURER)
    return users


class AuthService:
    """Use case: authenticate user (login)."""

    def __init__(self, users: Mapping[str, User], catalog: Catalog):
        self._users = dict(users)
        self._catalog = catalog

    def authenticate(self, username: str, password: str) -> SessionUser:
        if not isinstance(username, str) or not isinstance(password, (str, type(None))):
            raise AuthenticationError("Invalid login!")
        user = self._users.get(username.strip())
        if not user:
            raise AuthenticationError("Invalid login!")

        try:
            ok = check_password_hash(user.password_hash, password or "")
        except ValueError:
            # e.g. placeholder hashes like 'CHANGE_ME'
            ok = False

        if not ok:
            raise AuthenticationError("Invalid login!")

        sub = self._catalog.subject_for_lecturer(user.username)
        return SessionUser(
            username=user.username,
            role=user.role,
            display_name=sub.lecturer_name if sub else user.username,
            subject_code=sub.code if sub else None,
        )
