"""Shared helpers for the JSON controllers."""

from __future__ import annotations

from functools import wraps

from flask import jsonify, request, session

from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, DomainError, PersistenceError


def ok(**payload):
    return jsonify({"success": True, **payload}), 200


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    """Request JSON when it is an object, otherwise an empty dict."""
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def error_status(e: DomainError) -> int:
    if isinstance(e, AuthenticationError):
        return 401
    if isinstance(e, AuthorizationError):
        return 403
    if isinstance(e, PersistenceError):
        return 500
    return 400


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "username" not in session:
            return fail("Please log in to continue.", 401)
        return view(*args, **kwargs)

    return wrapper


def role_required(role: Role):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            if "username" not in session:
                return fail("Please log in to continue.", 401)
            if session.get("role") != role.value:
                return fail("You do not have permission.", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator


admin_required = role_required(Role.ADMIN)
lecturer_required = role_required(Role.LECTURER)
