from __future__ import annotations

from flask import Flask, request, session

from ..common.datetime_utils import now_local
from ..common.web import fail, json_body, login_required, ok
from ..container import Container
from ..core.exceptions import AuthenticationError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/login", methods=["POST"], endpoint="login")
    def login():
        data = json_body() or request.form
        try:
            s_user = container.auth_service.authenticate(data.get("username", ""), data.get("password", ""))
        except AuthenticationError as e:
            return fail(str(e), 401)

        session.clear()
        session["username"] = s_user.username
        session["role"] = s_user.role.value
        session["name"] = s_user.display_name
        session["subject_code"] = s_user.subject_code
        return ok(username=s_user.username, role=s_user.role.value, subject_code=s_user.subject_code)

    @app.route("/api/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return ok()

    @app.route("/api/today", methods=["GET"], endpoint="today")
    def today():
        text = container.catalog.timetable_text(now_local().date())
        return ok(today=text)

    @app.route("/api/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        username = session["username"]
        with container.lock:
            unread = container.medical_service.unread_count(username)
        return ok(
            username=username,
            role=session.get("role"),
            name=session.get("name"),
            subject_code=session.get("subject_code"),
            unread=unread,
        )
