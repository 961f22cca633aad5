from __future__ import annotations

from flask import Flask, session

from ..common.web import error_status, fail, json_body, lecturer_required, login_required, ok
from ..container import Container
from ..core.enums import AttendeeKind
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    def _own_subject() -> str | None:
        return session.get("subject_code")

    @app.route("/api/attendance/roster", methods=["GET"], endpoint="attendance_roster")
    @lecturer_required
    def attendance_roster():
        with container.lock:
            entries = container.ledger.roster()
        return ok(
            subject_code=_own_subject(),
            roster=[{"reg_no": e.reg_no, "name": e.name, "status": e.status.value} for e in entries],
        )

    @app.route("/api/attendance/students", methods=["POST"], endpoint="record_student_attendance")
    @lecturer_required
    def record_student_attendance():
        subject_code = _own_subject()
        if not subject_code:
            return fail("Subject not assigned.", 403)

        data = json_body()
        statuses = data.get("statuses") or {}
        if not isinstance(statuses, dict):
            return fail("statuses must be an object of reg_no -> P/A")
        try:
            with container.lock:
                container.ledger.record_attendance(subject_code, data.get("date", ""), statuses, AttendeeKind.STUDENT)
        except DomainError as e:
            return fail(str(e), error_status(e))
        return ok(message=f"Student attendance saved for {subject_code} on {data.get('date')}")

    @app.route("/api/attendance/lecturer", methods=["POST"], endpoint="record_lecturer_attendance")
    @lecturer_required
    def record_lecturer_attendance():
        data = json_body()
        try:
            with container.lock:
                code = container.ledger.record_lecturer_attendance(
                    session["username"], data.get("date", ""), data.get("status", "P")
                )
        except DomainError as e:
            return fail(str(e), error_status(e))
        return ok(message="Lecturer attendance saved.", subject_code=code)

    @app.route("/api/attendance/<kind>/<path:subject_code>/<day>", methods=["GET"], endpoint="query_attendance")
    @login_required
    def query_attendance(kind: str, subject_code: str, day: str):
        try:
            attendee_kind = AttendeeKind(kind)
        except ValueError:
            return fail("kind must be 'student' or 'lecturer'", 404)
        try:
            with container.lock:
                cell = container.ledger.query_cell(subject_code, day, attendee_kind)
        except DomainError as e:
            return fail(str(e), error_status(e))
        return ok(marks={person: status.value for person, status in cell.items()})
