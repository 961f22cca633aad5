from __future__ import annotations

from flask import Flask, session

from ..common.web import admin_required, error_status, fail, json_body, lecturer_required, ok
from ..container import Container
from ..core.exceptions import DomainError


def _medical_dict(m) -> dict:
    return {
        "reg_no": m.reg_no,
        "scope": m.scope,
        "start": m.start.isoformat(),
        "end": m.end.isoformat(),
        "note": m.note,
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/api/medicals", methods=["GET"], endpoint="list_medicals")
    @admin_required
    def list_medicals():
        with container.lock:
            items = container.medical_service.list_medicals()
        return ok(medicals=[_medical_dict(m) for m in items])

    @app.route("/api/medicals", methods=["POST"], endpoint="submit_medical")
    @admin_required
    def submit_medical():
        data = json_body()
        try:
            with container.lock:
                created = container.medical_service.submit_medical(
                    data.get("reg_no", ""),
                    data.get("scope", ""),
                    data.get("start", ""),
                    data.get("end", ""),
                    data.get("note", ""),
                )
        except DomainError as e:
            return fail(str(e), error_status(e))
        return ok(message="Medical added and lecturers notified.", notified=[n.lecturer_username for n in created])

    @app.route("/api/medicals/delete", methods=["POST"], endpoint="delete_medical")
    @admin_required
    def delete_medical():
        data = json_body()
        try:
            with container.lock:
                removed = container.medical_service.delete_medical(
                    data.get("reg_no", ""), data.get("scope", ""), data.get("start", ""), data.get("end", "")
                )
        except DomainError as e:
            return fail(str(e), error_status(e))
        return ok(removed=removed)

    @app.route("/api/notifications", methods=["GET"], endpoint="my_notifications")
    @lecturer_required
    def my_notifications():
        with container.lock:
            items = container.medical_service.notifications_for(session["username"])
        return ok(
            notifications=[
                {
                    "time": n.created_at.isoformat(),
                    "status": "READ" if n.read else "NEW",
                    "message": n.message,
                }
                for n in items
            ]
        )

    @app.route("/api/notifications/read", methods=["POST"], endpoint="mark_notifications_read")
    @lecturer_required
    def mark_notifications_read():
        with container.lock:
            changed = container.medical_service.mark_all_read(session["username"])
        return ok(changed=changed)
