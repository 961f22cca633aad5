from __future__ import annotations

from flask import Flask

from ..common.web import admin_required, error_status, fail, json_body, login_required, ok
from ..container import Container
from ..core.exceptions import DomainError


def register(app: Flask, container: Container) -> None:
    @app.route("/api/students", methods=["GET"], endpoint="list_students")
    @login_required
    def list_students():
        with container.lock:
            students = container.student_service.list_students()
        return ok(students=[{"reg_no": s.reg_no, "name": s.name} for s in students])

    @app.route("/api/students", methods=["POST"], endpoint="add_student")
    @admin_required
    def add_student():
        data = json_body()
        try:
            with container.lock:
                st = container.student_service.add_student(data.get("reg_no", ""), data.get("name", ""))
        except DomainError as e:
            return fail(str(e), error_status(e))
        return ok(student={"reg_no": st.reg_no, "name": st.name})

    @app.route("/api/students/<path:reg_no>", methods=["DELETE"], endpoint="delete_student")
    @admin_required
    def delete_student(reg_no: str):
        with container.lock:
            removed = container.student_service.delete_student(reg_no)
        if not removed:
            return fail("Student not found", 404)
        return ok()

    @app.route("/api/holidays", methods=["GET"], endpoint="list_holidays")
    @login_required
    def list_holidays():
        with container.lock:
            days = container.holiday_service.list_holidays()
        return ok(holidays=[d.isoformat() for d in days])

    @app.route("/api/holidays", methods=["POST"], endpoint="add_holiday")
    @admin_required
    def add_holiday():
        data = json_body()
        try:
            with container.lock:
                d = container.holiday_service.add_holiday(data.get("date", ""))
        except DomainError as e:
            return fail(str(e), error_status(e))
        return ok(date=d.isoformat())

    @app.route("/api/holidays/<day>", methods=["DELETE"], endpoint="remove_holiday")
    @admin_required
    def remove_holiday(day: str):
        try:
            with container.lock:
                removed = container.holiday_service.remove_holiday(day)
        except DomainError as e:
            return fail(str(e), error_status(e))
        if not removed:
            return fail("Holiday not found", 404)
        return ok()

    @app.route("/api/save", methods=["POST"], endpoint="save_data")
    @login_required
    def save_data():
        try:
            container.save()
        except DomainError as e:
            return fail(str(e), error_status(e))
        return ok(message="Saved.")
