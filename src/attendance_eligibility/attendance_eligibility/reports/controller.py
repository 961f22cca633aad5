from __future__ import annotations

from flask import Flask, Response, request, session

from ..common.web import admin_required, error_status, fail, lecturer_required, ok
from ..container import Container
from ..core.exceptions import DomainError
from .render import render_student_reports, render_subject_summary


def _wants_text() -> bool:
    return request.args.get("format") == "text"


def register(app: Flask, container: Container) -> None:
    @app.route("/api/reports/students", methods=["GET"], endpoint="student_reports")
    @admin_required
    def student_reports():
        with container.lock:
            reports = container.report_service.build_full_student_report()
        if _wants_text():
            return Response(render_student_reports(reports), mimetype="text/plain")
        return ok(
            reports=[
                {"reg_no": r.reg_no, "name": r.name, "rows": [row.as_dict() for row in r.rows]}
                for r in reports
            ]
        )

    @app.route("/api/reports/students/<path:reg_no>", methods=["GET"], endpoint="student_report")
    @admin_required
    def student_report(reg_no: str):
        try:
            with container.lock:
                rep = container.report_service.build_student_report(reg_no)
        except DomainError as e:
            return fail(str(e), 404)
        if _wants_text():
            return Response(render_student_reports([rep]), mimetype="text/plain")
        return ok(reg_no=rep.reg_no, name=rep.name, rows=[row.as_dict() for row in rep.rows])

    @app.route("/api/reports/summary", methods=["GET"], endpoint="subject_summary")
    @lecturer_required
    def subject_summary():
        subject_code = session.get("subject_code")
        if not subject_code:
            return fail("No subject assigned.", 403)
        try:
            with container.lock:
                summary = container.report_service.build_subject_summary(subject_code)
        except DomainError as e:
            return fail(str(e), error_status(e))
        if _wants_text():
            return Response(render_subject_summary(summary), mimetype="text/plain")
        return ok(
            subject_code=summary.subject_code,
            title=summary.title,
            lecturer_name=summary.lecturer_name,
            total_sessions=summary.total_sessions,
            rows=[row.as_dict() for row in summary.rows],
        )
