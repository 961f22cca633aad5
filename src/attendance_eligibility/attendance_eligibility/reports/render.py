"""Fixed-width text rendering of the eligibility tables."""

from __future__ import annotations

from typing import Sequence

from .model import ReportRow, StudentReport, SubjectSummary

STUDENT_REPORT_TITLE = "FULL STUDENT REPORT (Medical +5%, Eligibility >=80%)"


def _student_row(r: ReportRow) -> str:
    return "%-10s %-30s %8d %8d %11.2f%% %11.2f%% %12s\n" % (
        r.code, r.label, r.present, r.total, r.raw_percent, r.adjusted_percent, r.verdict,
    )


def _subject_row(r: ReportRow) -> str:
    return "%-12s %-25s %8d %8d %11.2f%% %11.2f%% %10s\n" % (
        r.code, r.label, r.present, r.total, r.raw_percent, r.adjusted_percent, r.verdict,
    )


def render_student_reports(reports: Sequence[StudentReport]) -> str:
    out = [STUDENT_REPORT_TITLE + "\n", "-" * len(STUDENT_REPORT_TITLE) + "\n\n"]
    if not reports:
        out.append("No students found. Admin -> Students -> Add Student.\n")
        return "".join(out)

    for rep in reports:
        out.append(f"Student: {rep.reg_no} - {rep.name}\n")
        out.append("%-10s %-30s %8s %8s %12s %12s %12s\n" % ("Subject", "Title", "Present", "Total", "%", "%+Med", "Eligible"))
        out.extend(_student_row(r) for r in rep.rows)
        out.append("\n")
    return "".join(out)


def render_subject_summary(summary: SubjectSummary) -> str:
    out = [
        f"LECTURER SUMMARY for {summary.subject_code} - {summary.title}\n",
        f"Lecturer: {summary.lecturer_name}\n",
        "Medical adds +5% (max 100%). Eligible if >=80%.\n\n",
        f"Total Sessions (excluding holidays): {summary.total_sessions}\n\n",
        "%-12s %-25s %8s %8s %12s %12s %10s\n" % ("RegNo", "Name", "Present", "Total", "%", "%+Med", "Eligible"),
    ]
    out.extend(_subject_row(r) for r in summary.rows)
    return "".join(out)
