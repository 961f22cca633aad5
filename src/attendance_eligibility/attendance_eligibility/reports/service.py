from __future__ import annotations

from typing import Optional

from ..catalog.model import Catalog
from ..core.exceptions import UnknownStudent, ValidationError
from ..eligibility.service import EligibilityCalculator
from ..store.model import Store
from ..students.model import Student
from .model import ReportRow, StudentReport, SubjectSummary


class ReportService:
    """Assembles per-student and per-subject eligibility tables."""

    def __init__(self, store: Store, catalog: Catalog, *, calculator: Optional[EligibilityCalculator] = None):
        self._store = store
        self._catalog = catalog
        self._calculator = calculator or EligibilityCalculator(store)

    def _student_report(self, student: Student) -> StudentReport:
        rows = []
        for sub in self._catalog.subjects:
            r = self._calculator.evaluate(sub.code, student.reg_no)
            rows.append(
                ReportRow(
                    code=sub.code,
                    label=sub.title,
                    present=r.present,
                    total=r.total,
                    raw_percent=r.raw_percent,
                    adjusted_percent=r.adjusted_percent,
                    eligible=r.eligible,
                )
            )
        return StudentReport(reg_no=student.reg_no, name=student.name, rows=rows)

    def build_student_report(self, reg_no: str) -> StudentReport:
        student = self._store.students.get(reg_no)
        if not student:
            raise UnknownStudent(f"Unknown student {reg_no}")
        return self._student_report(student)

    def build_full_student_report(self) -> list[StudentReport]:
        return [self._student_report(s) for s in self._store.students.values()]

    def build_subject_summary(self, subject_code: str) -> SubjectSummary:
        sub = self._catalog.subject_by_code(subject_code)
        if not sub:
            raise ValidationError(f"Unknown subject {subject_code}")

        rows = []
        for st in self._store.students.values():
            r = self._calculator.evaluate(sub.code, st.reg_no)
            rows.append(
                ReportRow(
                    code=st.reg_no,
                    label=st.name,
                    present=r.present,
                    total=r.total,
                    raw_percent=r.raw_percent,
                    adjusted_percent=r.adjusted_percent,
                    eligible=r.eligible,
                )
            )

        return SubjectSummary(
            subject_code=sub.code,
            title=sub.title,
            lecturer_name=sub.lecturer_name,
            total_sessions=self._calculator.total_sessions(sub.code),
            rows=rows,
        )
