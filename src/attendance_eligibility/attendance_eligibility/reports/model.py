from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportRow:
    """One table line. `code`/`label` are subject code/title in the student
    view and reg no/name in the subject view."""

    code: str
    label: str
    present: int
    total: int
    raw_percent: float
    adjusted_percent: float
    eligible: bool

    @property
    def verdict(self) -> str:
        return "YES" if self.eligible else "NO"

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "label": self.label,
            "present": self.present,
            "total": self.total,
            "raw_percent": round(self.raw_percent, 2),
            "adjusted_percent": round(self.adjusted_percent, 2),
            "eligible": self.verdict,
        }


@dataclass(frozen=True)
class StudentReport:
    reg_no: str
    name: str
    rows: list[ReportRow]


@dataclass(frozen=True)
class SubjectSummary:
    subject_code: str
    title: str
    lecturer_name: str
    total_sessions: int
    rows: list[ReportRow]
