from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import DuplicateKey
from ..store.model import Store
from .model import Student

logger = logging.getLogger(__name__)


class StudentService:
    """Admin use cases: register and remove students."""

    def __init__(self, store: Store):
        self._store = store

    def add_student(self, reg_no: str, name: str) -> Student:
        reg_no = require_non_empty(reg_no, "Reg No")
        name = require_non_empty(name, "Name")
        if reg_no in self._store.students:
            raise DuplicateKey(f"Reg No {reg_no} already exists")

        student = Student(reg_no=reg_no, name=name)
        self._store.students[reg_no] = student
        return student

    def delete_student(self, reg_no: str) -> bool:
        """Remove the student, its attendance marks and its medicals."""
        if self._store.students.pop(reg_no, None) is None:
            return False

        marks = self._store.student_attendance.remove_person(reg_no)
        before = len(self._store.medicals)
        self._store.medicals[:] = [m for m in self._store.medicals if m.reg_no != reg_no]
        logger.info(
            "Deleted student %s (marks=%d, medicals=%d)",
            reg_no,
            marks,
            before - len(self._store.medicals),
        )
        return True

    def get(self, reg_no: str) -> Optional[Student]:
        return self._store.students.get(reg_no)

    def list_students(self) -> list[Student]:
        return list(self._store.students.values())
