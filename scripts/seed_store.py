from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_eligibility.attendance_eligibility.container import build_container
from src.attendance_eligibility.attendance_eligibility.core.exceptions import DuplicateKey

DEMO_STUDENTS = [
    ("HNDIT/2025/001", "Nimal Perera"),
    ("HNDIT/2025/002", "Kasuni Silva"),
    ("HNDIT/2025/003", "Tharindu Fernando"),
]


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)
    if container.load_warning is not None:
        raise SystemExit(f"Refusing to seed over a corrupt store: {container.load_warning}")

    added = 0
    for reg_no, name in DEMO_STUDENTS:
        try:
            container.student_service.add_student(reg_no, name)
            added += 1
        except DuplicateKey:
            pass

    container.save()
    print(f"OK: Seeded {added} student(s) -> {container.gateway.path}")


if __name__ == "__main__":
    main()
