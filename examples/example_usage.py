"""Example: drive the service layer directly (no Flask).

Controllers are only a thin layer; the rules live in the services.
"""

import importlib
from datetime import date

from config import get_settings_module

from src.attendance_eligibility.attendance_eligibility.container import build_container
from src.attendance_eligibility.attendance_eligibility.reports.render import render_student_reports


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(data_file=settings.DATA_FILE)
    print(container.catalog.timetable_text(date.today()))
    print(render_student_reports(container.report_service.build_full_student_report()))


if __name__ == "__main__":
    main()
