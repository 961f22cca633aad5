from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .container import Container, build_container
from .medical.controller import register as register_medical
from .reports.controller import register as register_reports
from .students.controller import register as register_students
from .users.controller import register as register_users


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    data_file = getattr(settings, "DATA_FILE")

    logging.basicConfig(
        level=getattr(logging, str(getattr(settings, "LOG_LEVEL", "INFO")).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if container is None:
        container = build_container(data_file=data_file)
    app.extensions["attendance_container"] = container

    if app.config["DEBUG"]:
        print(
            "[attendance-eligibility] settings=", settings_module,
            " store=", container.gateway.path,
            f" students={len(container.store.students)}",
        )
    if container.load_warning is not None:
        print(f"[attendance-eligibility] WARNING: {container.load_warning}")

    register_users(app, container)
    register_students(app, container)
    register_attendance(app, container)
    register_medical(app, container)
    register_reports(app, container)

    return app
