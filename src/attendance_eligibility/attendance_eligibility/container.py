from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Optional

from .attendance.service import AttendanceLedger
from .catalog.defaults import default_catalog
from .catalog.model import Catalog
from .core.constants import DEFAULT_DATA_FILE
from .core.exceptions import PersistenceCorrupt
from .eligibility.service import EligibilityCalculator
from .holidays.service import HolidayService
from .medical.service import MedicalService
from .reports.service import ReportService
from .store.gateway import StoreGateway
from .store.model import Store
from .students.service import StudentService
from .users.service import AuthService, build_user_directory


@dataclass(frozen=True)
class Container:
    catalog: Catalog
    store: Store
    gateway: StoreGateway
    load_warning: Optional[PersistenceCorrupt]

    auth_service: AuthService
    student_service: StudentService
    holiday_service: HolidayService
    ledger: AttendanceLedger
    calculator: EligibilityCalculator
    medical_service: MedicalService
    report_service: ReportService

    # Guards every Store mutation and report build when served over HTTP.
    lock: threading.RLock = field(default_factory=threading.RLock)

    def save(self) -> None:
        with self.lock:
            self.gateway.save(self.store)


def build_container(*, data_file: str = DEFAULT_DATA_FILE, catalog: Optional[Catalog] = None) -> Container:
    catalog = catalog or default_catalog()
    gateway = StoreGateway(data_file)
    loaded = gateway.load()
    store = loaded.store

    calculator = EligibilityCalculator(store)

    return Container(
        catalog=catalog,
        store=store,
        gateway=gateway,
        load_warning=loaded.warning,
        auth_service=AuthService(build_user_directory(catalog), catalog),
        student_service=StudentService(store),
        holiday_service=HolidayService(store),
        ledger=AttendanceLedger(store, catalog),
        calculator=calculator,
        medical_service=MedicalService(store, catalog),
        report_service=ReportService(store, catalog, calculator=calculator),
    )
