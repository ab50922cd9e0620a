from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .access.config import AccessConfig
from .access.service import AccessService
from .approvals.service import ApprovalEngine
from .core.constants import DEFAULT_BASE_HOURLY_RATE
from .database.connection import DBConfig, DatabaseConnection
from .database.record_store import MySQLRecordStore, RecordStore
from .devices.store_device_repository import StoreDeviceRepository
from .employees.directory import EmployeeDirectory
from .employees.service import EmployeeAdminService, RegistrationService
from .employees.store_profile_repository import StoreProfileRepository
from .payroll.service import OvertimeService
from .roster.projector import RosterProjector
from .shifts.service import ShiftSubmissionService
from .shifts.store_shift_repository import StoreShiftEntryRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore

    profiles_repo: StoreProfileRepository
    entries_repo: StoreShiftEntryRepository
    devices_repo: StoreDeviceRepository

    directory: EmployeeDirectory
    access_service: AccessService
    registration_service: RegistrationService
    employee_admin_service: EmployeeAdminService
    shift_service: ShiftSubmissionService
    approval_engine: ApprovalEngine
    roster_projector: RosterProjector
    overtime_service: OvertimeService


def build_container(
    *,
    db_config: Optional[dict] = None,
    access_config: Optional[AccessConfig] = None,
    base_hourly_rate: float = DEFAULT_BASE_HOURLY_RATE,
    enforce_manager_section: bool = False,
    store: Optional[RecordStore] = None,
) -> Container:
    if store is None:
        if db_config is None:
            raise ValueError("db_config is required when no store is given")
        store = MySQLRecordStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))

    access_config = access_config or AccessConfig.build()

    profiles_repo = StoreProfileRepository(store)
    entries_repo = StoreShiftEntryRepository(store)
    devices_repo = StoreDeviceRepository(store)

    directory = EmployeeDirectory(profiles_repo, seeded=access_config.seeded_profiles())
    directory.refresh()

    return Container(
        store=store,
        profiles_repo=profiles_repo,
        entries_repo=entries_repo,
        devices_repo=devices_repo,
        directory=directory,
        access_service=AccessService(access_config),
        registration_service=RegistrationService(profiles_repo, directory, devices_repo),
        employee_admin_service=EmployeeAdminService(profiles_repo, directory),
        shift_service=ShiftSubmissionService(entries_repo, directory),
        approval_engine=ApprovalEngine(entries_repo, directory, enforce_section=enforce_manager_section),
        roster_projector=RosterProjector(entries_repo),
        overtime_service=OvertimeService(entries_repo, base_hourly_rate=base_hourly_rate),
    )
