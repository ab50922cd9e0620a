from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from ..common.validators import normalize_employee_id, require_enum, require_non_empty
from ..core.enums import Department, Role, Section
from ..core.exceptions import DuplicateIdError, MissingSectionError, NotFoundError, ValidationError
from ..devices.repository import DeviceRepository
from .directory import EmployeeDirectory
from .model import EmployeeProfile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class RegistrationService:
    """Use case: employee self-registration and lookup."""

    def __init__(
        self,
        profiles: ProfileRepository,
        directory: EmployeeDirectory,
        devices: Optional[DeviceRepository] = None,
    ):
        self._profiles = profiles
        self._directory = directory
        self._devices = devices

    def check_existing(self, employee_id: str) -> Optional[EmployeeProfile]:
        employee_id = normalize_employee_id(employee_id)
        if self._directory.is_seeded(employee_id):
            return self._directory.get(employee_id)

        profile = self._profiles.get_by_id(employee_id)
        if profile:
            self._directory.put(profile)
        else:
            self._directory.remove(employee_id)
        return profile

    def register(
        self,
        *,
        employee_id: str,
        full_name: str,
        department: Department | str,
        section: Section | str | None = None,
        device_id: Optional[str] = None,
    ) -> EmployeeProfile:
        employee_id = normalize_employee_id(employee_id)
        full_name = require_non_empty(full_name, "Full name")
        department = require_enum(department, Department, "department")

        if department == Department.ENGINEERING:
            if not section:
                raise MissingSectionError("Section is required for Engineering department")
            section = require_enum(section, Section, "section")
        else:
            section = None

        if self.check_existing(employee_id):
            raise DuplicateIdError("Employee ID already exists")

        profile = self._profiles.create(
            EmployeeProfile(
                employee_id=employee_id,
                full_name=full_name,
                department=department,
                section=section,
                role=Role.EMPLOYEE,
                approved=False,
            )
        )
        self._directory.put(profile)
        logger.info("Registered employee %s (%s)", profile.employee_id, department.value)

        # The profile stays committed even if binding the device fails.
        if device_id and self._devices:
            self._devices.bind(device_id, profile.employee_id)

        return profile

    def auto_detect(self, device_id: Optional[str]) -> Optional[EmployeeProfile]:
        if not device_id or not self._devices:
            return None

        employee_id = self._devices.find_employee(device_id)
        if not employee_id:
            return None

        profile = self.check_existing(employee_id)
        if profile:
            self._devices.bind(device_id, profile.employee_id)
        return profile


class EmployeeAdminService:
    """Use case: admin approves or rejects registrations."""

    def __init__(self, profiles: ProfileRepository, directory: EmployeeDirectory):
        self._profiles = profiles
        self._directory = directory

    def _require_registered(self, employee_id: str) -> EmployeeProfile:
        employee_id = normalize_employee_id(employee_id)
        if self._directory.is_seeded(employee_id):
            raise ValidationError("Seeded manager profiles cannot be changed here")
        profile = self._profiles.get_by_id(employee_id)
        if not profile:
            raise NotFoundError(f"Employee {employee_id} not found")
        return profile

    def approve_employee(self, employee_id: str) -> EmployeeProfile:
        profile = self._require_registered(employee_id)
        if not profile.approved:
            self._profiles.set_approved(profile.employee_id, approved=True)
            logger.info("Approved employee %s", profile.employee_id)

        approved = replace(profile, approved=True)
        self._directory.put(approved)
        return approved

    def reject_employee(self, employee_id: str) -> None:
        """Delete the profile outright; shift entries stay behind as orphans."""

        profile = self._require_registered(employee_id)
        self._profiles.delete_by_id(profile.employee_id)
        self._directory.remove(profile.employee_id)
        logger.info("Rejected and deleted employee %s", profile.employee_id)

    def pending_employees(self) -> list[EmployeeProfile]:
        return [p for p in self._directory.all() if p.role == Role.EMPLOYEE and not p.approved]

    def approved_employees(self) -> list[EmployeeProfile]:
        return [p for p in self._directory.all() if p.role == Role.EMPLOYEE and p.approved]
