from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.constants import UNKNOWN_EMPLOYEE
from ..core.enums import Role, Section
from .model import EmployeeProfile
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


class EmployeeDirectory:
    """In-memory map employee id -> profile.

    Merged from the stored profiles and the seeded (configured) profiles.
    Seeded ids always win so a stored row can never shadow a manager.
    """

    def __init__(self, profiles: ProfileRepository, seeded: Iterable[EmployeeProfile] = ()):
        self._profiles = profiles
        self._seeded = {p.employee_id: p for p in seeded}
        self._by_id: dict[str, EmployeeProfile] = dict(self._seeded)

    def refresh(self) -> None:
        merged = {p.employee_id: p for p in self._profiles.list_all()}
        merged.update(self._seeded)
        self._by_id = merged
        logger.debug("Directory refreshed (%d profiles)", len(merged))

    def get(self, employee_id: str) -> Optional[EmployeeProfile]:
        return self._by_id.get(employee_id)

    def is_seeded(self, employee_id: str) -> bool:
        return employee_id in self._seeded

    def put(self, profile: EmployeeProfile) -> None:
        if self.is_seeded(profile.employee_id):
            return
        self._by_id[profile.employee_id] = profile

    def remove(self, employee_id: str) -> None:
        if not self.is_seeded(employee_id):
            self._by_id.pop(employee_id, None)

    def all(self) -> list[EmployeeProfile]:
        return list(self._by_id.values())

    def managers(self) -> list[EmployeeProfile]:
        return [p for p in self._by_id.values() if p.role == Role.MANAGER]

    def in_section(self, section: Section) -> list[EmployeeProfile]:
        return [p for p in self._by_id.values() if p.section == section and p.role == Role.EMPLOYEE]

    def section_of(self, employee_id: str) -> Optional[Section]:
        profile = self._by_id.get(employee_id)
        return profile.section if profile else None

    def name_of(self, employee_id: Optional[str]) -> str:
        profile = self._by_id.get(employee_id) if employee_id else None
        return profile.full_name if profile else UNKNOWN_EMPLOYEE
