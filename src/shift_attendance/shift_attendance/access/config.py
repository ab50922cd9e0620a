from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from ..core.constants import ADMIN_ID
from ..core.enums import Department, Role, Section
from ..employees.model import EmployeeProfile


@dataclass(frozen=True)
class ManagerSeed:
    manager_id: str
    full_name: str
    section: Section
    password: str


DEFAULT_MANAGERS = (
    ManagerSeed("QC_MGR", "QC Manager", Section.QC, "SH123"),
    ManagerSeed("RTG_MGR", "RTG Manager", Section.RTG, "AY123"),
    ManagerSeed("MES_MGR", "MES Manager", Section.MES, "MC123"),
    ManagerSeed("PLN_MGR", "Planning Manager", Section.PLANNING, "SA123"),
    ManagerSeed("STR_MGR", "Store Manager", Section.STORE, "IF123"),
    ManagerSeed("INF_MGR", "Infra Manager", Section.INFRA, "HD123"),
    ManagerSeed("SHIFT_MGR", "Shift Manager", Section.SHIFT_INCHARGE, "TA123"),
)

DEFAULT_ADMIN_CODE = "ADMIN123"
DEFAULT_HR_CODE = "Akram"


@dataclass
class AccessConfig:
    """Gate codes and seeded manager profiles, built once at process start.

    Manager passwords change only through AccessService.change_manager_password.
    """

    admin_code: str = DEFAULT_ADMIN_CODE
    hr_code: str = DEFAULT_HR_CODE
    managers: dict[str, EmployeeProfile] = field(default_factory=dict)
    manager_passwords: dict[str, str] = field(default_factory=dict)

    @classmethod
    def build(
        cls,
        *,
        admin_code: Optional[str] = None,
        hr_code: Optional[str] = None,
        password_overrides: Optional[Mapping[str, str]] = None,
        seeds=DEFAULT_MANAGERS,
    ) -> "AccessConfig":
        overrides = dict(password_overrides or {})
        managers: dict[str, EmployeeProfile] = {}
        passwords: dict[str, str] = {}
        for seed in seeds:
            managers[seed.manager_id] = EmployeeProfile(
                employee_id=seed.manager_id,
                full_name=seed.full_name,
                department=Department.ENGINEERING,
                section=seed.section,
                role=Role.MANAGER,
                approved=True,
            )
            passwords[seed.manager_id] = overrides.get(seed.manager_id, seed.password)
        return cls(
            admin_code=admin_code or DEFAULT_ADMIN_CODE,
            hr_code=hr_code or DEFAULT_HR_CODE,
            managers=managers,
            manager_passwords=passwords,
        )

    @classmethod
    def from_settings(cls, settings) -> "AccessConfig":
        return cls.build(
            admin_code=getattr(settings, "ADMIN_CODE", None),
            hr_code=getattr(settings, "HR_CODE", None),
            password_overrides=getattr(settings, "MANAGER_PASSWORDS", None),
        )

    def seeded_profiles(self) -> list[EmployeeProfile]:
        admin = EmployeeProfile(
            employee_id=ADMIN_ID,
            full_name="Administrator",
            department=Department.OTHERS,
            role=Role.ADMIN,
            approved=True,
        )
        return [*self.managers.values(), admin]
