from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import Department, Role, Section


@dataclass(frozen=True)
class EmployeeProfile:
    """Domain entity: employee profile.

    Manager profiles are seeded from configuration and never stored.
    """

    employee_id: str
    full_name: str
    department: Department
    section: Optional[Section] = None
    role: Role = Role.EMPLOYEE
    approved: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def can_decide_shifts(self) -> bool:
        return self.role in {Role.MANAGER, Role.ADMIN}

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "full_name": self.full_name,
            "department": self.department.value,
            "section": self.section.value if self.section else None,
            "role": self.role.value,
            "approved": self.approved,
        }
