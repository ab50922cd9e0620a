from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Department, Role, Section
from ..database.record_store import PROFILES, RecordStore
from .model import EmployeeProfile
from .repository import ProfileRepository


def _to_profile(row: dict) -> EmployeeProfile:
    return EmployeeProfile(
        employee_id=row["id"],
        full_name=row["full_name"],
        department=Department(row["department"]),
        section=Section(row["section"]) if row.get("section") else None,
        role=Role(row.get("role") or Role.EMPLOYEE.value),
        approved=bool(row.get("is_approved")),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class StoreProfileRepository(ProfileRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, employee_id: str) -> Optional[EmployeeProfile]:
        rows = self._store.select(PROFILES, {"id": employee_id})
        return _to_profile(rows[0]) if rows else None

    def list_all(self) -> Sequence[EmployeeProfile]:
        return [_to_profile(r) for r in self._store.select(PROFILES)]

    def create(self, profile: EmployeeProfile) -> EmployeeProfile:
        row = self._store.insert(
            PROFILES,
            {
                "id": profile.employee_id,
                "full_name": profile.full_name,
                "department": profile.department.value,
                "section": profile.section.value if profile.section else None,
                "role": profile.role.value,
                "is_approved": profile.approved,
            },
        )
        return _to_profile(row)

    def set_approved(self, employee_id: str, *, approved: bool) -> None:
        self._store.update(PROFILES, employee_id, {"is_approved": approved})

    def delete_by_id(self, employee_id: str) -> None:
        self._store.delete(PROFILES, employee_id)
