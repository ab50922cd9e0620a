from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import EmployeeProfile


class ProfileRepository(Protocol):
    """Repository interface for employee profiles.

    Services depend on this interface, not on a concrete store.
    """

    def get_by_id(self, employee_id: str) -> Optional[EmployeeProfile]:
        raise NotImplementedError

    def list_all(self) -> Sequence[EmployeeProfile]:
        raise NotImplementedError

    def create(self, profile: EmployeeProfile) -> EmployeeProfile:
        raise NotImplementedError

    def set_approved(self, employee_id: str, *, approved: bool) -> None:
        raise NotImplementedError

    def delete_by_id(self, employee_id: str) -> None:
        raise NotImplementedError
