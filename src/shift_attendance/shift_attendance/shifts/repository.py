from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import ShiftType
from .model import Approval, ShiftEntry


class ShiftEntryRepository(Protocol):
    def get_by_id(self, entry_id: str) -> Optional[ShiftEntry]:
        raise NotImplementedError

    def list_all(self) -> Sequence[ShiftEntry]:
        """All entries, newest first."""

        raise NotImplementedError

    def list_for_employee(self, employee_id: str) -> Sequence[ShiftEntry]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        shift_type: ShiftType,
        other_remark: Optional[str],
    ) -> ShiftEntry:
        raise NotImplementedError

    def record_decision(self, entry_id: str, approval: Approval) -> None:
        """Persist approved/approved_by/approved_at; a rejection also overwrites other_remark."""

        raise NotImplementedError
