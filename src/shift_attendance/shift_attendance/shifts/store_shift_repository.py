from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..core.enums import ShiftType
from ..database.record_store import SHIFT_ENTRIES, RecordStore
from .model import PENDING, Approval, Approved, Pending, Rejected, ShiftEntry
from .repository import ShiftEntryRepository


def _to_approval(row: dict) -> Approval:
    approved = row.get("approved")
    if approved is None:
        return PENDING
    if bool(approved):
        return Approved(by=row["approved_by"], at=row["approved_at"])
    return Rejected(by=row["approved_by"], at=row["approved_at"], justification=row.get("other_remark") or "")


def _to_entry(row: dict) -> ShiftEntry:
    work_date = row["date"]
    if isinstance(work_date, str):
        work_date = parse_iso_date(work_date)
    return ShiftEntry(
        entry_id=row["id"],
        employee_id=row["employee_id"],
        work_date=work_date,
        shift_type=ShiftType(row["shift_type"]),
        created_at=row["created_at"],
        other_remark=row.get("other_remark"),
        approval=_to_approval(row),
    )


class StoreShiftEntryRepository(ShiftEntryRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, entry_id: str) -> Optional[ShiftEntry]:
        rows = self._store.select(SHIFT_ENTRIES, {"id": entry_id})
        return _to_entry(rows[0]) if rows else None

    def list_all(self) -> Sequence[ShiftEntry]:
        rows = self._store.select(SHIFT_ENTRIES, order_by="created_at", descending=True)
        return [_to_entry(r) for r in rows]

    def list_for_employee(self, employee_id: str) -> Sequence[ShiftEntry]:
        rows = self._store.select(SHIFT_ENTRIES, {"employee_id": employee_id}, order_by="created_at", descending=True)
        return [_to_entry(r) for r in rows]

    def create(
        self,
        *,
        employee_id: str,
        work_date: date,
        shift_type: ShiftType,
        other_remark: Optional[str],
    ) -> ShiftEntry:
        row = self._store.insert(
            SHIFT_ENTRIES,
            {
                "employee_id": employee_id,
                "date": work_date,
                "shift_type": shift_type.value,
                "other_remark": other_remark,
                "approved": None,
            },
        )
        return _to_entry(row)

    def record_decision(self, entry_id: str, approval: Approval) -> None:
        if isinstance(approval, Pending):
            raise ValueError("A decision cannot be reset to pending")

        patch = {
            "approved": isinstance(approval, Approved),
            "approved_by": approval.by,
            "approved_at": approval.at,
        }
        if isinstance(approval, Rejected):
            patch["other_remark"] = approval.justification
        self._store.update(SHIFT_ENTRIES, entry_id, patch)
