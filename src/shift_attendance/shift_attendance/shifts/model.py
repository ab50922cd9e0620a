from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from ..core.enums import ApprovalStatus, ShiftType


@dataclass(frozen=True)
class Pending:
    @property
    def status(self) -> ApprovalStatus:
        return ApprovalStatus.PENDING


@dataclass(frozen=True)
class Approved:
    by: str
    at: datetime

    @property
    def status(self) -> ApprovalStatus:
        return ApprovalStatus.APPROVED


@dataclass(frozen=True)
class Rejected:
    by: str
    at: datetime
    justification: str

    @property
    def status(self) -> ApprovalStatus:
        return ApprovalStatus.REJECTED


Approval = Union[Pending, Approved, Rejected]
PENDING = Pending()


@dataclass(frozen=True)
class ShiftEntry:
    """Domain entity: one employee's shift declaration for one date."""

    entry_id: str
    employee_id: str
    work_date: date
    shift_type: ShiftType
    created_at: datetime
    other_remark: Optional[str] = None
    approval: Approval = PENDING

    @property
    def status(self) -> ApprovalStatus:
        return self.approval.status

    @property
    def is_pending(self) -> bool:
        return isinstance(self.approval, Pending)

    @property
    def decided_by(self) -> Optional[str]:
        return None if self.is_pending else self.approval.by

    @property
    def decided_at(self) -> Optional[datetime]:
        return None if self.is_pending else self.approval.at

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "employee_id": self.employee_id,
            "date": self.work_date.strftime("%Y-%m-%d"),
            "shift_type": self.shift_type.value,
            "shift_label": self.shift_type.label,
            "other_remark": self.other_remark,
            "status": self.status.value,
            "approved_by": self.decided_by,
            "approved_at": self.decided_at.strftime("%Y-%m-%d %H:%M:%S") if self.decided_at else None,
            "created_at": self.created_at.strftime("%Y-%m-%d %H:%M:%S"),
        }
