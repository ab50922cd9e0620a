from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import now_local, today_and_tomorrow
from ..common.validators import normalize_employee_id, require_enum
from ..core.enums import ShiftType
from ..core.exceptions import (
    AuthorizationError,
    DateAlreadyUsedError,
    MissingRemarkError,
    NotFoundError,
    ValidationError,
)
from ..employees.directory import EmployeeDirectory
from .model import ShiftEntry
from .repository import ShiftEntryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DateOption:
    work_date: date
    label: str
    used: bool

    def to_dict(self) -> dict:
        return {"date": self.work_date.strftime("%Y-%m-%d"), "label": self.label, "used": self.used}


class ShiftSubmissionService:
    """Use case: an approved employee declares the shift for today or tomorrow.

    Backdating and scheduling further ahead are not possible: only the two
    literal dates returned by `available_dates` are accepted.
    """

    def __init__(
        self,
        entries: ShiftEntryRepository,
        directory: EmployeeDirectory,
        *,
        clock: Callable = now_local,
    ):
        self._entries = entries
        self._directory = directory
        self._clock = clock

    def _today(self, today: Optional[date]) -> date:
        return today or self._clock().date()

    def _used_dates(self, employee_id: str) -> set[date]:
        return {e.work_date for e in self._entries.list_for_employee(employee_id)}

    def available_dates(self, employee_id: str, *, today: Optional[date] = None) -> list[DateOption]:
        employee_id = normalize_employee_id(employee_id)
        used = self._used_dates(employee_id)
        first, second = today_and_tomorrow(self._today(today))
        return [
            DateOption(work_date=first, label="today", used=first in used),
            DateOption(work_date=second, label="tomorrow", used=second in used),
        ]

    def submit(
        self,
        *,
        employee_id: str,
        work_date: date,
        shift_type: ShiftType | str,
        other_remark: Optional[str] = None,
        today: Optional[date] = None,
    ) -> ShiftEntry:
        employee_id = normalize_employee_id(employee_id)
        profile = self._directory.get(employee_id)
        if not profile:
            raise NotFoundError(f"Employee {employee_id} not found")
        if not profile.approved:
            raise AuthorizationError("Your registration is still pending approval")

        shift_type = require_enum(shift_type, ShiftType, "shift type")

        if work_date not in today_and_tomorrow(self._today(today)):
            raise ValidationError("Only today or tomorrow can be selected")

        if work_date in self._used_dates(employee_id):
            raise DateAlreadyUsedError(f"You have already submitted an entry for {work_date:%Y-%m-%d}")

        remark = None
        if shift_type == ShiftType.OTHER:
            if not isinstance(other_remark, str) or not other_remark.strip():
                raise MissingRemarkError("Please provide a remark for other shift type")
            remark = other_remark.strip()

        entry = self._entries.create(
            employee_id=employee_id,
            work_date=work_date,
            shift_type=shift_type,
            other_remark=remark,
        )
        logger.info("Employee %s submitted %s for %s", employee_id, shift_type.value, work_date)
        return entry

    def history(self, employee_id: str) -> list[ShiftEntry]:
        """Employee's own entries, newest first."""

        items = list(self._entries.list_for_employee(normalize_employee_id(employee_id)))
        items.sort(key=lambda e: e.created_at, reverse=True)
        return items
