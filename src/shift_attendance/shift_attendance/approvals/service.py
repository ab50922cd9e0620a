from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Callable, Optional

from ..common.datetime_utils import now_local
from ..common.validators import normalize_employee_id, require_enum, require_min_length
from ..core.constants import MIN_JUSTIFICATION_LENGTH
from ..core.enums import Department, Role, Section, ShiftType
from ..core.exceptions import (
    AuthorizationError,
    InvalidTransitionError,
    JustificationTooShortError,
    NotFoundError,
)
from ..employees.directory import EmployeeDirectory
from ..employees.model import EmployeeProfile
from ..shifts.model import Approved, Rejected, ShiftEntry
from ..shifts.repository import ShiftEntryRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EntryFilters:
    """Exact-match filters for the history and HR views (None = no filter)."""

    work_date: Optional[date] = None
    employee_id: Optional[str] = None
    shift_type: Optional[ShiftType] = None
    department: Optional[Department] = None
    section: Optional[Section] = None

    def matches(self, entry: ShiftEntry, owner: Optional[EmployeeProfile]) -> bool:
        if self.work_date and entry.work_date != self.work_date:
            return False
        if self.employee_id and entry.employee_id != self.employee_id:
            return False
        if self.shift_type and entry.shift_type != self.shift_type:
            return False
        if self.department and (owner is None or owner.department != self.department):
            return False
        if self.section:
            # Sections only exist inside Engineering; without that department filter nothing matches.
            if self.department != Department.ENGINEERING:
                return False
            if owner is None or owner.section != self.section:
                return False
        return True


class ApprovalEngine:
    """Section-scoped approval of shift entries.

    Pending -> Approved and Pending -> Rejected are the only transitions; both
    targets are terminal. Repeating the same decision is a no-op that keeps the
    first approver and timestamp.

    `approve`/`reject` do not check the approver's section unless
    `enforce_section` is on; by default only the queue views are section-scoped.
    """

    def __init__(
        self,
        entries: ShiftEntryRepository,
        directory: EmployeeDirectory,
        *,
        enforce_section: bool = False,
        clock: Callable = now_local,
    ):
        self._entries = entries
        self._directory = directory
        self._enforce_section = bool(enforce_section)
        self._clock = clock

    def _require_approver(self, approver_id: str) -> EmployeeProfile:
        approver = self._directory.get(normalize_employee_id(approver_id))
        if not approver or not approver.can_decide_shifts:
            raise AuthorizationError("Only managers or admin can decide shift entries")
        return approver

    def _require_entry(self, entry_id: str) -> ShiftEntry:
        entry = self._entries.get_by_id(entry_id)
        if not entry:
            raise NotFoundError(f"Shift entry {entry_id} not found")
        return entry

    def _check_section(self, approver: EmployeeProfile, entry: ShiftEntry) -> None:
        if not self._enforce_section or approver.role != Role.MANAGER:
            return
        if self._directory.section_of(entry.employee_id) != approver.section:
            raise AuthorizationError("Entry belongs to another section")

    def approve(self, entry_id: str, approver_id: str) -> ShiftEntry:
        approver = self._require_approver(approver_id)
        entry = self._require_entry(entry_id)
        self._check_section(approver, entry)

        if isinstance(entry.approval, Approved):
            return entry
        if isinstance(entry.approval, Rejected):
            raise InvalidTransitionError("Entry has already been rejected")

        approval = Approved(by=approver.employee_id, at=self._clock())
        self._entries.record_decision(entry.entry_id, approval)
        logger.info("Entry %s approved by %s", entry.entry_id, approver.employee_id)
        return replace(entry, approval=approval)

    def reject(self, entry_id: str, approver_id: str, justification: str) -> ShiftEntry:
        approver = self._require_approver(approver_id)
        require_min_length(justification, "Justification", MIN_JUSTIFICATION_LENGTH, exc=JustificationTooShortError)
        entry = self._require_entry(entry_id)
        self._check_section(approver, entry)

        if isinstance(entry.approval, Rejected):
            return entry
        if isinstance(entry.approval, Approved):
            raise InvalidTransitionError("Entry has already been approved")

        approval = Rejected(by=approver.employee_id, at=self._clock(), justification=justification)
        self._entries.record_decision(entry.entry_id, approval)
        logger.info("Entry %s rejected by %s", entry.entry_id, approver.employee_id)
        return replace(entry, approval=approval, other_remark=justification)

    def _section_entries(self, section: Section | str) -> list[ShiftEntry]:
        section = require_enum(section, Section, "section")
        return [e for e in self._entries.list_all() if self._directory.section_of(e.employee_id) == section]

    def pending_for(self, section: Section | str) -> list[ShiftEntry]:
        return [e for e in self._section_entries(section) if e.is_pending]

    def history_for(self, section: Section | str, filters: Optional[EntryFilters] = None) -> list[ShiftEntry]:
        filters = filters or EntryFilters()
        return [
            e
            for e in self._section_entries(section)
            if not e.is_pending and filters.matches(e, self._directory.get(e.employee_id))
        ]

    def section_entries(self, section: Section | str) -> list[ShiftEntry]:
        """Every entry of the section regardless of state (manager CSV export)."""

        return self._section_entries(section)

    def hr_view(self, filters: Optional[EntryFilters] = None) -> list[ShiftEntry]:
        filters = filters or EntryFilters()
        return [e for e in self._entries.list_all() if filters.matches(e, self._directory.get(e.employee_id))]

    def section_employees(self, section: Section | str) -> list[EmployeeProfile]:
        return self._directory.in_section(require_enum(section, Section, "section"))
