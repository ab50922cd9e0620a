from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Iterator, Mapping, Optional

from ..common.datetime_utils import iter_month_dates, parse_year_month
from ..common.validators import normalize_employee_id
from ..core.constants import ROSTER_WEEK_DAYS
from ..core.enums import ApprovalStatus, ShiftType
from ..shifts.model import ShiftEntry
from ..shifts.repository import ShiftEntryRepository


@dataclass(frozen=True)
class RosterDay:
    work_date: date
    shift_type: Optional[ShiftType]
    status: Optional[ApprovalStatus]
    remark: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "date": self.work_date.strftime("%Y-%m-%d"),
            "shift_type": self.shift_type.value if self.shift_type else None,
            "status": self.status.value if self.status else None,
            "remark": self.remark,
        }


@dataclass(frozen=True)
class WeeklyStats:
    regular_shifts: int
    overtime_shifts: int
    leaves: int

    def to_dict(self) -> dict:
        return {
            "regular_shifts": self.regular_shifts,
            "overtime_shifts": self.overtime_shifts,
            "leaves": self.leaves,
        }


class RosterDays:
    """Lazy, restartable sequence of one RosterDay per calendar day of a month."""

    def __init__(self, year: int, month: int, by_date: Mapping[date, ShiftEntry]):
        self._year = year
        self._month = month
        self._by_date = by_date

    def __len__(self) -> int:
        return calendar.monthrange(self._year, self._month)[1]

    def __iter__(self) -> Iterator[RosterDay]:
        for d in iter_month_dates(self._year, self._month):
            entry = self._by_date.get(d)
            if entry is None:
                yield RosterDay(work_date=d, shift_type=None, status=None)
            else:
                yield RosterDay(work_date=d, shift_type=entry.shift_type, status=entry.status, remark=entry.other_remark)


def weekly_stats(days: Iterable[RosterDay], *, chunk: int = ROSTER_WEEK_DAYS) -> list[WeeklyStats]:
    """Fixed 7-day blocks counted from day 1 of the month (not calendar weeks)."""

    day_list = list(days)
    weeks: list[WeeklyStats] = []
    for i in range(0, len(day_list), chunk):
        block = [d.shift_type for d in day_list[i : i + chunk] if d.shift_type]
        weeks.append(
            WeeklyStats(
                regular_shifts=sum(1 for s in block if s.is_regular),
                overtime_shifts=sum(1 for s in block if s.is_overtime),
                leaves=sum(1 for s in block if s.is_leave),
            )
        )
    return weeks


@dataclass(frozen=True)
class RosterMonth:
    employee_id: str
    year_month: str
    days: RosterDays
    weeks: list[WeeklyStats]

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "month": self.year_month,
            "days": [d.to_dict() for d in self.days],
            "weeks": [w.to_dict() for w in self.weeks],
        }


class RosterProjector:
    def __init__(self, entries: ShiftEntryRepository):
        self._entries = entries

    def project(self, employee_id: str, year_month: str) -> RosterMonth:
        employee_id = normalize_employee_id(employee_id)
        year, month = parse_year_month(year_month)

        by_date: dict[date, ShiftEntry] = {}
        for entry in self._entries.list_for_employee(employee_id):
            by_date.setdefault(entry.work_date, entry)

        days = RosterDays(year, month, by_date)
        return RosterMonth(
            employee_id=employee_id,
            year_month=f"{year:04d}-{month:02d}",
            days=days,
            weeks=weekly_stats(days),
        )
