from __future__ import annotations

from typing import Optional

from ..common.datetime_utils import in_month, parse_year_month
from ..common.validators import normalize_employee_id
from ..core.constants import DEFAULT_BASE_HOURLY_RATE
from ..shifts.model import Approved
from ..shifts.repository import ShiftEntryRepository
from .calculator.base import OvertimeCalculator
from .calculator.standard_calculator import StandardOvertimeCalculator
from .model import OTHours, OTSummary


class OvertimeService:
    def __init__(
        self,
        entries: ShiftEntryRepository,
        *,
        base_hourly_rate: float = DEFAULT_BASE_HOURLY_RATE,
        calculator: Optional[OvertimeCalculator] = None,
    ):
        self._entries = entries
        self._base_hourly_rate = float(base_hourly_rate)
        self._calculator = calculator or StandardOvertimeCalculator()

    def calculate(self, employee_id: str, year_month: str) -> OTSummary:
        employee_id = normalize_employee_id(employee_id)
        year, month = parse_year_month(year_month)

        # Only approved entries count; pending and rejected are excluded entirely.
        counted = [
            e
            for e in self._entries.list_for_employee(employee_id)
            if in_month(e.work_date, year, month) and isinstance(e.approval, Approved)
        ]
        counted.sort(key=lambda e: e.work_date)

        totals = OTHours()
        for entry in counted:
            totals = totals + self._calculator.hours_for(entry.shift_type)

        weighted = self._calculator.weighted_hours(totals)
        return OTSummary(
            employee_id=employee_id,
            year_month=f"{year:04d}-{month:02d}",
            regular_hours=totals.regular,
            night_ot=totals.night_ot,
            off_day_ot=totals.off_day_ot,
            week_off_ot=totals.week_off_ot,
            holiday_ot=totals.holiday_ot,
            total_ot_hours=totals.total_ot,
            weighted_ot_hours=weighted,
            estimated_pay=weighted * self._base_hourly_rate,
            entries=counted,
        )
