from __future__ import annotations

from ...core.constants import (
    HOURS_PER_SHIFT,
    NIGHT_OT_RATE,
    OFF_DAY_OT_RATE,
    PUBLIC_HOLIDAY_OT_RATE,
    WEEK_OFF_OT_RATE,
)
from ...core.enums import ShiftType
from ..model import OTHours
from .base import OvertimeCalculator

H = HOURS_PER_SHIFT

_HOURS = {
    ShiftType.FIRST_SHIFT: OTHours(regular=H),
    ShiftType.SECOND_SHIFT: OTHours(regular=H),
    ShiftType.THIRD_SHIFT: OTHours(regular=H, night_ot=H),
    ShiftType.OT_OFF_DAY: OTHours(off_day_ot=H),
    ShiftType.OT_WEEK_OFF: OTHours(week_off_ot=H),
    ShiftType.OT_PUBLIC_HOLIDAY: OTHours(holiday_ot=H),
}


class StandardOvertimeCalculator(OvertimeCalculator):
    """Standard rule: a fixed 8 hours per entry; leave, medical and other count nothing."""

    def hours_for(self, shift_type: ShiftType) -> OTHours:
        return _HOURS.get(shift_type, OTHours())

    def weighted_hours(self, totals: OTHours) -> float:
        return (
            totals.night_ot * NIGHT_OT_RATE
            + totals.off_day_ot * OFF_DAY_OT_RATE
            + totals.week_off_ot * WEEK_OFF_OT_RATE
            + totals.holiday_ot * PUBLIC_HOLIDAY_OT_RATE
        )
