from __future__ import annotations

from dataclasses import dataclass, field

from ..shifts.model import ShiftEntry


@dataclass(frozen=True)
class OTHours:
    """Hours split into the regular bucket and the four OT buckets."""

    regular: int = 0
    night_ot: int = 0
    off_day_ot: int = 0
    week_off_ot: int = 0
    holiday_ot: int = 0

    def __add__(self, other: "OTHours") -> "OTHours":
        return OTHours(
            regular=self.regular + other.regular,
            night_ot=self.night_ot + other.night_ot,
            off_day_ot=self.off_day_ot + other.off_day_ot,
            week_off_ot=self.week_off_ot + other.week_off_ot,
            holiday_ot=self.holiday_ot + other.holiday_ot,
        )

    @property
    def total_ot(self) -> int:
        return self.night_ot + self.off_day_ot + self.week_off_ot + self.holiday_ot


@dataclass(frozen=True)
class OTSummary:
    """Monthly overtime estimate. Not an authoritative payroll figure."""

    employee_id: str
    year_month: str
    regular_hours: int
    night_ot: int
    off_day_ot: int
    week_off_ot: int
    holiday_ot: int
    total_ot_hours: int
    weighted_ot_hours: float
    estimated_pay: float
    entries: list[ShiftEntry] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "month": self.year_month,
            "regular_hours": self.regular_hours,
            "night_ot": self.night_ot,
            "off_day_ot": self.off_day_ot,
            "week_off_ot": self.week_off_ot,
            "holiday_ot": self.holiday_ot,
            "total_ot_hours": self.total_ot_hours,
            "weighted_ot_hours": self.weighted_ot_hours,
            "estimated_pay": round(self.estimated_pay, 2),
            "entries": [e.to_dict() for e in self.entries],
        }
