from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import ShiftType
from ..model import OTHours


class OvertimeCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime)."""

    @abstractmethod
    def hours_for(self, shift_type: ShiftType) -> OTHours:
        raise NotImplementedError

    @abstractmethod
    def weighted_hours(self, totals: OTHours) -> float:
        raise NotImplementedError
