from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Profile role used for access decisions."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    ADMIN = "admin"


class SessionRole(str, Enum):
    """Who is signed in to the HTTP session (gate that was passed)."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    HR = "hr"
    ADMIN = "admin"


class Department(str, Enum):
    OPERATIONS = "Operations"
    ENGINEERING = "Engineering"
    HUMAN_RESOURCE = "Human Resource"
    FINANCE = "Finance"
    SAFETY = "Safety"
    IT = "IT"
    SECURITY = "Security"
    PLANNING = "Planning"
    OTHERS = "Others"


class Section(str, Enum):
    """Engineering sub-units; a manager only sees entries of their own section."""

    QC = "QC"
    RTG = "RTG"
    MES = "MES"
    SHIFT_INCHARGE = "Shift Incharge"
    PLANNING = "Planning"
    STORE = "Store"
    INFRA = "Infra"
    OTHERS = "Others"


class ShiftType(str, Enum):
    FIRST_SHIFT = "1st_shift"
    SECOND_SHIFT = "2nd_shift"
    THIRD_SHIFT = "3rd_shift"
    LEAVE = "leave"
    MEDICAL = "medical"
    OT_OFF_DAY = "ot_off_day"
    OT_WEEK_OFF = "ot_week_off"
    OT_PUBLIC_HOLIDAY = "ot_public_holiday"
    OTHER = "other"

    @property
    def label(self) -> str:
        return SHIFT_TYPE_LABELS[self]

    @property
    def is_regular(self) -> bool:
        return self in {ShiftType.FIRST_SHIFT, ShiftType.SECOND_SHIFT, ShiftType.THIRD_SHIFT}

    @property
    def is_overtime(self) -> bool:
        return self.value.startswith("ot_")

    @property
    def is_leave(self) -> bool:
        return self in {ShiftType.LEAVE, ShiftType.MEDICAL}


SHIFT_TYPE_LABELS = {
    ShiftType.FIRST_SHIFT: "1st Shift",
    ShiftType.SECOND_SHIFT: "2nd Shift",
    ShiftType.THIRD_SHIFT: "3rd Shift",
    ShiftType.LEAVE: "Leave",
    ShiftType.MEDICAL: "Medical Leave",
    ShiftType.OT_OFF_DAY: "OT as Off Day",
    ShiftType.OT_WEEK_OFF: "OT as Week Off",
    ShiftType.OT_PUBLIC_HOLIDAY: "OT as Public Holiday",
    ShiftType.OTHER: "Other",
}


class ApprovalStatus(str, Enum):
    """Decision state of a shift entry (stored as NULL/1/0 in the `approved` column)."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
