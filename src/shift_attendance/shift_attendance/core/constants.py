"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

HOURS_PER_SHIFT = 8
DEFAULT_BASE_HOURLY_RATE = 10.0

NIGHT_OT_RATE = 2.0
OFF_DAY_OT_RATE = 1.5
WEEK_OFF_OT_RATE = 2.0
PUBLIC_HOLIDAY_OT_RATE = 2.0

MIN_JUSTIFICATION_LENGTH = 10
ROSTER_WEEK_DAYS = 7

ADMIN_ID = "ADMIN"
UNKNOWN_EMPLOYEE = "Unknown"
