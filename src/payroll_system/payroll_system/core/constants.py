"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DATE_FORMAT = "%m/%d/%Y"
TIME_FORMAT = "%H:%M"

DEFAULT_SHIFT_START = "08:00"
DEFAULT_SHIFT_END = "17:00"
DEFAULT_GRACE_MINUTES = 10
DEFAULT_BREAK_START = "12:00"
DEFAULT_BREAK_END = "13:00"

DEFAULT_OVERTIME_MULTIPLIER = 1.25
WEEKS_PER_MONTH = 4
LAST_WEEK_WINDOW_DAYS = 7

WEEK_KEY_SEPARATOR = "_"
