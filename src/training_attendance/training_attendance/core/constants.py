"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_WORK_START_TIME = "09:00"
DEFAULT_WORK_END_TIME = "18:00"

DEFAULT_DATE_FORMAT = "%Y/%m/%d"

BLANK_TIME_STEP_MINUTES = 15
BLANK_TIME_LIMIT_MINUTES = 480

HOURS_PER_DAY = 24
MINUTES_PER_HOUR = 60
