import os


class Config:
    # Standard workday; an empty value means the schedule is unknown
    WORK_START_TIME = os.environ.get("WORK_START_TIME", "09:00")
    WORK_END_TIME = os.environ.get("WORK_END_TIME", "18:00")

    DATE_FORMAT = os.environ.get("DATE_FORMAT", "%Y/%m/%d")
    # Empty means local time
    TIMEZONE = os.environ.get("TIMEZONE", "")
