import os

WORK_START_TIME = "09:00"
WORK_END_TIME = "18:00"

DATE_FORMAT = "%Y/%m/%d"
TIMEZONE = ""

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "lms_test"),
}

DEBUG = False
TESTING = True
