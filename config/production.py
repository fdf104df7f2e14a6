import os

from config.config import Config

WORK_START_TIME = Config.WORK_START_TIME
WORK_END_TIME = Config.WORK_END_TIME

DATE_FORMAT = Config.DATE_FORMAT
# Training dates follow the school's zone, not the server's
TIMEZONE = os.getenv("TIMEZONE", "Asia/Tokyo")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "lms"),
}

DEBUG = False
