"""Shared settings; environment modules override what differs."""

import os

from . import env_list

SECRET_KEY = os.environ.get("SECRET_KEY") or "change-me"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "roster_attendance"),
}

# "mysql" or "memory"
STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "mysql").lower()

# Hours per day before overtime starts, used until an admin stores another value.
DEFAULT_OVERTIME_THRESHOLD = int(os.getenv("DEFAULT_OVERTIME_THRESHOLD", "8"))

# date.weekday() numbers excluded from expected working days (Friday/Saturday = "4,5").
WEEKEND_DAYS = [int(d) for d in env_list("WEEKEND_DAYS")]
# ISO dates excluded from expected working days.
HOLIDAYS = env_list("HOLIDAYS")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEBUG = bool(int(os.getenv("DEBUG", "0")))
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))

# CSV roster loaded into the "memory" storage backend (ignored for mysql).
ROSTER_FILE = os.getenv("ROSTER_FILE", "")
