from .config import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

STORAGE_BACKEND = "memory"
DEFAULT_OVERTIME_THRESHOLD = 8
WEEKEND_DAYS = []
HOLIDAYS = []
ROSTER_FILE = ""

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

AUTO_INIT_DB = False
