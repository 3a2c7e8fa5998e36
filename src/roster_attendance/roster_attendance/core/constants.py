"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_OVERTIME_THRESHOLD = 8
MIN_OVERTIME_THRESHOLD = 0
MAX_OVERTIME_THRESHOLD = 24

NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_HOUR = 3600 * NANOS_PER_SECOND

ISO_DATE_FORMAT = "%Y-%m-%d"
CLOCK_TIME_FORMAT = "%H:%M"

MISSING_VALUE = "-"
