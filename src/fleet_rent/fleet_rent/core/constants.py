"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

MORNING_DEADLINE = time(17, 0)
OVERNIGHT_DEADLINE = time(5, 0)

DEFAULT_BLOCKING_LOOKBACK_DAYS = 30
DEFAULT_CALENDAR_DAYS = 7
MAX_CALENDAR_DAYS = 31
