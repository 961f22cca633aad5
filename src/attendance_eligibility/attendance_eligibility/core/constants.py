"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ALL_SUBJECTS = "ALL"

MEDICAL_BONUS_PERCENT = 5.0
MAX_PERCENT = 100.0
ELIGIBILITY_THRESHOLD_PERCENT = 80.0

DEFAULT_DATA_FILE = "attendance-data.json"
DEFAULT_CLASS_TIME_RANGE = "08:00 to 15:00"

MEDICAL_BONUS_TEXT = "Adds +5% (max 100%)."
