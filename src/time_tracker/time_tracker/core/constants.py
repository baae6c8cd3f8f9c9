"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

import re

# Office hours offered by the entry form (inclusive), in 15 minute slots.
OFFICE_START_HOUR = 9
OFFICE_END_HOUR = 21
TIME_SLOT_MINUTES = 15

# Time-of-day values are parsed against this arbitrary calendar date.
REFERENCE_DATE = "2000-01-01"
TIME_FORMAT = "%H:%M"

MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 500
MAX_EMAIL_LENGTH = 254

# Bytes kept free below Flask's MAX_COOKIE_SIZE for flashed messages.
SESSION_COOKIE_HEADROOM = 512

EMAIL_PATTERN = re.compile(r"^[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE)

DEFAULT_HR_EMAIL = "hr@company.com"
DEFAULT_COMPANY_NAME = "Sense Projects Pvt Ltd"
DEFAULT_APP_NAME = "Sense Time Tracker"
DEFAULT_REPORT_TIMEOUT_SECONDS = 30
