"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Persisted key-value layout
USERS_KEY = "workHoursUsers"
REMEMBER_USER_KEY = "rememberUser"
SESSION_USER_KEY = "currentUser"

DEFAULT_HOURLY_RATE = 0.0
DEFAULT_DAILY_HOURS = 6.5
DEFAULT_WORKING_DAYS = 10

DEFAULT_SESSION_DAYS = 7

# Last day of the first pay cycle in a month
FIRST_HALF_LAST_DAY = 15

CHART_PERIOD_LIMIT = 6
CHART_REFERENCE_YEAR = 2024

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_ABBREVIATIONS = tuple(name[:3] for name in MONTH_NAMES)
