"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ADMIN_LOGIN_ID = "admin"
ADMIN_DISPLAY_NAME = "Administrator"
DEFAULT_ADMIN_PASSWORD = "admin123"
MIN_PASSWORD_LENGTH = 6

# Rate derivation: daily = monthly / 30, hourly = daily / 8
DAYS_PER_MONTH = 30
HOURS_PER_DAY = 8

ADVANCE_CAP_RATIO = 0.5
INITIAL_ADVANCE_REASON = "Initial onboarding advance"

UNKNOWN_LABEL = "Unknown"
DEFAULT_HISTORY_LIMIT = 50

# Key-value storage namespace
KEY_EMPLOYEES = "ft_employees"
KEY_PROJECTS = "ft_projects"
KEY_ATTENDANCE = "ft_attendance"
KEY_ADVANCES = "ft_advances"
KEY_PAYOUTS = "ft_payouts"
KEY_ADMIN_PASSWORD = "ft_admin_password"

ALL_COLLECTION_KEYS = (KEY_EMPLOYEES, KEY_PROJECTS, KEY_ATTENDANCE, KEY_ADVANCES, KEY_PAYOUTS)

CSV_COLUMNS = ("Employee", "Role", "Days Worked", "OT Hours", "Advances", "Net Payable")
