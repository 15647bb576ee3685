"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "ipt_demo_v1"
AUTH_TOKEN_KEY = "auth_token"
UNVERIFIED_EMAIL_KEY = "unverified_email"

MIN_PASSWORD_LENGTH = 6
DEFAULT_REQUEST_QTY = 1

SEED_ADMIN_EMAIL = "admin@example.com"
SEED_ADMIN_PASSWORD = "Password123!"
SEED_DEPARTMENTS = (
    ("Engineering", "Software team"),
    ("HR", "Human Resources"),
)
