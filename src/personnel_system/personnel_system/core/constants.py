"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

MINIMUM_EMPLOYEE_AGE = 18
DEFAULT_PAGE_SIZE = 5
DEFAULT_SALARY_CEILING = 10000
DEFAULT_UPLOAD_TIMEOUT = 30

STORAGE_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
CALENDAR_DATETIME_FORMAT = "%Y-%m-%d %H:%M"

EMPLOYEE_REQUIRED_FIELDS = (
    "full_name",
    "email",
    "phone",
    "date_of_birth",
    "job_title",
    "department",
    "salary",
    "start_date",
)
