"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STUDENTS_KEY = "students"
ATTENDANCE_KEY = "attendance"

MOBILE_MIN_LENGTH = 10
DEFAULT_WINDOW_MONTHS = 6

# Monday=0 .. Friday=4
WORKING_WEEKDAYS = frozenset(range(5))
