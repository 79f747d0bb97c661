"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

CSV_BOM = "\ufeff"
CSV_DELIMITER = ","
CSV_LINE_TERMINATOR = "\n"

HIGH_ATTENDANCE_PERCENT = 80
MEDIUM_ATTENDANCE_PERCENT = 60

DEFAULT_WEEKDAYS_ONLY = False
