"""Constants and formats.

Note: Keep constants here to avoid magic strings spread across code.
"""

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"
TIME_FORMAT_SECONDS = "%H:%M:%S"

DISPLAY_DATE_FORMAT = "%d/%m/%Y"
DISPLAY_TIME_FORMAT = "%H:%M"

DEFAULT_MYSQL_PORT = 3306
