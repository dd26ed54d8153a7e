from models.announcement import (
    DATE_FORMAT,
    DEFAULT_AUTHOR,
    Announcement,
    format_datetime,
    parse_datetime,
)

__all__ = [
    "DATE_FORMAT",
    "DEFAULT_AUTHOR",
    "Announcement",
    "format_datetime",
    "parse_datetime",
]
