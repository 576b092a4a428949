from .config import settings, get_settings
from .logging_config import configure_logging
from .timestamps import (
    short_stamp,
    long_stamp,
    occurrence_stamp,
    iso_day,
    parse_display_date,
    matches_day
)

__all__ = [
    "settings",
    "get_settings",
    "configure_logging",
    "short_stamp",
    "long_stamp",
    "occurrence_stamp",
    "iso_day",
    "parse_display_date",
    "matches_day"
]
