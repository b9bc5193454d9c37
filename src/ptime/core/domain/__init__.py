"""
Domain value types.

Contains the immutable date/time values built on top of the calendar engines:
GregorianDateTime and PersianDateTime, plus the construction helpers.
"""

from ptime.core.domain.gregorian_datetime import GregorianDateTime
from ptime.core.domain.persian_datetime import (
    PersianDateTime,
    at,
    at_utc,
    from_gregorian,
    from_gregorian_components,
    from_gregorian_date,
    from_persian_components,
    from_persian_date,
    now,
    now_utc,
)

__all__ = [
    # Gregorian model
    "GregorianDateTime",
    # Persian model
    "PersianDateTime",
    # Construction
    "from_gregorian",
    "from_gregorian_components",
    "from_gregorian_date",
    "from_persian_components",
    "from_persian_date",
    "at",
    "at_utc",
    "now",
    "now_utc",
]
