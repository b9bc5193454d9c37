"""
ptime — конверсия между персидским (Solar Hijri) и григорианским календарями

Julian Day Number используется как общая опора для всех конверсий.
Месяц персидской даты нумеруется с 0 (0 = Farvardin), григорианский — с 1.

Example:
    >>> import ptime
    >>> p_tm = ptime.from_gregorian_date(2016, 3, 21)
    >>> (p_tm.year, p_tm.month, p_tm.day)
    (1395, 0, 2)
    >>> p_tm.to_string("yyyy/MM/dd")
    '1395/01/02'
"""

from ptime.clock import Clock, FixedClock, Instant, SystemClock
from ptime.config import DEFAULT_FORMAT_CONFIG, DEFAULT_PATTERN, FormatConfig
from ptime.contracts import from_dict, to_dict
from ptime.core.calendar import (
    GregorianDate,
    PersianDate,
    Weekday,
    gregorian_to_jdn,
    is_gregorian_leap_year,
    is_persian_leap_year,
    jdn_to_gregorian,
    jdn_to_persian,
    persian_to_jdn,
)
from ptime.core.domain import (
    GregorianDateTime,
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
from ptime.core.errors import InvalidDate, InvalidTime, PersianTimeError
from ptime.format import format_persian

__version__ = "0.3.0"

__all__ = [
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
    # Models
    "PersianDateTime",
    "GregorianDateTime",
    "PersianDate",
    "GregorianDate",
    "Weekday",
    # Calendar engines
    "gregorian_to_jdn",
    "jdn_to_gregorian",
    "persian_to_jdn",
    "jdn_to_persian",
    "is_gregorian_leap_year",
    "is_persian_leap_year",
    # Formatting
    "format_persian",
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    "DEFAULT_PATTERN",
    # Serialization
    "to_dict",
    "from_dict",
    # Clock
    "Clock",
    "SystemClock",
    "FixedClock",
    "Instant",
    # Errors
    "PersianTimeError",
    "InvalidDate",
    "InvalidTime",
]
