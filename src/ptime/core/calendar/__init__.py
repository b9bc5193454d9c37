"""
Calendar engines для ptime

Чистая целочисленная арифметика конверсий:
- Julian Day Engine: Gregorian ↔ JDN
- Persian Calendar Engine: Persian ↔ JDN
- Время суток: валидация и декомпозиция секунд от эпохи
"""

# Weekday
from ptime.core.calendar.weekday import Weekday

# Julian Day Engine
from ptime.core.calendar.julian_day import (
    SECONDS_PER_DAY,
    UNIX_EPOCH_JDN,
    GregorianDate,
    days_in_gregorian_month,
    gregorian_to_jdn,
    gregorian_year_day,
    is_gregorian_leap_year,
    jdn_to_gregorian,
    jdn_weekday,
    validate_gregorian_date,
)

# Persian Calendar Engine
from ptime.core.calendar.persian import (
    LEAP_RESIDUES,
    PERSIAN_EPOCH_JDN,
    PersianDate,
    days_in_persian_month,
    days_in_persian_year,
    is_persian_leap_year,
    jdn_to_persian,
    persian_to_jdn,
    persian_year_day,
    validate_persian_date,
)

# Time of day
from ptime.core.calendar.time_of_day import (
    MAX_NANOSECOND,
    MAX_UTC_OFFSET_SECONDS,
    NANOSECONDS_PER_SECOND,
    combine_local_seconds,
    split_local_seconds,
    validate_time,
    validate_utc_offset,
)

__all__ = [
    # Weekday
    "Weekday",
    # Julian Day Engine: Constants
    "SECONDS_PER_DAY",
    "UNIX_EPOCH_JDN",
    # Julian Day Engine: Types
    "GregorianDate",
    # Julian Day Engine: Functions
    "days_in_gregorian_month",
    "gregorian_to_jdn",
    "gregorian_year_day",
    "is_gregorian_leap_year",
    "jdn_to_gregorian",
    "jdn_weekday",
    "validate_gregorian_date",
    # Persian Calendar Engine: Constants
    "LEAP_RESIDUES",
    "PERSIAN_EPOCH_JDN",
    # Persian Calendar Engine: Types
    "PersianDate",
    # Persian Calendar Engine: Functions
    "days_in_persian_month",
    "days_in_persian_year",
    "is_persian_leap_year",
    "jdn_to_persian",
    "persian_to_jdn",
    "persian_year_day",
    "validate_persian_date",
    # Time of day: Constants
    "MAX_NANOSECOND",
    "MAX_UTC_OFFSET_SECONDS",
    "NANOSECONDS_PER_SECOND",
    # Time of day: Functions
    "combine_local_seconds",
    "split_local_seconds",
    "validate_time",
    "validate_utc_offset",
]
