"""
Julian Day Engine — Конверсия григорианского календаря в Julian Day Number

Julian Day Number (JDN) — непрерывный целочисленный счёт дней от
астрономической эпохи (24 ноября 4714 г. до н.э., пролептический
григорианский календарь). Используется как общая «опора» для всех
конверсий: Gregorian ↔ JDN ↔ Persian.

Формулы (Richards / Tøndering) используют только целочисленную арифметику
с floor-делением Python, поэтому точны для любых годов, включая год 0 и
отрицательные годы (астрономическая нумерация: год 0 = 1 г. до н.э.).
Стандартный datetime (годы 1..9999) здесь не используется.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. gregorian_to_jdn монотонна по дате
2. jdn_to_gregorian(gregorian_to_jdn(y, m, d)) == (y, m, d) для любой валидной даты
3. jdn_to_gregorian тотальна на всех целых числах
"""

from dataclasses import dataclass
from typing import Final

from ptime.core.calendar.weekday import Weekday
from ptime.core.errors import InvalidDate

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# JDN для 1970-01-01 (Unix epoch)
UNIX_EPOCH_JDN: Final[int] = 2440588

SECONDS_PER_DAY: Final[int] = 86_400

# Дни в месяцах невисокосного года, индекс 0 не используется
_DAYS_IN_MONTH: Final[tuple[int, ...]] = (0, 31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

# Дни до начала месяца (накопительно) для невисокосного года
_DAYS_BEFORE_MONTH: Final[tuple[int, ...]] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Период повторения григорианского календаря: 400 лет = 146097 дней
_DAYS_PER_400_YEARS: Final[int] = 146_097


# =============================================================================
# ТИПЫ
# =============================================================================


@dataclass(frozen=True)
class GregorianDate:
    """Дата пролептического григорианского календаря (месяц 1-12)."""

    year: int
    month: int
    day: int

    @property
    def year_day(self) -> int:
        """День года, начиная с 0 (1 января = 0)"""
        return gregorian_year_day(self.year, self.month, self.day)

    def is_leap(self) -> bool:
        return is_gregorian_leap_year(self.year)


# =============================================================================
# ВИСОКОСНЫЕ ГОДЫ И ДЛИНЫ МЕСЯЦЕВ
# =============================================================================


def is_gregorian_leap_year(year: int) -> bool:
    """
    Високосный ли год по правилу 4/100/400.

    Args:
        year: Год (астрономическая нумерация, может быть 0 или отрицательным)

    Returns:
        True для високосного года

    Examples:
        >>> is_gregorian_leap_year(2000)
        True
        >>> is_gregorian_leap_year(1900)
        False
        >>> is_gregorian_leap_year(0)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_gregorian_month(year: int, month: int) -> int:
    """
    Количество дней в месяце.

    Args:
        year: Год (нужен для февраля)
        month: Месяц (1-12)

    Returns:
        28..31

    Raises:
        InvalidDate: Если месяц вне [1, 12]
    """
    if month < 1 or month > 12:
        raise InvalidDate(f"Gregorian month must be 1-12, got {month}")

    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month]


def validate_gregorian_date(year: int, month: int, day: int) -> None:
    """
    Проверка существования григорианской даты.

    Raises:
        InvalidDate: Если месяц вне [1, 12] или день вне диапазона месяца
    """
    limit = days_in_gregorian_month(year, month)
    if day < 1 or day > limit:
        raise InvalidDate(
            f"Gregorian day must be 1-{limit} for {year:04d}-{month:02d}, got {day}"
        )


def gregorian_year_day(year: int, month: int, day: int) -> int:
    """День года (0-based) для валидной григорианской даты."""
    result = _DAYS_BEFORE_MONTH[month] + day - 1
    if month > 2 and is_gregorian_leap_year(year):
        result += 1
    return result


# =============================================================================
# КОНВЕРСИЯ GREGORIAN ↔ JDN
# =============================================================================


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """
    Конверсия григорианской даты в Julian Day Number.

    Год начинается с марта (m = 0 — март), чтобы високосный день оказался
    последним днём «года». Floor-деление делает формулу периодичной с
    периодом 400 лет, поэтому она точна и для отрицательных годов.

    Args:
        year: Год (астрономическая нумерация)
        month: Месяц (1-12)
        day: День месяца

    Returns:
        JDN (целое число)

    Raises:
        InvalidDate: Если дата не существует

    Examples:
        >>> gregorian_to_jdn(2000, 1, 1)
        2451545
        >>> gregorian_to_jdn(1970, 1, 1)
        2440588
    """
    validate_gregorian_date(year, month, day)

    a = (14 - month) // 12
    y = year + 4800 - a
    m = month + 12 * a - 3

    return day + (153 * m + 2) // 5 + 365 * y + y // 4 - y // 100 + y // 400 - 32045


def jdn_to_gregorian(jdn: int) -> GregorianDate:
    """
    Конверсия Julian Day Number в григорианскую дату.

    Тотальная функция: любое целое число даёт валидную дату.

    Args:
        jdn: Julian Day Number

    Returns:
        GregorianDate

    Examples:
        >>> jdn_to_gregorian(2451545)
        GregorianDate(year=2000, month=1, day=1)
    """
    a = jdn + 32044
    b = (4 * a + 3) // _DAYS_PER_400_YEARS
    c = a - (_DAYS_PER_400_YEARS * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153

    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + m // 10

    return GregorianDate(year=year, month=month, day=day)


def jdn_weekday(jdn: int) -> Weekday:
    """
    Персидский день недели для JDN.

    JDN mod 7 == 0 соответствует понедельнику; суббота = 0 в персидской неделе.

    Examples:
        >>> jdn_weekday(2451545)  # 2000-01-01, суббота
        <Weekday.SATURDAY: 0>
    """
    return Weekday((jdn + 2) % 7)
