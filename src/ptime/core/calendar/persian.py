"""
Persian Calendar Engine — Конверсия Julian Day Number ↔ персидский календарь

Солнечная хиджра (Solar Hijri): 12 месяцев, год начинается с Навруза.
Месяцы нумеруются с 0 (0 = Farvardin, ..., 11 = Esfand).

Длины месяцев:
- месяцы 0-5: 31 день
- месяцы 6-10: 30 дней
- месяц 11: 29 дней, в високосный год 30

ПРАВИЛО ВИСОКОСНЫХ ЛЕТ (33-летний арифметический цикл):
    год високосный ⇔ year mod 33 ∈ {1, 5, 9, 13, 17, 22, 26, 30}
    (эквивалентно: (25·year + 11) mod 33 < 8)

    В каждом 33-летнем цикле 8 високосных лет → 33·365 + 8 = 12053 дня.
    Для современной эпохи правило совпадает с опубликованными таблицами
    (1395, 1399, 1403, 1408 — високосные; 1394, 1400, 1404, 1407 — нет).

ЭПОХА:
    PERSIAN_EPOCH_JDN — JDN дня 1 Farvardin 1 г. при 33-летнем правиле.
    Привязка: 1 Farvardin 1395 = 2016-03-20 (JDN 2457468).

Год 0 и отрицательные годы используют астрономическую нумерацию
(год 0 существует), floor-деление Python делает формулы точными для них.
"""

from dataclasses import dataclass
from typing import Final

from ptime.core.errors import InvalidDate

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# JDN дня 1 Farvardin 1 г.
PERSIAN_EPOCH_JDN: Final[int] = 1_948_320

# Длина 33-летнего цикла
CYCLE_YEARS: Final[int] = 33
CYCLE_DAYS: Final[int] = 12_053

# Остатки year mod 33 для високосных лет
LEAP_RESIDUES: Final[frozenset[int]] = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

# Количество дней в первой половине года (6 месяцев по 31 дню)
_FIRST_HALF_DAYS: Final[int] = 186

# Длины месяцев: (обычный год, високосный год)
_MONTH_LENGTHS: Final[tuple[tuple[int, int], ...]] = (
    (31, 31),  # Farvardin
    (31, 31),  # Ordibehesht
    (31, 31),  # Khordad
    (31, 31),  # Tir
    (31, 31),  # Mordad
    (31, 31),  # Shahrivar
    (30, 30),  # Mehr
    (30, 30),  # Aban
    (30, 30),  # Azar
    (30, 30),  # Dey
    (30, 30),  # Bahman
    (29, 30),  # Esfand
)


# =============================================================================
# ТИПЫ
# =============================================================================


@dataclass(frozen=True)
class PersianDate:
    """Дата персидского календаря (месяц 0-11)."""

    year: int
    month: int
    day: int

    @property
    def year_day(self) -> int:
        """День года, начиная с 0 (1 Farvardin = 0)"""
        return persian_year_day(self.month, self.day)

    def is_leap(self) -> bool:
        return is_persian_leap_year(self.year)


# =============================================================================
# ВИСОКОСНЫЕ ГОДЫ И ДЛИНЫ МЕСЯЦЕВ
# =============================================================================


def is_persian_leap_year(year: int) -> bool:
    """
    Високосный ли персидский год (33-летний цикл).

    Args:
        year: Год (может быть 0 или отрицательным)

    Returns:
        True для високосного года

    Examples:
        >>> is_persian_leap_year(1399)
        True
        >>> is_persian_leap_year(1400)
        False
    """
    return year % CYCLE_YEARS in LEAP_RESIDUES


def _leap_years_through(n: int) -> int:
    """
    Знаковое количество високосных лет в [1, n].

    f(n) - f(n - 1) == 1 ⇔ n високосный, f(0) == 0; для n < 0 значение
    отрицательное (минус количество високосных лет в [n + 1, 0]).
    """
    cycles, residue = divmod(n, CYCLE_YEARS)
    return len(LEAP_RESIDUES) * cycles + sum(1 for r in LEAP_RESIDUES if r <= residue)


def days_in_persian_year(year: int) -> int:
    return 366 if is_persian_leap_year(year) else 365


def days_in_persian_month(year: int, month: int) -> int:
    """
    Количество дней в месяце персидского года.

    Args:
        year: Год (нужен для Esfand)
        month: Месяц (0-11)

    Returns:
        29..31

    Raises:
        InvalidDate: Если месяц вне [0, 11]
    """
    if month < 0 or month > 11:
        raise InvalidDate(f"Persian month must be 0-11, got {month}")
    return _MONTH_LENGTHS[month][is_persian_leap_year(year)]


def validate_persian_date(year: int, month: int, day: int) -> None:
    """
    Проверка существования персидской даты.

    30 Esfand в невисокосном году — ошибка, а не молчаливый clamp.

    Raises:
        InvalidDate: Если месяц вне [0, 11] или день вне диапазона месяца
    """
    limit = days_in_persian_month(year, month)
    if day < 1 or day > limit:
        raise InvalidDate(
            f"Persian day must be 1-{limit} for year {year} month {month}, got {day}"
        )


def _month_offset(month: int) -> int:
    # Дни до начала месяца: 31·m в первой половине, 186 + 30·(m - 6) во второй
    if month < 6:
        return 31 * month
    return 30 * month + 6


def persian_year_day(month: int, day: int) -> int:
    """День года (0-based) для валидной персидской даты."""
    return _month_offset(month) + day - 1


# =============================================================================
# КОНВЕРСИЯ PERSIAN ↔ JDN
# =============================================================================


def _year_start_jdn(year: int) -> int:
    """JDN дня 1 Farvardin заданного года."""
    previous = year - 1
    return PERSIAN_EPOCH_JDN + 365 * previous + _leap_years_through(previous)


def persian_to_jdn(year: int, month: int, day: int) -> int:
    """
    Конверсия персидской даты в Julian Day Number.

    Args:
        year: Год
        month: Месяц (0-11)
        day: День месяца

    Returns:
        JDN

    Raises:
        InvalidDate: Если дата не существует

    Examples:
        >>> persian_to_jdn(1395, 0, 1)  # 2016-03-20
        2457468
    """
    validate_persian_date(year, month, day)
    return _year_start_jdn(year) + persian_year_day(month, day)


def jdn_to_persian(jdn: int) -> PersianDate:
    """
    Конверсия Julian Day Number в персидскую дату.

    Год оценивается по длине 33-летнего цикла и затем корректируется
    (не более пары шагов), месяц и день находятся по таблице длин месяцев.

    Args:
        jdn: Julian Day Number

    Returns:
        PersianDate

    Examples:
        >>> jdn_to_persian(2457469)
        PersianDate(year=1395, month=0, day=2)
    """
    year = (CYCLE_YEARS * (jdn - PERSIAN_EPOCH_JDN)) // CYCLE_DAYS + 1

    while jdn < _year_start_jdn(year):
        year -= 1
    while jdn >= _year_start_jdn(year + 1):
        year += 1

    day_of_year = jdn - _year_start_jdn(year)

    if day_of_year < _FIRST_HALF_DAYS:
        month, day = divmod(day_of_year, 31)
    else:
        month, day = divmod(day_of_year - _FIRST_HALF_DAYS, 30)
        month += 6

    return PersianDate(year=year, month=month, day=day + 1)
