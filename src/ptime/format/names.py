"""
Names — Фиксированные персидские названия месяцев, дней недели и половин суток

Таблицы только для чтения; индексы совпадают с 0-based месяцем и Weekday
(суббота = 0).
"""

from typing import Final

# =============================================================================
# МЕСЯЦЫ
# =============================================================================

MONTH_NAMES: Final[tuple[str, ...]] = (
    "فروردین",  # Farvardin
    "اردیبهشت",  # Ordibehesht
    "خرداد",  # Khordad
    "تیر",  # Tir
    "مرداد",  # Mordad
    "شهریور",  # Shahrivar
    "مهر",  # Mehr
    "آبان",  # Aban
    "آذر",  # Azar
    "دی",  # Dey
    "بهمن",  # Bahman
    "اسفند",  # Esfand
)

# =============================================================================
# ДНИ НЕДЕЛИ
# =============================================================================

# Составные названия содержат zero-width non-joiner (U+200C)
WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "شنبه",  # Shanbeh
    "یک‌شنبه",  # Yekshanbeh
    "دوشنبه",  # Doshanbeh
    "سه‌شنبه",  # Seshanbeh
    "چهارشنبه",  # Chaharshanbeh
    "پنج‌شنبه",  # Panjshanbeh
    "جمعه",  # Jomeh
)

WEEKDAY_SHORT_NAMES: Final[tuple[str, ...]] = ("ش", "ی", "د", "س", "چ", "پ", "ج")

# =============================================================================
# ПОЛОВИНЫ СУТОК
# =============================================================================

# (до полудня, после полудня)
MERIDIEM_NAMES: Final[tuple[str, str]] = ("قبل از ظهر", "بعد از ظهر")
MERIDIEM_SHORT_NAMES: Final[tuple[str, str]] = ("ق.ظ", "ب.ظ")

# =============================================================================
# ЦИФРЫ
# =============================================================================

PERSIAN_DIGITS: Final[str] = "۰۱۲۳۴۵۶۷۸۹"

# Таблица для str.translate: ASCII → персидские цифры
PERSIAN_DIGIT_TABLE: Final[dict[int, str]] = str.maketrans("0123456789", PERSIAN_DIGITS)
