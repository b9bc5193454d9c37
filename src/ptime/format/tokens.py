"""
Format tokens — Таблица токенов шаблона форматирования

Каждый токен — пара (строка токена, renderer). Таблица упорядочена по
убыванию длины токена: сканер берёт первый совпавший, то есть самый длинный
("yyyy" раньше "yyy", "yy", "y"; "ns" раньше "s").

    yyyy, yyy, y     год (например, 1394)
    yy               две последние цифры года (например, 94)
    MMM              персидское название месяца (например, فروردین)
    MM               месяц, 2 цифры (01-12)
    M                месяц (1-12)
    DD               день года, начиная с 1
    D                день года, начиная с 0
    dd               день месяца, 2 цифры (01-31)
    d                день месяца (1-31)
    E                персидское название дня недели (например, شنبه)
    e                короткое название дня недели (например, ش)
    A                название половины суток (например, قبل از ظهر)
    a                короткое название половины суток (например, ق.ظ)
    HH, H            час [00-23], [0-23]
    kk, k            час [01-24], [1-24] (полночь = 24)
    hh, h            час [01-12], [1-12]
    KK, K            час [00-11], [0-11]
    mm, m            минута
    ss, s            секунда
    ns               наносекунды

Часы k и h — конвенциональные 24- и 12-часовые циферблаты, а не hour + 1:
13:00 даёт kk = 13 и hh = 01, полночь даёт kk = 24 и hh = 12. Вариант
hour + 1 (13:00 → kk = 14, hh = 02) сдвигает показания на час и здесь не
используется.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Final, Optional

from ptime.format.names import (
    MERIDIEM_NAMES,
    MERIDIEM_SHORT_NAMES,
    MONTH_NAMES,
    WEEKDAY_NAMES,
    WEEKDAY_SHORT_NAMES,
)

if TYPE_CHECKING:
    from ptime.core.domain.persian_datetime import PersianDateTime


@dataclass(frozen=True)
class FormatToken:
    """Токен шаблона и его renderer."""

    token: str
    render: Callable[["PersianDateTime"], str]
    numeric: bool = True  # цифровой вывод (подлежит замене цифр)


# =============================================================================
# HOUR HELPERS
# =============================================================================


def _hour_1_24(hour: int) -> int:
    return hour or 24


def _hour_1_12(hour: int) -> int:
    return hour % 12 or 12


def _hour_0_11(hour: int) -> int:
    return hour % 12


# =============================================================================
# TOKEN TABLE
# =============================================================================

_TOKENS: Final[tuple[FormatToken, ...]] = (
    # Год
    FormatToken("yyyy", lambda dt: str(dt.year)),
    FormatToken("yyy", lambda dt: str(dt.year)),
    FormatToken("yy", lambda dt: f"{dt.year % 100:02d}"),
    FormatToken("y", lambda dt: str(dt.year)),
    # Месяц
    FormatToken("MMM", lambda dt: MONTH_NAMES[dt.month], numeric=False),
    FormatToken("MM", lambda dt: f"{dt.month + 1:02d}"),
    FormatToken("M", lambda dt: str(dt.month + 1)),
    # День года
    FormatToken("DD", lambda dt: str(dt.year_day + 1)),
    FormatToken("D", lambda dt: str(dt.year_day)),
    # День месяца
    FormatToken("dd", lambda dt: f"{dt.day:02d}"),
    FormatToken("d", lambda dt: str(dt.day)),
    # День недели
    FormatToken("E", lambda dt: WEEKDAY_NAMES[dt.weekday], numeric=False),
    FormatToken("e", lambda dt: WEEKDAY_SHORT_NAMES[dt.weekday], numeric=False),
    # Половина суток
    FormatToken("A", lambda dt: MERIDIEM_NAMES[dt.hour >= 12], numeric=False),
    FormatToken("a", lambda dt: MERIDIEM_SHORT_NAMES[dt.hour >= 12], numeric=False),
    # Часы
    FormatToken("HH", lambda dt: f"{dt.hour:02d}"),
    FormatToken("H", lambda dt: str(dt.hour)),
    FormatToken("kk", lambda dt: f"{_hour_1_24(dt.hour):02d}"),
    FormatToken("k", lambda dt: str(_hour_1_24(dt.hour))),
    FormatToken("hh", lambda dt: f"{_hour_1_12(dt.hour):02d}"),
    FormatToken("h", lambda dt: str(_hour_1_12(dt.hour))),
    FormatToken("KK", lambda dt: f"{_hour_0_11(dt.hour):02d}"),
    FormatToken("K", lambda dt: str(_hour_0_11(dt.hour))),
    # Минуты, секунды
    FormatToken("mm", lambda dt: f"{dt.minute:02d}"),
    FormatToken("m", lambda dt: str(dt.minute)),
    FormatToken("ns", lambda dt: str(dt.nanosecond)),
    FormatToken("ss", lambda dt: f"{dt.second:02d}"),
    FormatToken("s", lambda dt: str(dt.second)),
)

# Порядок сканирования: длинные токены первыми (sorted стабилен)
TOKEN_TABLE: Final[tuple[FormatToken, ...]] = tuple(
    sorted(_TOKENS, key=lambda t: len(t.token), reverse=True)
)


def match_token(pattern: str, position: int) -> Optional[FormatToken]:
    """
    Самый длинный токен, начинающийся в позиции position.

    Returns:
        FormatToken или None, если символ в позиции — литерал
    """
    for token in TOKEN_TABLE:
        if pattern.startswith(token.token, position):
            return token
    return None
