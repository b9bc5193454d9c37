"""
Форматирование персидских дат/времени.

Functions:
    format_persian: Форматирование PersianDateTime по шаблону токенов.
    match_token: Самый длинный токен в позиции шаблона.
"""

from ptime.format.formatter import format_persian
from ptime.format.names import (
    MERIDIEM_NAMES,
    MERIDIEM_SHORT_NAMES,
    MONTH_NAMES,
    WEEKDAY_NAMES,
    WEEKDAY_SHORT_NAMES,
)
from ptime.format.tokens import TOKEN_TABLE, FormatToken, match_token

__all__ = [
    # Formatter
    "format_persian",
    # Tokens
    "TOKEN_TABLE",
    "FormatToken",
    "match_token",
    # Names
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "WEEKDAY_SHORT_NAMES",
    "MERIDIEM_NAMES",
    "MERIDIEM_SHORT_NAMES",
]
