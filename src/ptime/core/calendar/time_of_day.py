"""
Time of day — Валидация и декомпозиция времени суток

Время суток хранится отдельно от JDN. Непрерывное представление момента —
секунды от Unix epoch (UTC) плюс наносекунды; локальные показания часов
получаются сдвигом на utc_offset.
"""

from typing import Final

from ptime.core.calendar.julian_day import SECONDS_PER_DAY, UNIX_EPOCH_JDN
from ptime.core.errors import InvalidTime

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

NANOSECONDS_PER_SECOND: Final[int] = 1_000_000_000
MAX_NANOSECOND: Final[int] = NANOSECONDS_PER_SECOND - 1

# utc_offset строго внутри суток
MAX_UTC_OFFSET_SECONDS: Final[int] = SECONDS_PER_DAY - 1


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_time(hour: int, minute: int, second: int, nanosecond: int = 0) -> None:
    """
    Проверка компонентов времени суток, каждый независимо.

    Args:
        hour: Час [0, 23]
        minute: Минута [0, 59]
        second: Секунда [0, 59]
        nanosecond: Наносекунда [0, 999_999_999]

    Raises:
        InvalidTime: С указанием первого компонента вне диапазона
    """
    if hour < 0 or hour > 23:
        raise InvalidTime(f"hour must be 0-23, got {hour}")
    if minute < 0 or minute > 59:
        raise InvalidTime(f"minute must be 0-59, got {minute}")
    if second < 0 or second > 59:
        raise InvalidTime(f"second must be 0-59, got {second}")
    if nanosecond < 0 or nanosecond > MAX_NANOSECOND:
        raise InvalidTime(f"nanosecond must be 0-{MAX_NANOSECOND}, got {nanosecond}")


def validate_utc_offset(utc_offset: int) -> None:
    """
    Raises:
        InvalidTime: Если |utc_offset| >= 86400 секунд
    """
    if abs(utc_offset) > MAX_UTC_OFFSET_SECONDS:
        raise InvalidTime(
            f"utc_offset must be within ±{MAX_UTC_OFFSET_SECONDS} seconds, got {utc_offset}"
        )


# =============================================================================
# ДЕКОМПОЗИЦИЯ
# =============================================================================


def split_local_seconds(local_seconds: int) -> tuple[int, int, int, int]:
    """
    Разложение локальных секунд от эпохи на (jdn, hour, minute, second).

    Floor-деление корректно обрабатывает моменты до 1970 года.

    Examples:
        >>> split_local_seconds(0)
        (2440588, 0, 0, 0)
        >>> split_local_seconds(-1)
        (2440587, 23, 59, 59)
    """
    days, second_of_day = divmod(local_seconds, SECONDS_PER_DAY)
    hour, rest = divmod(second_of_day, 3600)
    minute, second = divmod(rest, 60)
    return UNIX_EPOCH_JDN + days, hour, minute, second


def combine_local_seconds(jdn: int, hour: int, minute: int, second: int) -> int:
    """Локальные секунды от эпохи для JDN и времени суток."""
    return (jdn - UNIX_EPOCH_JDN) * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second
