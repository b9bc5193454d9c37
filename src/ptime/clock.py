"""
Clock — Источник текущего времени

Текущее время — внешняя зависимость процесса, а не внутреннее состояние
библиотеки. Она моделируется как инъецируемая capability: now()/now_utc()
принимают Clock, тесты подставляют FixedClock с детерминированным моментом.

Контракт Clock:
- now()            → текущий момент + локальное смещение от UTC
- now_utc()        → текущий момент со смещением 0
- utc_offset_at(s) → локальное смещение (секунды) для момента s
"""

import logging
import time
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from ptime.core.calendar.time_of_day import (
    NANOSECONDS_PER_SECOND,
    validate_time,
    validate_utc_offset,
)

logger = logging.getLogger(__name__)


# =============================================================================
# INSTANT
# =============================================================================


@dataclass(frozen=True)
class Instant:
    """Момент времени: секунды от Unix epoch (UTC) + наносекунды + смещение."""

    seconds: int
    nanosecond: int = 0
    utc_offset: int = 0

    def __post_init__(self) -> None:
        validate_time(0, 0, 0, self.nanosecond)
        validate_utc_offset(self.utc_offset)

    @classmethod
    def from_epoch_nanoseconds(cls, value: int, utc_offset: int = 0) -> "Instant":
        seconds, nanosecond = divmod(value, NANOSECONDS_PER_SECOND)
        return cls(seconds=seconds, nanosecond=nanosecond, utc_offset=utc_offset)

    @property
    def epoch_nanoseconds(self) -> int:
        return self.seconds * NANOSECONDS_PER_SECOND + self.nanosecond


# =============================================================================
# CLOCK PROTOCOL
# =============================================================================


@runtime_checkable
class Clock(Protocol):
    """Источник текущего момента и локального смещения."""

    def now(self) -> Instant: ...

    def now_utc(self) -> Instant: ...

    def utc_offset_at(self, seconds: int) -> int: ...


# =============================================================================
# IMPLEMENTATIONS
# =============================================================================


class SystemClock:
    """
    Системные часы.

    Момент берётся из time.time_ns(), локальное смещение — из часового пояса
    операционной системы для данного момента.
    """

    def now(self) -> Instant:
        instant = self.now_utc()
        return replace(instant, utc_offset=self.utc_offset_at(instant.seconds))

    def now_utc(self) -> Instant:
        instant = Instant.from_epoch_nanoseconds(time.time_ns())
        logger.debug("System clock reading: %d.%09d", instant.seconds, instant.nanosecond)
        return instant

    def utc_offset_at(self, seconds: int) -> int:
        """
        Локальное смещение ОС для момента.

        Raises:
            OverflowError, OSError, ValueError: Если момент вне диапазона платформы
        """
        local = datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()
        offset = local.utcoffset()
        utc_offset = 0 if offset is None else offset.days * 86_400 + offset.seconds
        logger.debug("Local UTC offset at %d: %d seconds", seconds, utc_offset)
        return utc_offset


class FixedClock:
    """
    Детерминированные часы для тестов.

    Всегда возвращают один и тот же момент; tick() сдвигает его вперёд.
    """

    def __init__(self, seconds: int, nanosecond: int = 0, utc_offset: int = 0):
        """
        Args:
            seconds: Секунды от Unix epoch (UTC)
            nanosecond: Наносекунды [0, 999_999_999]
            utc_offset: Локальное смещение от UTC (секунды)
        """
        self._instant = Instant(seconds=seconds, nanosecond=nanosecond, utc_offset=utc_offset)

    def now(self) -> Instant:
        return self._instant

    def now_utc(self) -> Instant:
        return replace(self._instant, utc_offset=0)

    def utc_offset_at(self, seconds: int) -> int:
        return self._instant.utc_offset

    def tick(self, *, seconds: int = 0, nanoseconds: int = 0) -> None:
        total = self._instant.epoch_nanoseconds + seconds * NANOSECONDS_PER_SECOND + nanoseconds
        self._instant = Instant.from_epoch_nanoseconds(total, self._instant.utc_offset)
