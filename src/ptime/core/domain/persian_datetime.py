"""
PersianDateTime — Момент времени в персидском календаре

Immutable Pydantic модель: персидская дата (месяц 0-11) + время суток +
фиксированное смещение от UTC. Компоненты — показания локальных часов при
данном utc_offset.

Арифметика и сравнение работают только с непрерывным представлением
(наносекунды от Unix epoch), никогда с полями y/m/d напрямую; результат
нормализуется обратно в персидские компоненты через from_epoch().
Арифметика сохраняет utc_offset исходного значения.

Путь конверсии:
    Gregorian → JDN → Persian (from_gregorian)
    Persian → JDN → Gregorian (to_gregorian)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. from_gregorian(dt.to_gregorian()) == dt для любого валидного dt
2. Фабрики либо возвращают валидное значение, либо поднимают InvalidDate/InvalidTime
3. Конверсии из валидного значения тотальны
"""

from datetime import datetime, timedelta
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from ptime.clock import Clock, SystemClock
from ptime.config import FormatConfig
from ptime.core.calendar.julian_day import jdn_to_gregorian, jdn_weekday
from ptime.core.calendar.persian import (
    days_in_persian_month,
    is_persian_leap_year,
    jdn_to_persian,
    persian_to_jdn,
    persian_year_day,
    validate_persian_date,
)
from ptime.core.calendar.time_of_day import (
    MAX_NANOSECOND,
    MAX_UTC_OFFSET_SECONDS,
    NANOSECONDS_PER_SECOND,
    combine_local_seconds,
    split_local_seconds,
    validate_time,
    validate_utc_offset,
)
from ptime.core.calendar.weekday import Weekday
from ptime.core.domain.gregorian_datetime import GregorianDateTime
from ptime.format.formatter import format_persian


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _timedelta_nanoseconds(value: timedelta) -> int:
    return ((value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds) * 1000


# =============================================================================
# PERSIAN DATETIME MODEL
# =============================================================================


class PersianDateTime(BaseModel):
    """
    Персидская дата и время с фиксированным смещением от UTC.

    Immutable модель (frozen=True): арифметика создаёт новый экземпляр.

    Равенство (==) — по всем полям; порядок (<, >) — по моменту времени.
    Два показания одного момента с разными смещениями упорядочены как равные,
    но не равны по ==; для сравнения моментов — same_instant().
    """

    # Дата
    year: int = Field(..., description="Год (астрономическая нумерация, может быть ≤ 0)")
    month: int = Field(..., ge=0, le=11, description="Месяц с Farvardin [0, 11]")
    day: int = Field(..., ge=1, le=31, description="День месяца [1, 31]")

    # Время суток
    hour: int = Field(0, ge=0, le=23, description="Час [0, 23]")
    minute: int = Field(0, ge=0, le=59, description="Минута [0, 59]")
    second: int = Field(0, ge=0, le=59, description="Секунда [0, 59]")
    nanosecond: int = Field(0, ge=0, le=MAX_NANOSECOND, description="Наносекунда")

    # Смещение
    utc_offset: int = Field(
        0,
        ge=-MAX_UTC_OFFSET_SECONDS,
        le=MAX_UTC_OFFSET_SECONDS,
        description="Смещение от UTC (секунды к востоку)",
    )

    model_config = {"frozen": True}  # Immutable

    def __init__(self, **data: Any) -> None:
        """
        Проверка целочисленных компонентов календарными правилами до Pydantic.

        Порядок: дата, затем время суток, затем смещение. Нецелые значения
        (например, строки) остаются на валидацию Pydantic.

        Raises:
            InvalidDate: Если дата не существует
            InvalidTime: Если компонент времени или смещение вне диапазона
            ValidationError: Если поле отсутствует или не приводится к int
        """
        date_parts = [data.get(name) for name in ("year", "month", "day")]
        if all(_is_int(value) for value in date_parts):
            validate_persian_date(*date_parts)

        time_parts = [data.get(name, 0) for name in ("hour", "minute", "second", "nanosecond")]
        if all(_is_int(value) for value in time_parts):
            validate_time(*time_parts)

        utc_offset = data.get("utc_offset", 0)
        if _is_int(utc_offset):
            validate_utc_offset(utc_offset)

        super().__init__(**data)

    @field_validator("day")
    @classmethod
    def validate_day_of_month(cls, v: int, info) -> int:
        """
        Проверка дня по таблице длин месяцев.

        30 Esfand допустим только в високосный год.
        """
        if "year" in info.data and "month" in info.data:
            limit = days_in_persian_month(info.data["year"], info.data["month"])
            if v > limit:
                raise ValueError(
                    f"day {v} exceeds {limit} days of month {info.data['month']} "
                    f"in year {info.data['year']}"
                )
        return v

    # -------------------------------------------------------------------------
    # Нормализация из непрерывного представления
    # -------------------------------------------------------------------------

    @classmethod
    def from_epoch(
        cls, seconds: int, nanosecond: int = 0, utc_offset: int = 0
    ) -> "PersianDateTime":
        """
        Создание из секунд от Unix epoch (UTC).

        Единственный путь нормализации момента в персидские компоненты.

        Args:
            seconds: Секунды от 1970-01-01T00:00:00Z (могут быть отрицательными)
            nanosecond: Наносекунды [0, 999_999_999]
            utc_offset: Смещение от UTC, в котором выражаются компоненты

        Returns:
            PersianDateTime

        Raises:
            InvalidTime: Если nanosecond или utc_offset вне диапазона
        """
        validate_time(0, 0, 0, nanosecond)
        validate_utc_offset(utc_offset)

        jdn, hour, minute, second = split_local_seconds(seconds + utc_offset)
        date = jdn_to_persian(jdn)

        return cls(
            year=date.year,
            month=date.month,
            day=date.day,
            hour=hour,
            minute=minute,
            second=second,
            nanosecond=nanosecond,
            utc_offset=utc_offset,
        )

    @classmethod
    def from_epoch_nanoseconds(cls, value: int, utc_offset: int = 0) -> "PersianDateTime":
        seconds, nanosecond = divmod(value, NANOSECONDS_PER_SECOND)
        return cls.from_epoch(seconds, nanosecond, utc_offset)

    # -------------------------------------------------------------------------
    # Производные значения
    # -------------------------------------------------------------------------

    @property
    def jdn(self) -> int:
        """Julian Day Number локальной даты"""
        return persian_to_jdn(self.year, self.month, self.day)

    @property
    def year_day(self) -> int:
        """День года, начиная с 0 (1 Farvardin = 0)"""
        return persian_year_day(self.month, self.day)

    @property
    def weekday(self) -> Weekday:
        """День недели (суббота = 0)"""
        return jdn_weekday(self.jdn)

    @property
    def epoch_seconds(self) -> int:
        """Целые секунды от 1970-01-01T00:00:00Z"""
        local = combine_local_seconds(self.jdn, self.hour, self.minute, self.second)
        return local - self.utc_offset

    @property
    def epoch_nanoseconds(self) -> int:
        return self.epoch_seconds * NANOSECONDS_PER_SECOND + self.nanosecond

    def timestamp(self) -> float:
        """POSIX timestamp (float, точность ограничена float)"""
        return self.epoch_seconds + self.nanosecond / NANOSECONDS_PER_SECOND

    def is_leap(self) -> bool:
        return is_persian_leap_year(self.year)

    def days_in_month(self) -> int:
        return days_in_persian_month(self.year, self.month)

    # -------------------------------------------------------------------------
    # Конверсии
    # -------------------------------------------------------------------------

    def to_gregorian(self) -> GregorianDateTime:
        """
        Конверсия в григорианский календарь (тот же utc_offset).

        Тотальна: валидное значение всегда имеет григорианский эквивалент.
        """
        date = jdn_to_gregorian(self.jdn)
        return GregorianDateTime(
            year=date.year,
            month=date.month,
            day=date.day,
            hour=self.hour,
            minute=self.minute,
            second=self.second,
            nanosecond=self.nanosecond,
            utc_offset=self.utc_offset,
        )

    def to_datetime(self) -> datetime:
        """
        Конверсия в aware datetime стандартной библиотеки.

        Raises:
            ValueError: Если григорианский год вне 1..9999
        """
        return self.to_gregorian().to_datetime()

    def with_offset(self, utc_offset: int) -> "PersianDateTime":
        """Тот же момент, выраженный в другом смещении от UTC."""
        return type(self).from_epoch(self.epoch_seconds, self.nanosecond, utc_offset)

    def to_utc(self) -> "PersianDateTime":
        return self.with_offset(0)

    def to_local(self, clock: Optional[Clock] = None) -> "PersianDateTime":
        """
        Тот же момент в локальном смещении часов clock (default: SystemClock).

        Смещение берётся у clock, поэтому тотальность зависит от него:
        FixedClock работает для любого момента, SystemClock спрашивает
        часовой пояс ОС через datetime.

        Raises:
            OverflowError, OSError, ValueError: Если SystemClock не может
                определить смещение для момента (например, год 0)
        """
        clock = clock or SystemClock()
        return self.with_offset(clock.utc_offset_at(self.epoch_seconds))

    def same_instant(self, other: "PersianDateTime") -> bool:
        return self.epoch_nanoseconds == other.epoch_nanoseconds

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add_nanoseconds(self, nanoseconds: int) -> "PersianDateTime":
        return type(self).from_epoch_nanoseconds(
            self.epoch_nanoseconds + nanoseconds, self.utc_offset
        )

    def add_seconds(self, seconds: int) -> "PersianDateTime":
        return self.add_nanoseconds(seconds * NANOSECONDS_PER_SECOND)

    def add_minutes(self, minutes: int) -> "PersianDateTime":
        return self.add_seconds(minutes * 60)

    def add_hours(self, hours: int) -> "PersianDateTime":
        return self.add_seconds(hours * 3600)

    def add_days(self, days: int) -> "PersianDateTime":
        """
        Сдвиг на days суток по 86400 секунд.

        30 Esfand + 1 день в високосный год → 1 Farvardin следующего года.
        """
        return self.add_seconds(days * 86_400)

    def __add__(self, other: Any) -> "PersianDateTime":
        if isinstance(other, timedelta):
            return self.add_nanoseconds(_timedelta_nanoseconds(other))
        return NotImplemented

    def __radd__(self, other: Any) -> "PersianDateTime":
        return self.__add__(other)

    def __sub__(self, other: Any) -> Union["PersianDateTime", timedelta]:
        """
        - PersianDateTime - timedelta → PersianDateTime
        - PersianDateTime - PersianDateTime → timedelta
        - PersianDateTime - datetime → timedelta (naive datetime = UTC)

        timedelta хранит микросекунды: разность наносекунд округляется вниз.
        """
        if isinstance(other, timedelta):
            return self.add_nanoseconds(-_timedelta_nanoseconds(other))
        if isinstance(other, PersianDateTime):
            diff = self.epoch_nanoseconds - other.epoch_nanoseconds
        elif isinstance(other, datetime):
            diff = self.epoch_nanoseconds - GregorianDateTime.from_datetime(other).epoch_nanoseconds
        else:
            return NotImplemented
        return timedelta(microseconds=diff // 1000)

    # -------------------------------------------------------------------------
    # Сравнение по моменту времени
    # -------------------------------------------------------------------------

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self.epoch_nanoseconds < other.epoch_nanoseconds

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self.epoch_nanoseconds <= other.epoch_nanoseconds

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self.epoch_nanoseconds > other.epoch_nanoseconds

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, PersianDateTime):
            return NotImplemented
        return self.epoch_nanoseconds >= other.epoch_nanoseconds

    # -------------------------------------------------------------------------
    # Форматирование и сериализация
    # -------------------------------------------------------------------------

    def to_string(self, pattern: str) -> str:
        """Форматирование по шаблону токенов (см. ptime.format.tokens)."""
        return format_persian(self, pattern)

    def format(self, pattern: Optional[str] = None, config: Optional[FormatConfig] = None) -> str:
        return format_persian(self, pattern, config)

    def __str__(self) -> str:
        return format_persian(self)

    def to_dict(self) -> dict[str, int]:
        """Словарь компонентов (контракт persian_datetime)."""
        return self.model_dump()


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def from_persian_components(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
    utc_offset: int = 0,
) -> PersianDateTime:
    """
    Создание из персидских компонентов.

    Порядок проверки: дата, затем время суток, затем смещение.

    Args:
        year: Год
        month: Месяц (0-11)
        day: День месяца
        hour, minute, second, nanosecond: Время суток
        utc_offset: Смещение от UTC (секунды)

    Returns:
        PersianDateTime

    Raises:
        InvalidDate: Если дата не существует (включая 30 Esfand невисокосного года)
        InvalidTime: Если компонент времени или смещение вне диапазона
    """
    return PersianDateTime(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        nanosecond=nanosecond,
        utc_offset=utc_offset,
    )


def from_persian_date(year: int, month: int, day: int) -> PersianDateTime:
    """
    Создание из персидской даты (полночь, UTC).

    Examples:
        >>> from_persian_date(1395, 0, 1).to_gregorian().date
        GregorianDate(year=2016, month=3, day=20)
    """
    return from_persian_components(year, month, day)


def from_gregorian(
    value: Union[GregorianDateTime, datetime], tz_offset: Optional[int] = None
) -> PersianDateTime:
    """
    Конверсия григорианского момента в персидский.

    Args:
        value: GregorianDateTime или datetime (naive = UTC)
        tz_offset: Если задан — тот же момент выражается в этом смещении

    Returns:
        PersianDateTime с теми же показаниями времени суток

    Raises:
        TypeError: Если value не GregorianDateTime/datetime
    """
    if isinstance(value, datetime):
        value = GregorianDateTime.from_datetime(value)
    elif not isinstance(value, GregorianDateTime):
        raise TypeError(
            f"value must be GregorianDateTime or datetime, got {type(value).__name__}"
        )

    date = jdn_to_persian(value.jdn)
    result = PersianDateTime(
        year=date.year,
        month=date.month,
        day=date.day,
        hour=value.hour,
        minute=value.minute,
        second=value.second,
        nanosecond=value.nanosecond,
        utc_offset=value.utc_offset,
    )

    if tz_offset is not None:
        return result.with_offset(tz_offset)
    return result


def from_gregorian_components(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
    utc_offset: int = 0,
) -> PersianDateTime:
    """
    Создание из григорианских компонентов (месяц 1-12).

    Raises:
        InvalidDate: Если григорианская дата не существует
        InvalidTime: Если компонент времени или смещение вне диапазона
    """
    return from_gregorian(
        GregorianDateTime(
            year=year,
            month=month,
            day=day,
            hour=hour,
            minute=minute,
            second=second,
            nanosecond=nanosecond,
            utc_offset=utc_offset,
        )
    )


def from_gregorian_date(year: int, month: int, day: int) -> PersianDateTime:
    """
    Создание из григорианской даты (полночь, UTC).

    Examples:
        >>> str(from_gregorian_date(2016, 3, 21))
        '1395-01-02T00:00:00.0'
    """
    return from_gregorian_components(year, month, day)


def at_utc(seconds: int, nanosecond: int = 0) -> PersianDateTime:
    """Момент seconds (от Unix epoch) в UTC."""
    return PersianDateTime.from_epoch(seconds, nanosecond, 0)


def at(seconds: int, nanosecond: int = 0, clock: Optional[Clock] = None) -> PersianDateTime:
    """
    Момент seconds (от Unix epoch) в локальном смещении часов clock.

    Raises:
        OverflowError, OSError, ValueError: Если SystemClock не может
            определить смещение для момента вне диапазона платформы
    """
    clock = clock or SystemClock()
    return PersianDateTime.from_epoch(seconds, nanosecond, clock.utc_offset_at(seconds))


def now(clock: Optional[Clock] = None) -> PersianDateTime:
    """Текущее время в локальном смещении (default: SystemClock)."""
    instant = (clock or SystemClock()).now()
    return PersianDateTime.from_epoch(instant.seconds, instant.nanosecond, instant.utc_offset)


def now_utc(clock: Optional[Clock] = None) -> PersianDateTime:
    """Текущее время в UTC (default: SystemClock)."""
    instant = (clock or SystemClock()).now_utc()
    return PersianDateTime.from_epoch(instant.seconds, instant.nanosecond, 0)
