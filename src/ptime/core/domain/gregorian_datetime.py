"""
GregorianDateTime — Момент времени в пролептическом григорианском календаре

Результат PersianDateTime.to_gregorian() и вход from_gregorian().
В отличие от datetime стандартной библиотеки:
- диапазон годов не ограничен (год 0 и отрицательные годы допустимы)
- точность — наносекунды
- utc_offset — фиксированное смещение в секундах, без базы часовых поясов
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from ptime.core.calendar.julian_day import (
    GregorianDate,
    gregorian_to_jdn,
    gregorian_year_day,
    jdn_weekday,
    validate_gregorian_date,
)
from ptime.core.calendar.time_of_day import (
    NANOSECONDS_PER_SECOND,
    combine_local_seconds,
    validate_time,
    validate_utc_offset,
)
from ptime.core.calendar.weekday import Weekday


@dataclass(frozen=True)
class GregorianDateTime:
    """
    Григорианская дата + время суток + смещение от UTC.

    Компоненты — показания локальных часов при данном utc_offset.
    Все компоненты проверяются при создании (InvalidDate / InvalidTime).
    """

    year: int
    month: int  # 1-12
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    utc_offset: int = 0  # секунды к востоку от UTC

    def __post_init__(self) -> None:
        validate_gregorian_date(self.year, self.month, self.day)
        validate_time(self.hour, self.minute, self.second, self.nanosecond)
        validate_utc_offset(self.utc_offset)

    # -------------------------------------------------------------------------
    # Interop со стандартной библиотекой
    # -------------------------------------------------------------------------

    @classmethod
    def from_datetime(cls, value: datetime) -> "GregorianDateTime":
        """
        Создание из datetime.

        Naive datetime трактуется как UTC; aware datetime сохраняет своё смещение.

        Args:
            value: datetime стандартной библиотеки

        Returns:
            GregorianDateTime с nanosecond = microsecond * 1000
        """
        offset = value.utcoffset() if value.tzinfo is not None else None
        utc_offset = 0 if offset is None else offset.days * 86_400 + offset.seconds

        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            hour=value.hour,
            minute=value.minute,
            second=value.second,
            nanosecond=value.microsecond * 1000,
            utc_offset=utc_offset,
        )

    def to_datetime(self) -> datetime:
        """
        Конверсия в aware datetime.

        Наносекунды усекаются до микросекунд.

        Raises:
            ValueError: Если год вне диапазона datetime (1..9999)
        """
        return datetime(
            self.year,
            self.month,
            self.day,
            self.hour,
            self.minute,
            self.second,
            self.nanosecond // 1000,
            tzinfo=timezone(timedelta(seconds=self.utc_offset)),
        )

    # -------------------------------------------------------------------------
    # Производные значения
    # -------------------------------------------------------------------------

    @property
    def date(self) -> GregorianDate:
        return GregorianDate(year=self.year, month=self.month, day=self.day)

    @property
    def jdn(self) -> int:
        """Julian Day Number локальной даты"""
        return gregorian_to_jdn(self.year, self.month, self.day)

    @property
    def year_day(self) -> int:
        """День года, начиная с 0"""
        return gregorian_year_day(self.year, self.month, self.day)

    @property
    def weekday(self) -> Weekday:
        return jdn_weekday(self.jdn)

    @property
    def epoch_seconds(self) -> int:
        """Целые секунды от 1970-01-01T00:00:00Z"""
        local = combine_local_seconds(self.jdn, self.hour, self.minute, self.second)
        return local - self.utc_offset

    @property
    def epoch_nanoseconds(self) -> int:
        return self.epoch_seconds * NANOSECONDS_PER_SECOND + self.nanosecond
