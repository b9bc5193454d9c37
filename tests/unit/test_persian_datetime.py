"""
Тесты PersianDateTime

Проверяет:
1. Фабрики и порядок ошибок (дата проверяется раньше времени)
2. Immutability (frozen=True) и валидацию Pydantic
3. Арифметику через непрерывное представление (Esfand 30, Навруз, наносекунды)
4. Смещения от UTC: with_offset, to_utc, to_local
5. Равенство по полям и порядок по моменту времени
6. Interop с datetime стандартной библиотеки
7. now/now_utc/at/at_utc с инъецируемыми часами
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

import ptime
from ptime import (
    FixedClock,
    GregorianDate,
    GregorianDateTime,
    InvalidDate,
    InvalidTime,
    PersianDateTime,
    Weekday,
)

# 1 Farvardin 1395 00:00 UTC
NOWRUZ_1395 = 1_458_432_000

# +03:30
TEHRAN_OFFSET = 12_600


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def nowruz():
    """1 Farvardin 1395, полночь UTC."""
    return ptime.from_persian_date(1395, 0, 1)


@pytest.fixture
def tehran_clock():
    """Часы, остановленные на Навруз 1395, смещение +03:30."""
    return FixedClock(NOWRUZ_1395, nanosecond=500, utc_offset=TEHRAN_OFFSET)


# =============================================================================
# CONSTRUCTION
# =============================================================================


class TestFactories:
    """Тесты фабрик"""

    def test_from_persian_components(self) -> None:
        p_tm = ptime.from_persian_components(1394, 0, 1, 13, 5, 9, 121, TEHRAN_OFFSET)

        assert (p_tm.year, p_tm.month, p_tm.day) == (1394, 0, 1)
        assert (p_tm.hour, p_tm.minute, p_tm.second, p_tm.nanosecond) == (13, 5, 9, 121)
        assert p_tm.utc_offset == TEHRAN_OFFSET

    def test_from_persian_date_is_midnight_utc(self, nowruz) -> None:
        assert (nowruz.hour, nowruz.minute, nowruz.second, nowruz.nanosecond) == (0, 0, 0, 0)
        assert nowruz.utc_offset == 0
        assert nowruz.epoch_seconds == NOWRUZ_1395

    def test_esfand_30_common_year_rejected(self) -> None:
        with pytest.raises(InvalidDate):
            ptime.from_persian_date(1394, 11, 30)

    @pytest.mark.parametrize("year", [1395, 1399])
    def test_esfand_30_leap_year_accepted(self, year: int) -> None:
        p_tm = ptime.from_persian_date(year, 11, 30)
        assert p_tm.day == 30
        assert p_tm.is_leap()
        assert p_tm.days_in_month() == 30

    def test_date_error_wins_over_time_error(self) -> None:
        """Невалидная дата и невалидный час → InvalidDate"""
        with pytest.raises(InvalidDate):
            ptime.from_persian_components(1394, 11, 30, 25)

    @pytest.mark.parametrize(
        "kwargs, message",
        [
            ({"hour": 24}, "hour"),
            ({"minute": 60}, "minute"),
            ({"second": 60}, "second"),
            ({"nanosecond": 1_000_000_000}, "nanosecond"),
            ({"nanosecond": -1}, "nanosecond"),
            ({"utc_offset": 86_400}, "utc_offset"),
            ({"utc_offset": -86_400}, "utc_offset"),
        ],
    )
    def test_invalid_time(self, kwargs, message: str) -> None:
        with pytest.raises(InvalidTime, match=message):
            ptime.from_persian_components(1395, 0, 1, **kwargs)

    def test_from_gregorian_components(self) -> None:
        p_tm = ptime.from_gregorian_components(2016, 3, 21, 8, 15, utc_offset=TEHRAN_OFFSET)

        assert (p_tm.year, p_tm.month, p_tm.day) == (1395, 0, 2)
        assert (p_tm.hour, p_tm.minute) == (8, 15)
        assert p_tm.utc_offset == TEHRAN_OFFSET

    def test_from_gregorian_components_invalid(self) -> None:
        with pytest.raises(InvalidDate):
            ptime.from_gregorian_components(2016, 2, 30)
        with pytest.raises(InvalidDate):
            ptime.from_gregorian_components(2016, 0, 1)
        with pytest.raises(InvalidTime):
            ptime.from_gregorian_components(2016, 3, 21, 24)

    def test_from_gregorian_rejects_other_types(self) -> None:
        with pytest.raises(TypeError, match="str"):
            ptime.from_gregorian("2016-03-21")

    def test_from_gregorian_tz_offset(self) -> None:
        """tz_offset выражает тот же момент в другом смещении"""
        g_tm = GregorianDateTime(2016, 3, 20, 0, 0, 0, utc_offset=0)
        p_tm = ptime.from_gregorian(g_tm, tz_offset=TEHRAN_OFFSET)

        assert (p_tm.year, p_tm.month, p_tm.day) == (1395, 0, 1)
        assert (p_tm.hour, p_tm.minute) == (3, 30)
        assert p_tm.epoch_seconds == NOWRUZ_1395

    def test_string_form(self) -> None:
        assert str(ptime.from_gregorian_date(2016, 3, 21)) == "1395-01-02T00:00:00.0"


class TestImmutability:
    """Тесты frozen модели"""

    def test_assignment_rejected(self, nowruz) -> None:
        with pytest.raises(ValidationError):
            nowruz.year = 1400

    def test_direct_construction_validates_day(self) -> None:
        """30 Esfand невисокосного года отклоняется и моделью"""
        with pytest.raises(InvalidDate):
            PersianDateTime(year=1394, month=11, day=30)

    def test_direct_construction_validates_ranges(self) -> None:
        with pytest.raises(InvalidDate, match="month must be 0-11"):
            PersianDateTime(year=1394, month=12, day=1)
        with pytest.raises(InvalidTime, match="hour"):
            PersianDateTime(year=1394, month=0, day=1, hour=24)
        with pytest.raises(InvalidTime, match="nanosecond"):
            PersianDateTime(year=1394, month=0, day=1, nanosecond=-1)
        with pytest.raises(InvalidTime, match="utc_offset"):
            PersianDateTime(year=1394, month=0, day=1, utc_offset=86_400)

    def test_direct_construction_date_before_time(self) -> None:
        with pytest.raises(InvalidDate):
            PersianDateTime(year=1394, month=11, day=30, hour=25, utc_offset=90_000)

    def test_direct_construction_accepts_leap_day(self) -> None:
        p_tm = PersianDateTime(year=1399, month=11, day=30, hour=23)
        assert p_tm == ptime.from_persian_components(1399, 11, 30, 23)

    def test_direct_construction_non_integer(self) -> None:
        """Нецелые значения валидирует Pydantic"""
        with pytest.raises(ValidationError):
            PersianDateTime(year="not a year", month=0, day=1)
        with pytest.raises(ValidationError):
            PersianDateTime(year=1394, month=0)

    def test_hashable(self, nowruz) -> None:
        assert len({nowruz, ptime.from_persian_date(1395, 0, 1)}) == 1

    def test_arithmetic_returns_new_instance(self, nowruz) -> None:
        later = nowruz.add_days(1)
        assert later is not nowruz
        assert nowruz.day == 1


# =============================================================================
# DERIVED VALUES
# =============================================================================


class TestDerivedValues:
    """jdn, weekday, year_day, epoch"""

    def test_jdn_and_weekday(self, nowruz) -> None:
        assert nowruz.jdn == 2_457_468
        assert nowruz.weekday == Weekday.SUNDAY
        assert nowruz.year_day == 0

    def test_epoch_with_offset(self) -> None:
        """Локальное 03:30 при +03:30 — полночь UTC"""
        p_tm = ptime.from_persian_components(1395, 0, 1, 3, 30, utc_offset=TEHRAN_OFFSET)
        assert p_tm.epoch_seconds == NOWRUZ_1395

    def test_epoch_nanoseconds(self) -> None:
        p_tm = ptime.at_utc(NOWRUZ_1395, 7)
        assert p_tm.epoch_nanoseconds == NOWRUZ_1395 * 1_000_000_000 + 7

    def test_timestamp(self) -> None:
        assert ptime.at_utc(NOWRUZ_1395, 500_000_000).timestamp() == 1_458_432_000.5

    def test_unix_epoch(self) -> None:
        """1970-01-01 = 11 Dey 1348"""
        p_tm = ptime.at_utc(0)
        assert (p_tm.year, p_tm.month, p_tm.day) == (1348, 9, 11)

    def test_before_unix_epoch(self) -> None:
        p_tm = ptime.at_utc(-1)
        assert (p_tm.year, p_tm.month, p_tm.day) == (1348, 9, 10)
        assert (p_tm.hour, p_tm.minute, p_tm.second) == (23, 59, 59)

    def test_at_utc_matches_factory(self) -> None:
        assert ptime.at_utc(NOWRUZ_1395) == ptime.from_persian_date(1395, 0, 1)

    def test_from_epoch_invalid_nanosecond(self) -> None:
        with pytest.raises(InvalidTime):
            PersianDateTime.from_epoch(0, nanosecond=1_000_000_000)


# =============================================================================
# ARITHMETIC
# =============================================================================


class TestArithmetic:
    """Арифметика через наносекунды от эпохи"""

    def test_add_days_across_esfand_30(self) -> None:
        p_tm = ptime.from_persian_date(1399, 11, 29).add_days(1)
        assert (p_tm.year, p_tm.month, p_tm.day) == (1399, 11, 30)

        p_tm = p_tm.add_days(1)
        assert (p_tm.year, p_tm.month, p_tm.day) == (1400, 0, 1)

    def test_add_days_negative(self, nowruz) -> None:
        p_tm = nowruz.add_days(-1)
        assert (p_tm.year, p_tm.month, p_tm.day) == (1394, 11, 29)

    def test_add_small_units(self, nowruz) -> None:
        p_tm = nowruz.add_hours(25).add_minutes(61).add_seconds(61)
        assert (p_tm.day, p_tm.hour, p_tm.minute, p_tm.second) == (2, 2, 2, 1)

    def test_add_nanoseconds_carries(self, nowruz) -> None:
        p_tm = nowruz.add_nanoseconds(-1)

        assert (p_tm.year, p_tm.month, p_tm.day) == (1394, 11, 29)
        assert (p_tm.hour, p_tm.minute, p_tm.second) == (23, 59, 59)
        assert p_tm.nanosecond == 999_999_999

    def test_arithmetic_keeps_offset(self) -> None:
        p_tm = ptime.from_persian_components(1399, 11, 30, 23, utc_offset=TEHRAN_OFFSET)
        later = p_tm.add_hours(1)

        assert (later.year, later.month, later.day, later.hour) == (1400, 0, 1, 0)
        assert later.utc_offset == TEHRAN_OFFSET

    def test_add_timedelta(self, nowruz) -> None:
        p_tm = nowruz + timedelta(hours=25)
        assert (p_tm.day, p_tm.hour) == (2, 1)

        p_tm = timedelta(days=2) + nowruz
        assert p_tm.day == 3

    def test_subtract_timedelta(self, nowruz) -> None:
        p_tm = nowruz - timedelta(days=1)
        assert (p_tm.year, p_tm.month, p_tm.day) == (1394, 11, 29)

    def test_difference_is_timedelta(self, nowruz) -> None:
        assert ptime.from_persian_date(1395, 0, 2) - nowruz == timedelta(days=1)
        assert nowruz - ptime.from_persian_date(1395, 0, 2) == timedelta(days=-1)

    def test_difference_with_datetime(self, nowruz) -> None:
        """naive datetime трактуется как UTC"""
        assert nowruz - datetime(2016, 3, 19) == timedelta(days=1)
        aware = datetime(2016, 3, 20, 3, 30, tzinfo=timezone(timedelta(seconds=TEHRAN_OFFSET)))
        assert nowruz - aware == timedelta(0)

    def test_difference_truncates_to_microseconds(self, nowruz) -> None:
        assert nowruz.add_nanoseconds(1_999) - nowruz == timedelta(microseconds=1)

    def test_unsupported_operand(self, nowruz) -> None:
        with pytest.raises(TypeError):
            nowruz + 1
        with pytest.raises(TypeError):
            nowruz - 1


# =============================================================================
# OFFSETS
# =============================================================================


class TestOffsets:
    """with_offset, to_utc, to_local"""

    def test_to_utc(self) -> None:
        p_tm = ptime.from_persian_components(1395, 0, 1, 2, utc_offset=TEHRAN_OFFSET)
        utc = p_tm.to_utc()

        assert (utc.year, utc.month, utc.day) == (1394, 11, 29)
        assert (utc.hour, utc.minute) == (22, 30)
        assert utc.utc_offset == 0

    def test_with_offset_negative(self, nowruz) -> None:
        p_tm = nowruz.with_offset(-3_600)
        assert (p_tm.year, p_tm.month, p_tm.day, p_tm.hour) == (1394, 11, 29, 23)
        assert p_tm.utc_offset == -3_600

    def test_with_offset_invalid(self, nowruz) -> None:
        with pytest.raises(InvalidTime):
            nowruz.with_offset(90_000)

    def test_to_local(self, nowruz) -> None:
        p_tm = nowruz.to_local(FixedClock(0, utc_offset=16_200))
        assert (p_tm.hour, p_tm.minute) == (4, 30)
        assert p_tm.utc_offset == 16_200
        assert p_tm.same_instant(nowruz)

    def test_to_local_year_zero_with_fixed_clock(self) -> None:
        """С инъецируемыми часами to_local тотальна и вне диапазона datetime"""
        p_tm = ptime.from_gregorian(GregorianDateTime(0, 1, 1))
        local = p_tm.to_local(FixedClock(0, utc_offset=TEHRAN_OFFSET))

        assert (local.hour, local.minute) == (3, 30)
        assert local.same_instant(p_tm)

    def test_to_local_year_zero_with_system_clock(self) -> None:
        """SystemClock не определяет смещение ОС для года 0"""
        p_tm = ptime.from_gregorian(GregorianDateTime(0, 1, 1))
        with pytest.raises((OverflowError, OSError, ValueError)):
            p_tm.to_local()


# =============================================================================
# COMPARISON
# =============================================================================


class TestComparison:
    """Равенство по полям, порядок по моменту"""

    def test_same_instant_different_offset(self, nowruz) -> None:
        tehran = nowruz.with_offset(TEHRAN_OFFSET)

        assert tehran != nowruz
        assert tehran.same_instant(nowruz)
        assert tehran <= nowruz and tehran >= nowruz
        assert not tehran < nowruz
        assert not tehran > nowruz

    def test_ordering(self, nowruz) -> None:
        later = nowruz.add_nanoseconds(1)
        earlier = nowruz.add_days(-400)

        assert earlier < nowruz < later
        assert later > nowruz > earlier
        assert sorted([later, earlier, nowruz]) == [earlier, nowruz, later]

    def test_ordering_across_offsets(self) -> None:
        """03:00 при +03:30 раньше 00:00 UTC того же дня"""
        tehran = ptime.from_persian_components(1395, 0, 1, 3, utc_offset=TEHRAN_OFFSET)
        utc = ptime.from_persian_date(1395, 0, 1)
        assert tehran < utc

    def test_comparison_with_other_types(self, nowruz) -> None:
        with pytest.raises(TypeError):
            nowruz < 5


# =============================================================================
# DATETIME INTEROP
# =============================================================================


class TestDatetimeInterop:
    """Interop с datetime стандартной библиотеки"""

    def test_to_datetime(self, nowruz) -> None:
        value = nowruz.to_datetime()
        assert value == datetime(2016, 3, 20, tzinfo=timezone.utc)
        assert value.utcoffset() == timedelta(0)

    def test_to_datetime_keeps_offset(self) -> None:
        p_tm = ptime.from_persian_components(1395, 0, 1, 3, 30, nanosecond=1_500, utc_offset=TEHRAN_OFFSET)
        value = p_tm.to_datetime()

        assert value.utcoffset() == timedelta(seconds=TEHRAN_OFFSET)
        assert value.microsecond == 1
        assert (value.hour, value.minute) == (3, 30)

    def test_from_naive_datetime_is_utc(self) -> None:
        p_tm = ptime.from_gregorian(datetime(2016, 3, 21, 10, 30, 0, 250))

        assert (p_tm.year, p_tm.month, p_tm.day) == (1395, 0, 2)
        assert (p_tm.hour, p_tm.minute) == (10, 30)
        assert p_tm.nanosecond == 250_000
        assert p_tm.utc_offset == 0

    def test_from_aware_datetime(self) -> None:
        aware = datetime(2016, 3, 21, 10, 30, tzinfo=timezone(timedelta(hours=3, minutes=30)))
        p_tm = ptime.from_gregorian(aware)
        assert p_tm.utc_offset == TEHRAN_OFFSET
        assert p_tm.hour == 10

        utc = ptime.from_gregorian(aware, tz_offset=0)
        assert (utc.hour, utc.minute) == (7, 0)

    def test_to_datetime_out_of_range(self) -> None:
        """Год 0 не представим в datetime, но to_gregorian тотальна"""
        g_tm = GregorianDateTime(0, 1, 1)
        p_tm = ptime.from_gregorian(g_tm)

        assert p_tm.to_gregorian().date == GregorianDate(0, 1, 1)
        with pytest.raises(ValueError):
            p_tm.to_datetime()


# =============================================================================
# CLOCK
# =============================================================================


class TestClockInjection:
    """now/now_utc/at/at_utc с FixedClock"""

    def test_now(self, tehran_clock) -> None:
        p_tm = ptime.now(tehran_clock)

        assert (p_tm.year, p_tm.month, p_tm.day) == (1395, 0, 1)
        assert (p_tm.hour, p_tm.minute) == (3, 30)
        assert p_tm.nanosecond == 500
        assert p_tm.utc_offset == TEHRAN_OFFSET

    def test_now_utc(self, tehran_clock) -> None:
        p_tm = ptime.now_utc(tehran_clock)

        assert (p_tm.year, p_tm.month, p_tm.day, p_tm.hour) == (1395, 0, 1, 0)
        assert p_tm.utc_offset == 0
        assert p_tm.same_instant(ptime.now(tehran_clock))

    def test_at_uses_clock_offset(self, tehran_clock) -> None:
        p_tm = ptime.at(0, clock=tehran_clock)

        assert (p_tm.year, p_tm.month, p_tm.day) == (1348, 9, 11)
        assert (p_tm.hour, p_tm.minute) == (3, 30)

    def test_now_follows_tick(self, tehran_clock) -> None:
        before = ptime.now(tehran_clock)
        tehran_clock.tick(seconds=86_400)
        after = ptime.now(tehran_clock)

        assert after - before == timedelta(days=1)

    def test_now_system_clock(self) -> None:
        """Без clock используется SystemClock"""
        p_tm = ptime.now_utc()
        assert p_tm.utc_offset == 0
        assert p_tm.year >= 1403
