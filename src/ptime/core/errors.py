"""
Errors — Исключения библиотеки ptime

Все точки входа, принимающие «сырые» компоненты даты/времени, либо возвращают
валидное значение, либо поднимают одно из этих исключений. Частично
валидных экземпляров не бывает.

Конверсии из уже валидного значения (to_gregorian, weekday, арифметика)
тотальны и исключений не поднимают.
"""


class PersianTimeError(ValueError):
    """Базовое исключение ptime (наследует ValueError)"""

    pass


class InvalidDate(PersianTimeError):
    """
    Комбинация год/месяц/день не существует в целевом календаре.

    Включает:
    - месяц вне [0, 11] (персидский) или [1, 12] (григорианский)
    - день вне допустимого диапазона для месяца/года
    - 30 Эсфанда в невисокосном году
    """

    pass


class InvalidTime(PersianTimeError):
    """
    Компонент времени вне диапазона.

    hour [0, 23], minute/second [0, 59], nanosecond [0, 999_999_999],
    utc_offset (-86400, 86400) секунд.
    """

    pass
