"""
Weekday — Дни персидской недели

Неделя начинается с субботы (Shanbeh = 0) и заканчивается пятницей (Jomeh = 6).
"""

from enum import IntEnum


class Weekday(IntEnum):
    """День недели, отсчёт от субботы"""

    SATURDAY = 0
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6

    @classmethod
    def from_iso(cls, iso_weekday: int) -> "Weekday":
        """
        Конверсия ISO-дня недели (понедельник = 1, ..., воскресенье = 7).

        Args:
            iso_weekday: День недели по ISO 8601

        Returns:
            Соответствующий Weekday

        Raises:
            ValueError: Если iso_weekday вне [1, 7]
        """
        if iso_weekday < 1 or iso_weekday > 7:
            raise ValueError(f"iso_weekday must be 1-7, got {iso_weekday}")
        return cls((iso_weekday + 1) % 7)

    def to_iso(self) -> int:
        """ISO-день недели (понедельник = 1, ..., воскресенье = 7)"""
        return (self.value + 5) % 7 + 1
