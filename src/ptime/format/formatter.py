"""
Formatter — Локализованное форматирование PersianDateTime

Шаблон сканируется слева направо; в каждой позиции жадно выбирается самый
длинный токен из TOKEN_TABLE, остальные символы копируются как есть.
Экранирования нет: токен всегда побеждает литерал (например, "d" в шаблоне
всегда означает день месяца).

Форматирование не изменяет значение; повторные вызовы с тем же шаблоном
дают идентичный результат.
"""

from typing import TYPE_CHECKING, Optional

from ptime.config import DEFAULT_FORMAT_CONFIG, FormatConfig
from ptime.format.names import PERSIAN_DIGIT_TABLE
from ptime.format.tokens import match_token

if TYPE_CHECKING:
    from ptime.core.domain.persian_datetime import PersianDateTime


def format_persian(
    value: "PersianDateTime",
    pattern: Optional[str] = None,
    config: Optional[FormatConfig] = None,
) -> str:
    """
    Форматирование персидской даты/времени по шаблону.

    Args:
        value: PersianDateTime
        pattern: Шаблон (None → config.default_pattern)
        config: Конфигурация форматтера (default: DEFAULT_FORMAT_CONFIG)

    Returns:
        Отформатированная строка

    Examples:
        >>> format_persian(from_persian_components(1394, 0, 1, 13, 5, 9), "yyyy-MM-dd HH:mm:ss")  # doctest: +SKIP
        '1394-01-01 13:05:09'
    """
    config = config or DEFAULT_FORMAT_CONFIG
    if pattern is None:
        pattern = config.default_pattern

    parts: list[str] = []
    position = 0

    while position < len(pattern):
        token = match_token(pattern, position)

        if token is None:
            parts.append(pattern[position])
            position += 1
            continue

        rendered = token.render(value)
        if config.persian_digits and token.numeric:
            rendered = rendered.translate(PERSIAN_DIGIT_TABLE)

        parts.append(rendered)
        position += len(token.token)

    return "".join(parts)
