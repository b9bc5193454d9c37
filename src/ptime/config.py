"""
Config — Конфигурация форматирования

Конфигурация передаётся явно; глобального состояния и переменных окружения нет.
"""

from dataclasses import dataclass
from typing import Final

# Шаблон по умолчанию для str(PersianDateTime)
DEFAULT_PATTERN: Final[str] = "yyyy-MM-ddTHH:mm:ss.ns"


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация форматтера.

    - default_pattern: шаблон для str() и format() без аргумента
    - persian_digits: выводить цифры числовых токенов как ۰۱۲۳۴۵۶۷۸۹
    """

    default_pattern: str = DEFAULT_PATTERN
    persian_digits: bool = False


DEFAULT_FORMAT_CONFIG: Final[FormatConfig] = FormatConfig()
