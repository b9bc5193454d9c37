"""
JSON Schema Contract Validators

Сериализованная форма даты/времени — плоский словарь целых компонентов.
Структура (набор ключей, типы, диапазоны полей) проверяется JSON Schema;
календарные правила, которые схема выразить не может (длина месяца,
30 Esfand только в високосный год), проверяются при создании значения и
дают InvalidDate / InvalidTime.

Схемы (package data, каталог schema/):
- persian_datetime.json   — месяц 0-11
- gregorian_datetime.json — месяц 1-12
"""

import dataclasses
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator

from ptime.core.domain.gregorian_datetime import GregorianDateTime
from ptime.core.domain.persian_datetime import PersianDateTime, from_persian_components

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

PERSIAN_DATETIME_SCHEMA: Final[str] = "persian_datetime"
GREGORIAN_DATETIME_SCHEMA: Final[str] = "gregorian_datetime"

_DEFAULT_SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema файлов ptime.

    Каждая схема читается с диска один раз и проходит meta-validation
    против Draft 2020-12 до первого использования.
    """

    def __init__(self, schema_dir: Path | None = None):
        """
        Args:
            schema_dir: Каталог со схемами (default: schema/ рядом с модулем)

        Raises:
            RuntimeError: Если каталог не существует
        """
        self._schema_dir = schema_dir or _DEFAULT_SCHEMA_DIR
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._schemas: Dict[str, Dict[str, Any]] = {}

    def available(self) -> List[str]:
        """Имена схем каталога (без расширения), по алфавиту."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени.

        Args:
            schema_name: Имя схемы без расширения (например, 'persian_datetime')

        Returns:
            Схема как dict (один и тот же объект при повторных вызовах)

        Raises:
            FileNotFoundError: Если файл схемы не найден
            json.JSONDecodeError: Если файл не является валидным JSON
            ValueError: Если файл не является валидной JSON Schema
        """
        cached = self._schemas.get(schema_name)
        if cached is not None:
            return cached

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        logger.debug("Loaded schema %s from %s", schema_name, schema_path)
        self._schemas[schema_name] = schema
        return schema


_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATOR
# =============================================================================


class ContractValidator:
    """
    Проверка словаря компонентов против одной схемы.

    Получать через get_validator(): экземпляры кэшируются по имени схемы.
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение схемы
        """
        self._validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)

    def describe_errors(self, data: Dict[str, Any]) -> List[str]:
        """
        Все нарушения схемы в виде строк "поле: сообщение".

        Нарушения уровня объекта (лишний или отсутствующий ключ) помечаются
        как "<root>".

        Examples:
            >>> get_validator("persian_datetime").describe_errors({"year": 1395, "month": 12, "day": 1})
            ['month: 12 is greater than the maximum of 11']
        """
        messages = []
        for error in sorted(self.iter_errors(data), key=lambda e: list(e.path)):
            field = ".".join(str(part) for part in error.path) or "<root>"
            messages.append(f"{field}: {error.message}")
        return messages


@lru_cache(maxsize=None)
def get_validator(schema_name: str) -> ContractValidator:
    """
    Кэшированный валидатор для схемы schema_name.

    Raises:
        FileNotFoundError: Если схемы с таким именем нет
    """
    return ContractValidator(schema_name)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_persian_datetime(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если данные не соответствуют persian_datetime.json
    """
    get_validator(PERSIAN_DATETIME_SCHEMA).validate(data)


def validate_gregorian_datetime(data: Dict[str, Any]) -> None:
    """
    Raises:
        jsonschema.ValidationError: Если данные не соответствуют gregorian_datetime.json
    """
    get_validator(GREGORIAN_DATETIME_SCHEMA).validate(data)


def to_dict(value: PersianDateTime) -> Dict[str, int]:
    return value.to_dict()


def from_dict(data: Dict[str, Any]) -> PersianDateTime:
    """
    Десериализация PersianDateTime.

    Args:
        data: Словарь компонентов (month 0-based)

    Returns:
        PersianDateTime

    Raises:
        jsonschema.ValidationError: Если структура не соответствует схеме
        InvalidDate: Если дата не существует (например, 30 Esfand невисокосного года)
        InvalidTime: Если компонент времени вне диапазона
    """
    validate_persian_datetime(data)
    return from_persian_components(**{key: int(value) for key, value in data.items()})


def gregorian_to_dict(value: GregorianDateTime) -> Dict[str, int]:
    return dataclasses.asdict(value)


def gregorian_from_dict(data: Dict[str, Any]) -> GregorianDateTime:
    """
    Десериализация GregorianDateTime.

    Raises:
        jsonschema.ValidationError: Если структура не соответствует схеме
        InvalidDate / InvalidTime: Если компоненты не образуют валидный момент
    """
    validate_gregorian_datetime(data)
    return GregorianDateTime(**{key: int(value) for key, value in data.items()})
