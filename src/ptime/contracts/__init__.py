"""
Contract Validation Module

Модуль для сериализации и валидации JSON контрактов ptime.
"""

from .validators import (
    GREGORIAN_DATETIME_SCHEMA,
    PERSIAN_DATETIME_SCHEMA,
    ContractValidator,
    SchemaLoader,
    from_dict,
    get_validator,
    gregorian_from_dict,
    gregorian_to_dict,
    to_dict,
    validate_gregorian_datetime,
    validate_persian_datetime,
)

__all__ = [
    # Schema names
    "PERSIAN_DATETIME_SCHEMA",
    "GREGORIAN_DATETIME_SCHEMA",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    # Functions
    "get_validator",
    "validate_persian_datetime",
    "validate_gregorian_datetime",
    "to_dict",
    "from_dict",
    "gregorian_to_dict",
    "gregorian_from_dict",
]
