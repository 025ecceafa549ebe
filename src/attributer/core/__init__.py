"""Attributer core -- sentinel, errors, logging and settings.

Architecture::

    undefined.py     UNDEFINED sentinel ("caller supplied nothing")
    errors.py        Structured error hierarchy (AttributerError, ...)
    logging.py       structlog configuration + get_logger
    settings.py      AttributerSettings (pydantic-settings)
"""

from attributer.core.errors import (
    AggregateError,
    AttributerError,
    CallbackExecutionError,
    CoercionExecutionError,
    ConfigurationError,
    ErrorCategory,
    ErrorContext,
    InvalidHandlerError,
    ValidationError,
    ValidationExecutionError,
)
from attributer.core.undefined import UNDEFINED, UndefinedType

__all__ = [
    "UNDEFINED",
    "UndefinedType",
    "ErrorCategory",
    "ErrorContext",
    "AttributerError",
    "ConfigurationError",
    "InvalidHandlerError",
    "CoercionExecutionError",
    "ValidationError",
    "AggregateError",
    "ValidationExecutionError",
    "CallbackExecutionError",
]
