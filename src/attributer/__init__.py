"""
Attributer - declarative attribute descriptors with coercion, validation,
defaults, change callbacks and visibility.

Architecture::

    core/             Sentinel, error hierarchy, logging, settings
    attribute/        Attribute + Signature, Coercer, Validator, Callback
    attribute_set.py  Canonically ordered, mergeable attribute collection
    registry.py       Per-type attribute set registry
    dsl/              argument()/option() builders, accessors, initializer
    base.py           Attributer base class

Usage:
    from attributer import Attributer, argument, option

    class User(Attributer):
        name = argument(str).coerce_with(str.strip).non_nilable()
        age = option(int, default=0).validate_with(lambda value: value >= 0)
"""

from attributer.attribute import (
    Attribute,
    AttributeKind,
    Callback,
    Coercer,
    MethodReference,
    Signature,
    Validator,
    Visibility,
)
from attributer.attribute_set import AttributeSet
from attributer.base import Attributer, attributes_of
from attributer.core.errors import (
    AggregateError,
    AttributerError,
    CallbackExecutionError,
    CoercionExecutionError,
    ConfigurationError,
    InvalidHandlerError,
    ValidationError,
    ValidationExecutionError,
)
from attributer.core.logging import configure_logging, get_logger
from attributer.core.undefined import UNDEFINED, UndefinedType
from attributer.dsl import AttributeBuilder, Initializer, argument, option
from attributer.registry import get_attributes

__version__ = "0.1.0"

__all__ = [
    # Sentinel
    "UNDEFINED",
    "UndefinedType",
    # Descriptor
    "Attribute",
    "AttributeKind",
    "AttributeSet",
    "Callback",
    "Coercer",
    "MethodReference",
    "Signature",
    "Validator",
    "Visibility",
    # Declaration
    "Attributer",
    "AttributeBuilder",
    "Initializer",
    "argument",
    "option",
    "attributes_of",
    "get_attributes",
    # Errors
    "AttributerError",
    "ConfigurationError",
    "InvalidHandlerError",
    "CoercionExecutionError",
    "ValidationError",
    "AggregateError",
    "ValidationExecutionError",
    "CallbackExecutionError",
    # Logging
    "configure_logging",
    "get_logger",
]
