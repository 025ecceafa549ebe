"""
Structured error types for the attribute pipeline.

Every failure the pipeline can produce is a subclass of ``AttributerError``
and carries a category, a structured context naming the owning type, the
attribute and (where relevant) the handler involved, plus the chained cause.

Manifesto:
    - **Typed Error Hierarchy:** One error type per pipeline stage
    - **Rich Context:** Errors name the owner, attribute and handler
    - **Error Chaining:** Handler exceptions are preserved, never swallowed
    - **Aggregation where it helps:** Validation and callback stages report
      every handler failure at once; coercion stops at the first

Architecture:
    ::

        ┌──────────────────────────────────────────────────────────────┐
        │                      AttributerError                          │
        │               (category, context, cause)                      │
        ├──────────────────────────────────────────────────────────────┤
        │                                                               │
        │  ConfigurationError        CoercionExecutionError             │
        │  (CONFIG, ValueError)      (COERCION, .handler)               │
        │       │                                                       │
        │  InvalidHandlerError       ValidationError                    │
        │  (CONFIG, TypeError)       (VALIDATION, ValueError)           │
        │                                                               │
        │  AggregateError (.errors)                                     │
        │       │                                                       │
        │  ValidationExecutionError  CallbackExecutionError             │
        │  (VALIDATION)              (CALLBACK)                         │
        └──────────────────────────────────────────────────────────────┘

Examples:
    Plain rejection vs. aggregate failure:

    >>> error = ValidationError("`User.age`: has invalid value: -1", field="age", value=-1)
    >>> error.to_dict()["field"]
    'age'

    >>> error = ValidationExecutionError([ValueError("boom"), KeyError("k")])
    >>> len(error.errors)
    2

Guardrails:
    ❌ DON'T: Catch ``AggregateError`` and re-raise only the first error
    ✅ DO: Inspect ``error.errors`` for every handler failure

    ❌ DON'T: Raise ``ValidationExecutionError`` for a predicate that
       returned False
    ✅ DO: Use ``ValidationError`` for ordinary rejections

Tags:
    error-handling, exception-hierarchy, error-context, attributer

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """
    Standard error categories, one per pipeline stage.

    Attributes:
        CONFIG: Invalid declaration options (signature, handlers, owner)
        COERCION: A coercion handler raised
        VALIDATION: A value was rejected or a validation handler raised
        CALLBACK: One or more change callbacks raised
        INTERNAL: Unexpected state
    """

    CONFIG = "CONFIG"
    COERCION = "COERCION"
    VALIDATION = "VALIDATION"
    CALLBACK = "CALLBACK"
    INTERNAL = "INTERNAL"


@dataclass
class ErrorContext:
    """
    Structured metadata attached to an error.

    Attributes:
        owner: Qualified name of the owning type
        attribute: Attribute name
        handler: Textual representation of the handler involved
        metadata: Additional key-value pairs
    """

    owner: str | None = None
    attribute: str | None = None
    handler: str | None = None

    metadata: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        result = {}
        for key in ["owner", "attribute", "handler"]:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        if self.metadata:
            result.update(self.metadata)
        return result


class AttributerError(Exception):
    """
    Base exception for every error raised by the attribute pipeline.

    Subclasses set ``default_category``; instances carry an ``ErrorContext``
    and an optional chained ``cause``.

    Examples:
        >>> error = AttributerError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        >>> error = AttributerError("bad").with_context(owner="User", attribute="name")
        >>> error.context.attribute
        'name'
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: ErrorContext | None = None,
        cause: BaseException | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context = context or ErrorContext()
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> AttributerError:
        """
        Add context to this error (fluent API).

        Usage:
            raise ConfigurationError("bad option").with_context(
                owner="User", attribute="email"
            )
        """
        for key, value in kwargs.items():
            if hasattr(self.context, key) and key != "metadata":
                setattr(self.context, key, value)
            else:
                self.context.metadata[key] = value
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }

        context_dict = self.context.to_dict()
        if context_dict:
            result["context"] = context_dict

        if self.cause is not None:
            result["cause"] = str(self.cause)

        return result

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigurationError(AttributerError, ValueError):
    """
    Invalid declaration options.

    Raised eagerly while an ``Attribute`` or ``Signature`` is constructed.
    Never retried; the declaration must be fixed.
    """

    default_category = ErrorCategory.CONFIG


class InvalidHandlerError(ConfigurationError, TypeError):
    """A coercer, validator or callback handler has an unsupported shape."""

    def __init__(self, message: str, handler: Any = None, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.handler = handler


# =============================================================================
# PIPELINE ERRORS
# =============================================================================


class CoercionExecutionError(AttributerError):
    """
    A coercion handler raised.

    Coercion is fail-fast: the first raising handler aborts the chain and
    is exposed as ``handler``; the original exception is the ``cause``.
    """

    default_category = ErrorCategory.COERCION

    def __init__(self, message: str, handler: Any, **kwargs: Any):
        super().__init__(message, **kwargs)
        self.handler = handler


class ValidationError(AttributerError, ValueError):
    """
    A value was rejected.

    Used for requiredness and nilability violations and for handlers that
    ran cleanly but returned a falsy outcome. Always a single message.
    """

    default_category = ErrorCategory.VALIDATION

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        constraint: str | None = None,
        **kwargs: Any,
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value
        self.constraint = constraint

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        if self.value is not None:
            result["value"] = repr(self.value)
        if self.constraint:
            result["constraint"] = self.constraint
        return result


class AggregateError(AttributerError):
    """
    Several handler errors reported together.

    The message is the summary line followed by one ``  - <message>`` line
    per collected error, in handler order.
    """

    def __init__(self, message: str, errors: Sequence[BaseException], **kwargs: Any):
        self.errors: list[BaseException] = list(errors)
        lines = "\n".join(f"  - {error}" for error in self.errors)
        super().__init__(f"{message}\n{lines}", **kwargs)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["errors"] = [f"{type(error).__name__}: {error}" for error in self.errors]
        return result


class ValidationExecutionError(AggregateError):
    """One or more validation handlers raised."""

    default_category = ErrorCategory.VALIDATION

    def __init__(self, errors: Sequence[BaseException], **kwargs: Any):
        super().__init__("The following errors occurred during validation execution:", errors, **kwargs)


class CallbackExecutionError(AggregateError):
    """One or more change callbacks raised. Every callback still ran."""

    default_category = ErrorCategory.CALLBACK

    def __init__(self, errors: Sequence[BaseException], **kwargs: Any):
        super().__init__("The following errors occurred during callback execution:", errors, **kwargs)


__all__ = [
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
