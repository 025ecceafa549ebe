"""Validation stage of the assignment pipeline.

Manifesto:
    Requiredness and nilability are checked before any handler runs, so a
    missing or ``None`` value never reaches user code.  After that every
    handler runs: exceptions raised by handlers are bugs or broken
    environments and are reported together, while a handler that simply
    returns False is an ordinary rejection reported with one message.

Tags:
    attributer, validation, aggregate-errors

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from attributer.attribute.handlers import (
    Handler,
    MethodReference,
    as_handler_list,
    is_type_pattern,
    unique_by_identity,
)
from attributer.attribute.mixin import BelongsToAttribute
from attributer.core.errors import ErrorContext, InvalidHandlerError, ValidationError, ValidationExecutionError
from attributer.core.logging import get_logger
from attributer.core.undefined import UNDEFINED

if TYPE_CHECKING:
    from attributer.attribute.attribute import Attribute

logger = get_logger(__name__)


class Validator(BelongsToAttribute):
    """Ordered set of checks a value must pass before it is stored.

    Handler shapes:
        - a predicate callable taking ``(value)`` or ``(instance, value)``
        - a ``MethodReference`` to a predicate method of the owner
        - any other object, matched with :func:`attributer.attribute.handlers.matches`
          (types use ``isinstance``, regexes ``search``, ranges and sets
          membership, everything else equality)

    Bare strings are match targets here, not method names.
    """

    def __init__(self, attribute: Attribute, handlers: Any = ()):
        super().__init__(attribute)
        self._handlers = [self._build_handler(handler) for handler in unique_by_identity(as_handler_list(handlers))]

    @property
    def handlers(self) -> list[Any]:
        return [handler.target for handler in self._handlers]

    def apply(self, instance: Any, value: Any) -> None:
        """Validate *value*.

        Raises:
            ValidationError: required value missing, ``None`` on a non-nilable
                attribute, or a handler returned a falsy outcome
            ValidationExecutionError: one or more handlers raised
        """
        if value is UNDEFINED:
            if self._attribute.signature.is_optional:
                return
            raise self._rejection("is required", value, "required")

        if value is None:
            if self._attribute.signature.is_nilable:
                return
            raise self._rejection("cannot be nil", value, "nilable")

        self._run_validations(instance, value)

    def _run_validations(self, instance: Any, value: Any) -> None:
        errors: list[Exception] = []
        rejected = False

        for handler in self._handlers:
            try:
                if not handler(instance, value):
                    rejected = True
            except Exception as e:
                errors.append(e)

        if errors:
            logger.debug(
                "validation_errored",
                owner=self._attribute.owner.__name__,
                attribute=self._attribute.name,
                error_count=len(errors),
            )
            raise ValidationExecutionError(errors, context=self._context())

        if rejected:
            raise self._rejection(f"has invalid value: {value!r}", value, "handlers")

    def _rejection(self, reason: str, value: Any, constraint: str) -> ValidationError:
        logger.debug(
            "validation_rejected",
            owner=self._attribute.owner.__name__,
            attribute=self._attribute.name,
            constraint=constraint,
        )
        return ValidationError(
            f"{self._attribute_method_name}: {reason}",
            field=self._attribute.name,
            value=None if value is UNDEFINED else value,
            constraint=constraint,
            context=self._context(),
        )

    def _context(self) -> ErrorContext:
        return ErrorContext(owner=self._attribute.owner.__name__, attribute=self._attribute.name)

    def _copy_state_from(self, source: Validator) -> None:
        self._handlers = list(source._handlers)

    def _build_handler(self, handler: Any) -> Handler:
        if handler is UNDEFINED:
            raise InvalidHandlerError(f"{self._attribute_method_name}: invalid validator: {handler!r}.", handler)
        if isinstance(handler, MethodReference):
            try:
                return Handler.method(handler, self._attribute.owner)
            except InvalidHandlerError as e:
                raise InvalidHandlerError(
                    f"{self._attribute_method_name}: invalid validator: {handler!r}. {e}", handler
                ) from e
        if callable(handler) and not is_type_pattern(handler):
            return Handler.call(handler, 1)
        return Handler.match(handler)
