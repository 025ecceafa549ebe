"""Coercion stage of the assignment pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from attributer.attribute.handlers import Handler, MethodReference, as_handler_list, unique_by_identity
from attributer.attribute.mixin import BelongsToAttribute
from attributer.core.errors import CoercionExecutionError, ErrorContext, InvalidHandlerError
from attributer.core.logging import get_logger
from attributer.core.undefined import UNDEFINED

if TYPE_CHECKING:
    from attributer.attribute.attribute import Attribute

logger = get_logger(__name__)


class Coercer(BelongsToAttribute):
    """Ordered chain of transformations applied before validation.

    Handlers are callables taking ``(value)`` or ``(instance, value)``, or
    references to methods of the owner (``MethodReference`` or a bare
    method name).  The chain is fail-fast: the first handler that raises
    aborts coercion with ``CoercionExecutionError``.
    """

    def __init__(self, attribute: Attribute, handlers: Any = ()):
        super().__init__(attribute)
        self._handlers = [self._build_handler(handler) for handler in unique_by_identity(as_handler_list(handlers))]

    @property
    def handlers(self) -> list[Any]:
        return [handler.target for handler in self._handlers]

    def apply(self, instance: Any, value: Any) -> Any:
        """Run every handler over *value*, left to right.

        ``UNDEFINED`` passes through untouched, as does ``None`` when the
        attribute is not nilable; the validator rejects it on its own.
        """
        if value is UNDEFINED:
            return value
        if value is None and not self._attribute.signature.is_nilable:
            return value

        result = value
        for handler in self._handlers:
            try:
                result = handler(instance, result)
            except Exception as e:
                logger.debug(
                    "coercion_failed",
                    owner=self._attribute.owner.__name__,
                    attribute=self._attribute.name,
                    handler=repr(handler.target),
                    error=str(e),
                )
                raise CoercionExecutionError(
                    f"{self._attribute_method_name}: coercer {handler.target!r} failed: {type(e).__name__}: {e}",
                    handler.target,
                    cause=e,
                    context=ErrorContext(
                        owner=self._attribute.owner.__name__,
                        attribute=self._attribute.name,
                        handler=repr(handler.target),
                    ),
                ) from e
        return result

    def _copy_state_from(self, source: Coercer) -> None:
        self._handlers = list(source._handlers)

    def _build_handler(self, handler: Any) -> Handler:
        if isinstance(handler, (MethodReference, str)):
            try:
                return Handler.method(handler, self._attribute.owner)
            except InvalidHandlerError as e:
                raise InvalidHandlerError(
                    f"{self._attribute_method_name}: invalid coercer: {handler!r}. {e}", handler
                ) from e
        if callable(handler):
            return Handler.call(handler, 1)
        raise InvalidHandlerError(
            f"{self._attribute_method_name}: invalid coercer: {handler!r}. "
            "Must be a callable or a reference to a method.",
            handler,
        )
