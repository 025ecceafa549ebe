"""Change callbacks, run after a value is committed."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from attributer.attribute.handlers import Handler, as_handler_list, unique_by_identity
from attributer.attribute.mixin import BelongsToAttribute
from attributer.core.errors import CallbackExecutionError, ErrorContext, InvalidHandlerError
from attributer.core.logging import get_logger

if TYPE_CHECKING:
    from attributer.attribute.attribute import Attribute

logger = get_logger(__name__)


class Callback(BelongsToAttribute):
    """Observers notified with ``(old_value, new_value)`` after each assignment.

    Handlers are callables taking ``(old, new)`` or ``(instance, old, new)``.
    Only required positional parameters decide the shape, so
    ``def cb(instance, old, new=None)`` counts as two and is called as
    ``cb(old, new)``; the instance form needs all three parameters required.
    Every handler runs even if an earlier one raised; the collected errors
    are raised together as ``CallbackExecutionError``.
    """

    def __init__(self, attribute: Attribute, handlers: Any = ()):
        super().__init__(attribute)
        self._handlers = [self._build_handler(handler) for handler in unique_by_identity(as_handler_list(handlers))]

    @property
    def handlers(self) -> list[Any]:
        return [handler.target for handler in self._handlers]

    def apply(self, instance: Any, old_value: Any, new_value: Any) -> None:
        errors: list[Exception] = []
        for handler in self._handlers:
            try:
                handler(instance, old_value, new_value)
            except Exception as e:
                errors.append(e)

        if errors:
            logger.debug(
                "callbacks_failed",
                owner=self._attribute.owner.__name__,
                attribute=self._attribute.name,
                error_count=len(errors),
            )
            raise CallbackExecutionError(
                errors,
                context=ErrorContext(owner=self._attribute.owner.__name__, attribute=self._attribute.name),
            )

    def _copy_state_from(self, source: Callback) -> None:
        self._handlers = list(source._handlers)

    def _build_handler(self, handler: Any) -> Handler:
        if callable(handler):
            return Handler.call(handler, 2)
        raise InvalidHandlerError(
            f"{self._attribute_method_name}: invalid handler: {handler!r}. Must be a callable", handler
        )
