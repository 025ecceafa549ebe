"""Handler shapes shared by coercers, validators and callbacks.

Manifesto:
    A handler's shape is decided once, when it is registered, not every
    time a value flows through it.  ``Handler`` records that decision as a
    tagged union so the hot path is a single dispatch on ``kind``.

    - **call:** a plain callable; receives the instance first when its
      signature has room for it
    - **method:** a reference to a method on the owner, looked up on the
      instance at call time
    - **match:** any other object, used as a pattern the value must match

Tags:
    attributer, handlers, coercion, validation, callbacks

Doc-Types:
    api-reference
"""

from __future__ import annotations

import inspect
import re
import types
import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from attributer.core.errors import InvalidHandlerError
from attributer.core.undefined import UNDEFINED


class HandlerKind(str, Enum):
    """How a handler is invoked."""

    CALL = "call"
    METHOD = "method"
    MATCH = "match"


class MethodReference:
    """Refer to a method of the owning type by name.

    The method is resolved on the instance each time the handler runs, so
    subclasses overriding the method are honored.

    Example:
        >>> class User(Attributer):
        ...     email = option(str, coerce=MethodReference("normalize_email"))
        ...     def normalize_email(self, value):
        ...         return value.strip().lower()
    """

    __slots__ = ("name",)

    def __init__(self, name: str):
        if not isinstance(name, str) or not name.isidentifier():
            raise InvalidHandlerError(f"invalid method reference: {name!r}. Must be an identifier.", name)
        self.name = name

    def __repr__(self) -> str:
        return f"MethodReference({self.name!r})"


def as_handler_list(handlers: Any) -> list[Any]:
    """Normalize a single handler or a list/tuple of handlers into a list."""
    if handlers is None or handlers is UNDEFINED:
        return []
    if isinstance(handlers, (list, tuple)):
        return list(handlers)
    return [handlers]


def unique_by_identity(items: Iterable[Any]) -> list[Any]:
    """Drop repeated objects, keeping the first occurrence."""
    seen: set[int] = set()
    result = []
    for item in items:
        if id(item) in seen:
            continue
        seen.add(id(item))
        result.append(item)
    return result


def accepts_instance(func: Callable[..., Any], arity: int) -> bool:
    """Decide whether *func* takes the instance ahead of its *arity* value arguments.

    Returns True when the callable requires exactly ``arity + 1`` positional
    arguments, False when it can be called with ``arity`` of them.  Parameters
    with defaults never count toward the instance slot.  Callables
    whose signature cannot be inspected (some builtins) are called without
    the instance.

    Raises:
        InvalidHandlerError: the callable can be called with neither.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    required = 0
    total = 0
    variadic = False
    for parameter in signature.parameters.values():
        if parameter.kind in (parameter.POSITIONAL_ONLY, parameter.POSITIONAL_OR_KEYWORD):
            total += 1
            if parameter.default is parameter.empty:
                required += 1
        elif parameter.kind is parameter.VAR_POSITIONAL:
            variadic = True
        elif parameter.kind is parameter.KEYWORD_ONLY and parameter.default is parameter.empty:
            raise InvalidHandlerError(
                f"invalid handler: {func!r}. Keyword-only parameter {parameter.name!r} has no default.", func
            )

    if required == arity + 1:
        return True
    if required <= arity and (total >= arity or variadic):
        return False
    raise InvalidHandlerError(
        f"invalid handler: {func!r}. Must accept {arity} or {arity + 1} positional arguments.", func
    )


def is_type_pattern(pattern: Any) -> bool:
    """True for a class or a union of classes (``X | Y``, ``Union[X, Y]``, ``Optional[X]``)."""
    return (
        isinstance(pattern, (type, types.UnionType))
        or typing.get_origin(pattern) is typing.Union
    )


def matches(pattern: Any, value: Any) -> bool:
    """Test *value* against a non-callable validation pattern.

    - a type, tuple of types, ``X | Y`` or ``typing.Union`` / ``Optional``: ``isinstance``
    - a compiled regular expression: ``search`` on ``str`` values
    - a ``range``, ``set`` or ``frozenset``: membership
    - anything else: equality
    """
    if is_type_pattern(pattern):
        return isinstance(value, pattern)
    if isinstance(pattern, tuple) and pattern and all(isinstance(item, type) for item in pattern):
        return isinstance(value, pattern)
    if isinstance(pattern, re.Pattern):
        return isinstance(value, str) and pattern.search(value) is not None
    if isinstance(pattern, (range, set, frozenset)):
        return value in pattern
    return bool(pattern == value)


@dataclass(frozen=True)
class Handler:
    """A registered handler together with its invocation shape."""

    kind: HandlerKind
    target: Any
    with_instance: bool = False

    @classmethod
    def call(cls, func: Callable[..., Any], arity: int) -> Handler:
        return cls(HandlerKind.CALL, func, accepts_instance(func, arity))

    @classmethod
    def method(cls, reference: MethodReference | str, owner: type) -> Handler:
        name = reference.name if isinstance(reference, MethodReference) else reference
        if not isinstance(name, str) or not name.isidentifier() or not hasattr(owner, name):
            raise InvalidHandlerError(f"{name!r} is not a method of {owner.__name__}", reference)
        return cls(HandlerKind.METHOD, reference)

    @classmethod
    def match(cls, pattern: Any) -> Handler:
        return cls(HandlerKind.MATCH, pattern)

    @property
    def method_name(self) -> str:
        return self.target.name if isinstance(self.target, MethodReference) else self.target

    def __call__(self, instance: Any, *args: Any) -> Any:
        if self.kind is HandlerKind.METHOD:
            return getattr(instance, self.method_name)(*args)
        if self.kind is HandlerKind.MATCH:
            return matches(self.target, args[0])
        if self.with_instance:
            return self.target(instance, *args)
        return self.target(*args)

    def __repr__(self) -> str:
        return f"<{self.kind.value} handler {self.target!r}>"


__all__ = [
    "Handler",
    "HandlerKind",
    "MethodReference",
    "accepts_instance",
    "as_handler_list",
    "is_type_pattern",
    "matches",
    "unique_by_identity",
]
