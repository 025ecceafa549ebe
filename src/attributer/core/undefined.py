"""The ``UNDEFINED`` sentinel.

Manifesto:
    ``None`` is a legitimate attribute value.  The pipeline needs a second,
    distinct marker that means "the caller supplied nothing" so that
    requiredness and defaults can be told apart from an explicit ``None``.

Tags:
    attributer, core, sentinel

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Any


class UndefinedType:
    """Type of the process-wide ``UNDEFINED`` marker.

    There is only ever one instance. Constructing, copying, deep-copying or
    unpickling always yields that same object, and it compares equal only
    to itself.
    """

    __slots__ = ()

    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __copy__(self) -> UndefinedType:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> UndefinedType:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return other is self

    def __hash__(self) -> int:
        return id(self)

    def __repr__(self) -> str:
        return "UNDEFINED"

    __str__ = __repr__


UNDEFINED = UndefinedType()


__all__ = ["UNDEFINED", "UndefinedType"]
