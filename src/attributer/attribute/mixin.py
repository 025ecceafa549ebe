"""Shared plumbing for the objects an ``Attribute`` owns."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from attributer.attribute.attribute import Attribute


def _validate_attribute(attribute: Any) -> None:
    from attributer.attribute.attribute import Attribute

    if not isinstance(attribute, Attribute):
        raise TypeError(f"invalid attribute: {attribute!r}. Must be an Attribute instance")


class BelongsToAttribute:
    """Base for Signature, Coercer, Validator and Callback.

    Each of them is bound to exactly one ``Attribute``; duplicating the
    attribute duplicates and rebinds them through ``duplicate_with_attribute``.
    """

    def __init__(self, attribute: Attribute):
        _validate_attribute(attribute)
        self._attribute = attribute

    @property
    def attribute(self) -> Attribute:
        return self._attribute

    def duplicate_with_attribute(self, new_attribute: Attribute) -> Any:
        """Return a copy bound to *new_attribute*."""
        _validate_attribute(new_attribute)
        duplicate = copy.copy(self)
        duplicate._attribute = new_attribute
        duplicate._copy_state_from(self)
        return duplicate

    def _copy_state_from(self, source: Any) -> None:
        """Hook for subclasses holding mutable state."""

    @property
    def _attribute_method_name(self) -> str:
        return f"`{self._attribute.owner.__name__}.{self._attribute.name}`"
