"""Accessor descriptors installed on owner types.

For every declared attribute an ``AttributeAccessor`` is installed under
the attribute's name.  Reads return the stored value and writes go
through :func:`assign`, honoring the signature's read/write visibility.
When either visibility is not public, a full-access accessor is also
installed under ``_<name>`` for use inside the class.

Members the user defined themselves are never overwritten.
"""

from __future__ import annotations

import inspect
from typing import Any

from attributer.attribute.attribute import Attribute
from attributer.registry import get_attributes


def assign(instance: Any, attribute_name: str, value: Any) -> None:
    """Run *value* through the pipeline of *attribute_name* on *instance*.

    Generated setters and the initializer both call this, so construction
    and later mutation share one code path.
    """
    get_attributes(type(instance))[attribute_name].apply(instance, value)


class AttributeAccessor:
    """Data descriptor exposing one attribute on its owner's instances."""

    def __init__(self, attribute_name: str, *, internal: bool = False):
        self.attribute_name = attribute_name
        self.internal = internal

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        attribute = self._attribute(instance)
        if not self.internal and not attribute.signature.is_public_read:
            raise AttributeError(self._denied(instance, attribute, "read", attribute.signature.read_visibility.value))
        return attribute.read(instance)

    def __set__(self, instance: Any, value: Any) -> None:
        attribute = self._attribute(instance)
        if not self.internal and not attribute.signature.is_public_write:
            raise AttributeError(
                self._denied(instance, attribute, "written", attribute.signature.write_visibility.value)
            )
        attribute.apply(instance, value)

    def __delete__(self, instance: Any) -> None:
        raise AttributeError(f"`{type(instance).__name__}.{self.attribute_name}` cannot be deleted")

    def _attribute(self, instance: Any) -> Attribute:
        # Subclasses created before a late parent declaration never received it
        attribute = get_attributes(type(instance)).get(self.attribute_name)
        if attribute is None:
            raise AttributeError(f"'{type(instance).__name__}' object has no attribute '{self.attribute_name}'")
        return attribute

    @staticmethod
    def _denied(instance: Any, attribute: Attribute, action: str, visibility: str) -> str:
        return (
            f"`{type(instance).__name__}.{attribute.name}` is {visibility} and cannot be {action} "
            f"from outside; use `_{attribute.name}` inside the class"
        )

    def __repr__(self) -> str:
        kind = "internal" if self.internal else "public"
        return f"<AttributeAccessor {self.attribute_name} ({kind})>"


class MethodInjector:
    """Install accessors for an attribute on its owner."""

    @classmethod
    def inject(cls, owner: type, attribute: Attribute) -> None:
        cls(owner, attribute).inject_accessors()

    def __init__(self, owner: type, attribute: Attribute):
        self._owner = owner
        self._attribute = attribute

    def inject_accessors(self) -> None:
        name = self._attribute.name
        self._define_safe(name, AttributeAccessor(name))
        if not self._attribute.signature.is_public:
            self._define_safe(f"_{name}", AttributeAccessor(name, internal=True))

    def _define_safe(self, member_name: str, accessor: AttributeAccessor) -> None:
        from attributer.dsl.attribute_builder import AttributeBuilder

        existing = inspect.getattr_static(self._owner, member_name, None)
        if existing is not None and not isinstance(existing, (AttributeBuilder, AttributeAccessor)):
            return
        setattr(self._owner, member_name, accessor)
