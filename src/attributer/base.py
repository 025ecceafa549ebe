"""The ``Attributer`` base class.

Manifesto:
    Subclassing ``Attributer`` is the whole integration: attributes declared
    in the class body are built when the class is created, inherited
    attributes are copied to the subclass at that moment, and ``__init__``
    routes constructor arguments through the same pipeline as later
    assignments.

Examples:
    >>> class Point(Attributer):
    ...     x = argument(int)
    ...     y = argument(int, default=0)
    ...     label = option(str, default="origin")
    >>> Point(3).to_dict()
    {'x': 3, 'y': 0, 'label': 'origin'}

Tags:
    attributer, base-class, declaration

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Any

from attributer.attribute.attribute import Attribute
from attributer.attribute.signature import AttributeKind
from attributer.attribute_set import AttributeSet
from attributer.core.logging import get_logger
from attributer.core.undefined import UNDEFINED
from attributer.dsl.attribute_builder import AttributeBuilder
from attributer.dsl.initializer import Initializer
from attributer.dsl.method_injector import MethodInjector
from attributer.registry import get_attributes, register_owner

logger = get_logger(__name__)


def attributes_of(owner_or_instance: Any) -> AttributeSet:
    """Return the attribute set of a class or of an instance's class."""
    owner = owner_or_instance if isinstance(owner_or_instance, type) else type(owner_or_instance)
    return get_attributes(owner)


class Attributer:
    """Base class for types whose fields are declared with ``argument()``/``option()``."""

    def __init_subclass__(cls, **kwargs: Any):
        super().__init_subclass__(**kwargs)
        register_owner(cls)
        for name, value in list(cls.__dict__.items()):
            if isinstance(value, AttributeBuilder):
                cls._declare_attribute(name, value)

    @classmethod
    def argument(cls, attribute_name: str, type_validator: Any = UNDEFINED, **options: Any) -> Attribute:
        """Declare a positional attribute after the class was created."""
        return cls._declare_attribute(attribute_name, AttributeBuilder(AttributeKind.POSITIONAL, type_validator, **options))

    @classmethod
    def option(cls, attribute_name: str, type_validator: Any = UNDEFINED, **options: Any) -> Attribute:
        """Declare a named attribute after the class was created."""
        return cls._declare_attribute(attribute_name, AttributeBuilder(AttributeKind.NAMED, type_validator, **options))

    @classmethod
    def _declare_attribute(cls, name: str, builder: AttributeBuilder) -> Attribute:
        attributes = register_owner(cls)

        position = None
        if builder.kind is AttributeKind.POSITIONAL:
            existing = attributes.get(name)
            if existing is not None and existing.signature.is_positional:
                position = existing.signature.position
            else:
                position = len(attributes.positional())

        attributes.add(builder.build(cls, name, position=position))
        attribute = attributes[name]
        MethodInjector.inject(cls, attribute)
        logger.debug(
            "attribute_declared",
            owner=cls.__name__,
            attribute=name,
            kind=attribute.signature.kind.value,
        )
        return attribute

    def __init__(self, *args: Any, **kwargs: Any):
        Initializer(self, get_attributes(type(self))).assign(*args, **kwargs)

    def to_dict(self) -> dict[str, Any]:
        """Publicly readable attribute values, in canonical order."""
        return {
            name: attribute.read(self)
            for name, attribute in get_attributes(type(self)).items()
            if attribute.signature.is_public_read
        }

    def __repr__(self) -> str:
        fields = ", ".join(f"{name}={value!r}" for name, value in self.to_dict().items())
        return f"{type(self).__name__}({fields})"
