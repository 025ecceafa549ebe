"""Apply constructor arguments to a fresh instance."""

from __future__ import annotations

from typing import Any

from attributer.attribute.attribute import Attribute
from attributer.attribute_set import AttributeSet
from attributer.core.undefined import UNDEFINED
from attributer.dsl.method_injector import assign


class Initializer:
    """Assign positional and keyword inputs through the attribute pipeline.

    Positional attributes are consumed in canonical order, each receiving
    its argument or ``UNDEFINED`` when fewer were given; then every named
    attribute receives its keyword or ``UNDEFINED``.  Extra positional
    arguments and unknown keywords are ignored.
    """

    def __init__(self, instance: Any, attributes: AttributeSet):
        self._instance = instance
        self._attributes = attributes

    def assign(self, *arguments: Any, **keyword_arguments: Any) -> None:
        positional = self._positional_attributes()
        self._validate_positional_arguments(positional, arguments)
        self._apply_arguments(positional, arguments)
        self._apply_options(keyword_arguments)

    def _positional_attributes(self) -> list[Attribute]:
        return self._attributes.positional().attributes()

    def _named_attributes(self) -> list[Attribute]:
        return self._attributes.named().attributes()

    def _validate_positional_arguments(self, positional: list[Attribute], arguments: tuple[Any, ...]) -> None:
        required = [attribute for attribute in positional if not attribute.has_default]
        if len(arguments) < len(required):
            raise TypeError(f"wrong number of arguments (given {len(arguments)}, expected {len(required)}+)")

    def _apply_arguments(self, positional: list[Attribute], arguments: tuple[Any, ...]) -> None:
        for index, attribute in enumerate(positional):
            value = arguments[index] if index < len(arguments) else UNDEFINED
            assign(self._instance, attribute.name, value)

    def _apply_options(self, options: dict[str, Any]) -> None:
        for attribute in self._named_attributes():
            assign(self._instance, attribute.name, options.get(attribute.name, UNDEFINED))
