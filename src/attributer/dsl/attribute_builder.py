"""Fluent declaration of attributes in a class body.

Manifesto:
    Declaring a field should read like a sentence.  ``argument()`` and
    ``option()`` return an ``AttributeBuilder`` that is placed in the class
    body and refined with chained calls; the ``Attributer`` base class turns
    it into an ``Attribute`` when the class is created.

Examples:
    >>> class User(Attributer):
    ...     name = argument(str).coerce_with(str.strip).non_nilable()
    ...     role = option(str, default="member").validate_with({"member", "admin"})
    ...     email = option(str).private_write().on_change(lambda old, new: audit(old, new))

Tags:
    attributer, dsl, builder, declaration

Doc-Types:
    api-reference
"""

from __future__ import annotations

from typing import Any

from attributer.attribute.attribute import Attribute
from attributer.attribute.signature import AttributeKind, Visibility
from attributer.core.undefined import UNDEFINED
from attributer.dsl.option_parser import OptionParser


class AttributeBuilder:
    """Collects declaration options for one attribute.

    Every fluent method returns the builder. ``build`` drops options left
    unset and constructs the ``Attribute``.
    """

    def __init__(self, kind: AttributeKind | str, type_validator: Any = UNDEFINED, **options: Any):
        self._options = OptionParser.parse(kind, options)
        if type_validator is not UNDEFINED:
            self._options["validators"].append(type_validator)

    @property
    def kind(self) -> AttributeKind:
        kind = self._options["kind"]
        if isinstance(kind, AttributeKind):
            return kind
        return AttributeKind.NAMED if kind in ("named", "option") else AttributeKind.POSITIONAL

    def build(self, owner: type, name: str, position: int | None = None) -> Attribute:
        options = {
            key: value
            for key, value in self._options.items()
            if value is not UNDEFINED and not (isinstance(value, list) and not value)
        }
        options["name"] = name
        if position is not None and "position" not in options and self.kind is AttributeKind.POSITIONAL:
            options["position"] = position
        return Attribute(owner, **options)

    # ── Pipeline ─────────────────────────────────────────────────

    def coerce_with(self, handler: Any) -> AttributeBuilder:
        self._options["coercers"].append(handler)
        return self

    coerce = coerce_with

    def validate_with(self, handler: Any) -> AttributeBuilder:
        self._options["validators"].append(handler)
        return self

    validate = validate_with
    validates = validate_with

    def on_change(self, handler: Any) -> AttributeBuilder:
        self._options["callbacks"].append(handler)
        return self

    def default(self, value_or_generator: Any) -> AttributeBuilder:
        self._options["default"] = value_or_generator
        return self

    default_generator = default
    default_value = default

    def description(self, text: str) -> AttributeBuilder:
        self._options["description"] = text
        return self

    desc = description

    # ── Signature ────────────────────────────────────────────────

    def non_nilable(self) -> AttributeBuilder:
        self._options["nilable"] = False
        return self

    non_nil = non_nilable
    non_null = non_nilable
    non_nullable = non_nilable
    not_nil = non_nilable
    not_nilable = non_nilable
    not_null = non_nilable
    not_nullable = non_nilable

    def required(self) -> AttributeBuilder:
        self._options["required"] = True
        return self

    def private(self) -> AttributeBuilder:
        return self.private_read().private_write()

    def private_read(self) -> AttributeBuilder:
        self._options["read"] = Visibility.PRIVATE
        return self

    def private_write(self) -> AttributeBuilder:
        self._options["write"] = Visibility.PRIVATE
        return self

    def protected(self) -> AttributeBuilder:
        return self.protected_read().protected_write()

    def protected_read(self) -> AttributeBuilder:
        self._options["read"] = Visibility.PROTECTED
        return self

    def protected_write(self) -> AttributeBuilder:
        self._options["write"] = Visibility.PROTECTED
        return self

    def public(self) -> AttributeBuilder:
        return self.public_read().public_write()

    def public_read(self) -> AttributeBuilder:
        self._options["read"] = Visibility.PUBLIC
        return self

    def public_write(self) -> AttributeBuilder:
        self._options["write"] = Visibility.PUBLIC
        return self

    def __repr__(self) -> str:
        return f"<AttributeBuilder {self.kind.value}>"


def argument(type_validator: Any = UNDEFINED, **options: Any) -> AttributeBuilder:
    """Declare a positional attribute in a class body.

    The optional first argument is appended to the validators, so
    ``argument(int)`` means "must be an int".
    """
    return AttributeBuilder(AttributeKind.POSITIONAL, type_validator, **options)


def option(type_validator: Any = UNDEFINED, **options: Any) -> AttributeBuilder:
    """Declare a named (keyword) attribute in a class body."""
    return AttributeBuilder(AttributeKind.NAMED, type_validator, **options)
