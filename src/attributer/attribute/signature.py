"""Attribute signature: kind, position, nilability, requiredness and visibility.

Manifesto:
    The signature answers "how is this field supplied and who may touch
    it".  It validates its own options eagerly so a bad declaration fails
    when the class is defined, not when the first instance is built.

Tags:
    attributer, attribute, signature, visibility

Doc-Types:
    api-reference
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

from attributer.attribute.mixin import BelongsToAttribute
from attributer.core.errors import ConfigurationError

if TYPE_CHECKING:
    from attributer.attribute.attribute import Attribute


class AttributeKind(str, Enum):
    """How an attribute is supplied at construction."""

    POSITIONAL = "positional"
    NAMED = "named"


class Visibility(str, Enum):
    """Visibility of a generated reader or writer."""

    PRIVATE = "private"
    PROTECTED = "protected"
    PUBLIC = "public"


# Spellings used by the declaration functions
_KIND_ALIASES = {
    "argument": AttributeKind.POSITIONAL,
    "option": AttributeKind.NAMED,
}

_NON_PUBLIC = (Visibility.PRIVATE, Visibility.PROTECTED)


class Signature(BelongsToAttribute):
    """Immutable description of how an attribute is supplied and exposed.

    Args:
        attribute: The owning attribute
        kind: ``positional`` or ``named`` (``argument``/``option`` accepted)
        position: Declared position of a positional attribute, or None
        nilable: Whether ``None`` is an accepted value
        required: Whether a value must be supplied
        read: Reader visibility
        write: Writer visibility

    Raises:
        ConfigurationError: any option is invalid
    """

    DEFAULT_OPTIONS: dict[str, Any] = {
        "nilable": True,
        "read": Visibility.PUBLIC,
        "required": False,
        "write": Visibility.PUBLIC,
    }

    def __init__(self, attribute: Attribute, **options: Any):
        super().__init__(attribute)
        options = {**self.DEFAULT_OPTIONS, **options}
        if "kind" not in options:
            raise ConfigurationError(f"{self._attribute_method_name}: missing kind")

        self._position = self._validate_position(options.get("position"))
        self._nilable = self._validate_boolean("nilable", options["nilable"])
        self._required = self._validate_boolean("required", options["required"])
        self._read_visibility = self._validate_visibility("read", options["read"])
        self._write_visibility = self._validate_visibility("write", options["write"])
        self._kind = self._validate_kind(options["kind"])

    # ── Accessors ────────────────────────────────────────────────

    @property
    def kind(self) -> AttributeKind:
        return self._kind

    @property
    def position(self) -> int | None:
        return self._position

    @property
    def read_visibility(self) -> Visibility:
        return self._read_visibility

    @property
    def write_visibility(self) -> Visibility:
        return self._write_visibility

    # ── Predicates ───────────────────────────────────────────────

    @property
    def is_positional(self) -> bool:
        return self._kind is AttributeKind.POSITIONAL

    @property
    def is_named(self) -> bool:
        return self._kind is AttributeKind.NAMED

    @property
    def is_nilable(self) -> bool:
        return self._nilable

    @property
    def is_required(self) -> bool:
        return self._required

    @property
    def is_optional(self) -> bool:
        return not self._required

    @property
    def is_private(self) -> bool:
        """True when both reader and writer are private or protected."""
        return self.is_private_read and self.is_private_write

    @property
    def is_private_read(self) -> bool:
        return self._read_visibility in _NON_PUBLIC

    @property
    def is_private_write(self) -> bool:
        return self._write_visibility in _NON_PUBLIC

    @property
    def is_protected(self) -> bool:
        return self.is_protected_read and self.is_protected_write

    @property
    def is_protected_read(self) -> bool:
        return self._read_visibility is Visibility.PROTECTED

    @property
    def is_protected_write(self) -> bool:
        return self._write_visibility is Visibility.PROTECTED

    @property
    def is_public(self) -> bool:
        return self.is_public_read and self.is_public_write

    @property
    def is_public_read(self) -> bool:
        return self._read_visibility is Visibility.PUBLIC

    @property
    def is_public_write(self) -> bool:
        return self._write_visibility is Visibility.PUBLIC

    def to_options(self) -> dict[str, Any]:
        return {
            "kind": self._kind,
            "nilable": self._nilable,
            "position": self._position,
            "read": self._read_visibility,
            "required": self._required,
            "write": self._write_visibility,
        }

    def __repr__(self) -> str:
        return (
            f"Signature({self._kind.value}, position={self._position}, nilable={self._nilable}, "
            f"required={self._required}, read={self._read_visibility.value}, write={self._write_visibility.value})"
        )

    # ── Validation ───────────────────────────────────────────────

    def _validate_boolean(self, name: str, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        raise ConfigurationError(
            f"{self._attribute_method_name}: invalid {name}: {value!r}. Must be `True` or `False`."
        )

    def _validate_kind(self, kind: Any) -> AttributeKind:
        if isinstance(kind, AttributeKind):
            return kind
        if isinstance(kind, str):
            normalized = kind.lower()
            if normalized in _KIND_ALIASES:
                return _KIND_ALIASES[normalized]
            try:
                return AttributeKind(normalized)
            except ValueError:
                pass
        allowed = ", ".join(member.value for member in AttributeKind)
        raise ConfigurationError(f"{self._attribute_method_name}: invalid kind: {kind!r}. Must be one of {allowed}")

    def _validate_position(self, position: Any) -> int | None:
        if position is None:
            return None
        if isinstance(position, int) and not isinstance(position, bool) and position >= 0:
            return position
        raise ConfigurationError(
            f"{self._attribute_method_name}: invalid position: {position!r}. Must be a non-negative int or None."
        )

    def _validate_visibility(self, name: str, value: Any) -> Visibility:
        if isinstance(value, Visibility):
            return value
        if isinstance(value, str):
            try:
                return Visibility(value.lower())
            except ValueError:
                pass
        allowed = ", ".join(member.value for member in Visibility)
        raise ConfigurationError(
            f"{self._attribute_method_name}: invalid {name} visibility: {value!r}. Must be one of {allowed}"
        )
