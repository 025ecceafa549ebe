"""
The ``Attribute`` descriptor and its assignment pipeline.

An ``Attribute`` aggregates one Signature, Coercer, Validator and Callback
with the field's identity (name, owner, description, default) and runs the
per-assignment pipeline.

Manifesto:
    Construction and later mutation must share one code path.  Every value,
    explicit or defaulted, flows through the same stages in the same order,
    and a failure before commit leaves the instance untouched.

Architecture:
    ::

        apply(instance, value=UNDEFINED)
        ┌──────────────────────────────────────────────────────────┐
        │ 1. old_value = stored value (None if unset)               │
        │ 2. UNDEFINED → generate_default(instance)                 │
        │ 3. Coercer.apply        (fail-fast)                       │
        │ 4. Validator.apply      (aggregate)  ── raise: no commit  │
        │ 5. commit (UNDEFINED stored as None)                      │
        │ 6. Callback.apply(old_value, stored)                      │
        └──────────────────────────────────────────────────────────┘

Examples:
    >>> class User:
    ...     pass
    >>> name = Attribute(User, name="name", kind="positional", coercers=[str.upper], nilable=False)
    >>> user = User()
    >>> name.apply(user, "ada")
    >>> name.read(user)
    'ADA'

Tags:
    attributer, attribute, descriptor, pipeline

Doc-Types:
    - API Reference
"""

from __future__ import annotations

import copy
from typing import Any

from attributer.attribute.callback import Callback
from attributer.attribute.coercer import Coercer
from attributer.attribute.handlers import accepts_instance
from attributer.attribute.signature import Signature
from attributer.attribute.validator import Validator
from attributer.core.errors import ConfigurationError
from attributer.core.undefined import UNDEFINED

_SIGNATURE_KEYS = ("kind", "position", "nilable", "required", "read", "write")
_KNOWN_KEYS = frozenset(_SIGNATURE_KEYS + ("name", "type", "coercers", "validators", "callbacks", "default", "description"))


class Attribute:
    """Descriptor governing one named field of an owner type.

    Args:
        owner: The declaring class
        name: Field name (required)
        kind: ``positional`` or ``named`` (required; ``type`` is accepted as an alias)
        position, nilable, required, read, write: Signature options
        coercers, validators, callbacks: Handler lists
        default: A value, a generator callable, or ``UNDEFINED`` for none
        description: Optional text

    Raises:
        ConfigurationError: owner is not a class, ``name``/``kind`` missing,
            an unknown option was given, or any policy rejected its options
    """

    def __init__(self, owner: type, **options: Any):
        try:
            self._validate_initialize_options(owner, options)
            self._apply_initialize_options(owner, options)
        except ConfigurationError as e:
            raise e.with_context(**self._error_context(owner, options))
        except Exception as e:
            raise ConfigurationError(str(e), cause=e).with_context(**self._error_context(owner, options)) from e

    # ── Identity ─────────────────────────────────────────────────

    @property
    def name(self) -> str:
        return self._name

    @property
    def owner(self) -> type:
        return self._owner

    @property
    def description(self) -> str | None:
        return self._description

    @property
    def default(self) -> Any:
        return self._default

    @property
    def has_default(self) -> bool:
        return self._default is not UNDEFINED

    # ── Policies ─────────────────────────────────────────────────

    @property
    def signature(self) -> Signature:
        return self._signature

    @property
    def coercer(self) -> Coercer:
        return self._coercer

    @property
    def validator(self) -> Validator:
        return self._validator

    @property
    def callback(self) -> Callback:
        return self._callback

    # ── Pipeline ─────────────────────────────────────────────────

    def apply(self, instance: Any, value: Any = UNDEFINED) -> None:
        """Coerce, validate, store and announce a new value for this field on *instance*."""
        old_value = self.read(instance)

        coerced_value = self.generate_default(instance) if value is UNDEFINED else value
        coerced_value = self._coercer.apply(instance, coerced_value)
        self._validator.apply(instance, coerced_value)

        stored_value = None if coerced_value is UNDEFINED else coerced_value
        vars(instance)[self._name] = stored_value
        self._callback.apply(instance, old_value, stored_value)

    def read(self, instance: Any) -> Any:
        """Return the stored value on *instance*, or None if never assigned."""
        return vars(instance).get(self._name)

    def generate_default(self, instance: Any) -> Any:
        """Produce the default: generator callables run anew on every call."""
        if not callable(self._default):
            return self._default
        if self._default_takes_instance:
            return self._default(instance)
        return self._default()

    # ── Ownership ────────────────────────────────────────────────

    def duplicate_with_owner(self, new_owner: type) -> Attribute:
        """Return a deep structural copy owned by *new_owner*."""
        if not isinstance(new_owner, type):
            raise ConfigurationError(f"invalid owner: {new_owner!r}")

        duplicate = copy.copy(self)
        duplicate._owner = new_owner
        duplicate._signature = self._signature.duplicate_with_attribute(duplicate)
        duplicate._coercer = self._coercer.duplicate_with_attribute(duplicate)
        duplicate._validator = self._validator.duplicate_with_attribute(duplicate)
        duplicate._callback = self._callback.duplicate_with_attribute(duplicate)
        return duplicate

    def merge(self, other: Attribute) -> Attribute:
        """Combine with a re-declaration of the same field.

        The result is owned by ``other.owner``. Identity and signature options
        come from *other* (description and default fall back to this
        attribute's when *other* leaves them unset); handler lists are
        concatenated, this attribute's first.
        """
        if not isinstance(other, Attribute):
            raise TypeError("other must be an instance of Attribute")

        mine = self.to_options()
        theirs = other.to_options()
        options = {**mine, **theirs}
        for key in ("coercers", "validators", "callbacks"):
            options[key] = mine[key] + theirs[key]
        if theirs["description"] is None:
            options["description"] = mine["description"]
        if theirs["default"] is UNDEFINED:
            options["default"] = mine["default"]

        return type(self)(other.owner, **options)

    def to_options(self) -> dict[str, Any]:
        """Constructor options that rebuild this attribute."""
        return {
            "callbacks": self._callback.handlers,
            "coercers": self._coercer.handlers,
            "default": self._default,
            "description": self._description,
            "name": self._name,
            "validators": self._validator.handlers,
            **self._signature.to_options(),
        }

    def __repr__(self) -> str:
        return f"Attribute({self._owner.__name__}.{self._name}, kind={self._signature.kind.value})"

    # ── Construction ─────────────────────────────────────────────

    def _apply_initialize_options(self, owner: type, options: dict[str, Any]) -> None:
        self._owner = owner
        self._name = options["name"]
        self._description = options.get("description")
        self._default = options.get("default", UNDEFINED)
        self._default_takes_instance = callable(self._default) and accepts_instance(self._default, 0)

        signature_options = {key: options[key] for key in _SIGNATURE_KEYS if key in options}
        signature_options.setdefault("kind", options.get("type"))
        self._signature = Signature(self, **signature_options)
        self._coercer = Coercer(self, options.get("coercers", ()))
        self._validator = Validator(self, options.get("validators", ()))
        self._callback = Callback(self, options.get("callbacks", ()))

    @staticmethod
    def _error_context(owner: Any, options: dict[str, Any]) -> dict[str, Any]:
        name = options.get("name")
        return {
            "owner": owner.__name__ if isinstance(owner, type) else repr(owner),
            "attribute": name if isinstance(name, str) else None,
        }

    def _validate_initialize_options(self, owner: Any, options: dict[str, Any]) -> None:
        if not isinstance(owner, type):
            raise ConfigurationError(f"invalid owner: {owner!r}")
        if "name" not in options:
            raise ConfigurationError("missing keyword: name")
        if "kind" not in options and "type" not in options:
            raise ConfigurationError("missing keyword: kind")

        unknown = set(options) - _KNOWN_KEYS
        if unknown:
            raise ConfigurationError(f"unknown options: {', '.join(sorted(unknown))}")

        name = options["name"]
        if not isinstance(name, str) or not name.isidentifier():
            raise ConfigurationError(f"invalid name: {name!r}. Must be an identifier.")
        if options.get("description") is not None and not isinstance(options["description"], str):
            raise ConfigurationError(f"invalid description: {options['description']!r}. Must be a str or None.")
