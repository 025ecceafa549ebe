"""Normalize declaration keywords into ``Attribute`` options.

Declarations accept several spellings for the same option
(``coerce``/``coercers``/``coerce_with``, ``non_nil``/``not_null``/...).
``OptionParser`` folds them into the canonical keys the ``Attribute``
constructor understands.
"""

from __future__ import annotations

from typing import Any

from attributer.attribute.handlers import as_handler_list
from attributer.core.errors import ConfigurationError
from attributer.core.undefined import UNDEFINED

ACCESSOR_READER_KEYS = ("read", "read_access", "reader")
ACCESSOR_WRITER_KEYS = ("write", "write_access", "writer")
CALLBACK_KEYS = ("callback", "on_change", "callbacks")
COERCER_KEYS = ("coerce", "coercers", "coerce_with")
DEFAULT_KEYS = ("default_value", "default_generator", "default")
DESCRIPTION_KEYS = ("desc", "description")
NILABLE_KEYS = ("nilable", "nullable", "null", "nil")
NON_NILABLE_KEYS = (
    "non_nil",
    "non_nilable",
    "not_nil",
    "not_nilable",
    "non_null",
    "non_nullable",
    "not_null",
    "not_nullable",
)
REQUIRED_KEYS = ("required", "optional")
VALIDATOR_KEYS = ("validate", "validate_with", "validators")

_ALL_KEYS = frozenset(
    ACCESSOR_READER_KEYS
    + ACCESSOR_WRITER_KEYS
    + CALLBACK_KEYS
    + COERCER_KEYS
    + DEFAULT_KEYS
    + DESCRIPTION_KEYS
    + NILABLE_KEYS
    + NON_NILABLE_KEYS
    + REQUIRED_KEYS
    + VALIDATOR_KEYS
    + ("position",)
)


class OptionParser:
    """Fold declaration keywords into canonical ``Attribute`` options.

    For single-valued options (reader, writer, default, description) the
    last spelling in the key tuple that is present wins; handler options
    from every spelling are concatenated.
    """

    @classmethod
    def parse(cls, attribute_kind: Any, options: dict[str, Any]) -> dict[str, Any]:
        return cls(attribute_kind, options).parse_options()

    def __init__(self, attribute_kind: Any, options: dict[str, Any]):
        unknown = set(options) - _ALL_KEYS
        if unknown:
            raise ConfigurationError(f"unknown declaration options: {', '.join(sorted(unknown))}")

        self._options = dict(options)
        self._result: dict[str, Any] = {"callbacks": [], "coercers": [], "validators": [], "kind": attribute_kind}
        if "position" in self._options:
            self._result["position"] = self._options["position"]

    def parse_options(self) -> dict[str, Any]:
        self._parse_accessor_options()
        self._parse_handler_options()
        self._parse_default_options()
        self._parse_description_options()
        self._parse_nilable_options()
        self._parse_required_options()
        return self._result

    def _find_last_option(self, keys: tuple[str, ...]) -> Any:
        for key in reversed(keys):
            if key in self._options and self._options[key] is not UNDEFINED:
                return self._options[key]
        return UNDEFINED

    def _parse_accessor_options(self) -> None:
        self._result["read"] = self._find_last_option(ACCESSOR_READER_KEYS)
        self._result["write"] = self._find_last_option(ACCESSOR_WRITER_KEYS)

    def _parse_handler_options(self) -> None:
        for result_key, keys in (
            ("callbacks", CALLBACK_KEYS),
            ("coercers", COERCER_KEYS),
            ("validators", VALIDATOR_KEYS),
        ):
            for key in keys:
                self._result[result_key].extend(as_handler_list(self._options.get(key)))

    def _parse_default_options(self) -> None:
        self._result["default"] = self._find_last_option(DEFAULT_KEYS)

    def _parse_description_options(self) -> None:
        self._result["description"] = self._find_last_option(DESCRIPTION_KEYS)

    def _parse_nilable_options(self) -> None:
        if not any(key in self._options for key in NILABLE_KEYS + NON_NILABLE_KEYS):
            return
        non_nilable = any(self._options.get(key) is True for key in NON_NILABLE_KEYS) or any(
            self._options.get(key) is False for key in NILABLE_KEYS
        )
        self._result["nilable"] = not non_nilable

    def _parse_required_options(self) -> None:
        if not any(key in self._options for key in REQUIRED_KEYS):
            return
        self._result["required"] = self._options.get("optional") is False or self._options.get("required") is True
