"""Ordered, mergeable collection of the attributes backing one owner type.

Manifesto:
    The order in which fields are consumed at construction must not depend
    on the order they happened to be declared or inherited.  The set keeps
    a canonical order and recomputes it after every insertion:

    1. required positional attributes (no default), by position
    2. positional attributes with a default, by position
    3. named attributes, in declaration order

Tags:
    attributer, attribute-set, ordering, inheritance

Doc-Types:
    api-reference
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Iterator, Mapping

from attributer.attribute.attribute import Attribute
from attributer.core.logging import get_logger

logger = get_logger(__name__)


def _sort_key(attribute: Attribute) -> tuple[int, float]:
    signature = attribute.signature
    if signature.is_named:
        return (2, 0)
    group = 1 if attribute.has_default else 0
    return (group, signature.position if signature.position is not None else math.inf)


class AttributeSet(Mapping[str, Attribute]):
    """Name-keyed attributes of one owner, kept in canonical order.

    Behaves as a read-only mapping of name to ``Attribute``; the only
    mutating operation is :meth:`add`.  ``select``, ``reject``, ``exclude``
    and ``merge`` return new sets.
    """

    def __init__(self, owner: type, attributes: Iterable[Attribute] = ()):
        self._owner = owner
        self._lookup: dict[str, Attribute] = {}
        for attribute in attributes:
            self.add(attribute)

    @property
    def owner(self) -> type:
        return self._owner

    def __getitem__(self, name: str) -> Attribute:
        return self._lookup[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lookup)

    def __len__(self) -> int:
        return len(self._lookup)

    def add(self, attribute: Attribute) -> None:
        """Insert *attribute*, merging with an existing one of the same name."""
        if not isinstance(attribute, Attribute):
            raise TypeError(f"Invalid attribute: {attribute!r}")

        existing = self._lookup.get(attribute.name)
        if existing is not None:
            self._lookup[attribute.name] = existing.merge(attribute).duplicate_with_owner(self._owner)
            logger.debug("attribute_merged", owner=self._owner.__name__, attribute=attribute.name)
        elif attribute.owner is not self._owner:
            self._lookup[attribute.name] = attribute.duplicate_with_owner(self._owner)
        else:
            self._lookup[attribute.name] = attribute

        self._sort()

    def names(self) -> list[str]:
        return list(self._lookup)

    def attributes(self) -> list[Attribute]:
        return list(self._lookup.values())

    def positional(self) -> AttributeSet:
        return self.select(lambda _, attribute: attribute.signature.is_positional)

    def named(self) -> AttributeSet:
        return self.select(lambda _, attribute: attribute.signature.is_named)

    def duplicate_with_owner(self, new_owner: type) -> AttributeSet:
        """Independent copy with every attribute duplicated and rebound to *new_owner*."""
        duplicate = type(self)(new_owner)
        duplicate._lookup = {
            name: attribute.duplicate_with_owner(new_owner) for name, attribute in self._lookup.items()
        }
        return duplicate

    def select(self, predicate: Callable[[str, Attribute], bool]) -> AttributeSet:
        return type(self)(self._owner, [a for name, a in self._lookup.items() if predicate(name, a)])

    def reject(self, predicate: Callable[[str, Attribute], bool]) -> AttributeSet:
        return type(self)(self._owner, [a for name, a in self._lookup.items() if not predicate(name, a)])

    def exclude(self, *names: str) -> AttributeSet:
        return self.reject(lambda name, _: name in names)

    def merge(self, other: AttributeSet) -> AttributeSet:
        """New set owned by *other*'s owner holding this set's attributes, then *other*'s."""
        return type(self)(other.owner, self.attributes() + other.attributes())

    def _sort(self) -> None:
        self._lookup = dict(sorted(self._lookup.items(), key=lambda item: _sort_key(item[1])))

    def __repr__(self) -> str:
        return f"AttributeSet({self._owner.__name__}, {self.names()!r})"
