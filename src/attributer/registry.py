"""Per-type registry of attribute sets.

Manifesto:
    Each owner type gets exactly one ``AttributeSet``, created when the type
    is defined.  Keeping them in an explicit registry keyed by the type
    itself (rather than hidden class attributes) makes the lookup visible
    and lets the initializer receive the set explicitly.

Tags:
    attributer, registry, inheritance

Doc-Types:
    api-reference
"""

from __future__ import annotations

from attributer.attribute_set import AttributeSet
from attributer.core.logging import get_logger

logger = get_logger(__name__)

# Global attribute set registry
_registry: dict[type, AttributeSet] = {}


def register_owner(owner: type) -> AttributeSet:
    """Create (or return) the attribute set of *owner*.

    A new set is seeded from the nearest registered base class, with every
    inherited attribute duplicated and rebound to *owner*.
    """
    if owner in _registry:
        return _registry[owner]

    parent = next((base for base in owner.__mro__[1:] if base in _registry), None)
    if parent is None:
        attributes = AttributeSet(owner)
    else:
        attributes = _registry[parent].duplicate_with_owner(owner)

    _registry[owner] = attributes
    logger.debug(
        "owner_registered",
        owner=owner.__name__,
        parent=parent.__name__ if parent is not None else None,
        inherited=len(attributes),
    )
    return attributes


def is_registered(owner: type) -> bool:
    return owner in _registry


def get_attributes(owner: type) -> AttributeSet:
    """Get the attribute set of a registered owner type."""
    if owner not in _registry:
        raise KeyError(f"Type '{owner.__name__}' has no registered attributes")
    return _registry[owner]


def clear_registry() -> None:
    """Clear registry (for testing)."""
    _registry.clear()


__all__ = ["register_owner", "is_registered", "get_attributes", "clear_registry"]
