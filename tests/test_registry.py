"""Tests for the per-type attribute registry."""

import pytest

from attributer import Attribute, Attributer, option
from attributer.registry import clear_registry, get_attributes, is_registered, register_owner


def test_register_creates_empty_set(owner):
    attributes = register_owner(owner)
    assert is_registered(owner)
    assert attributes.owner is owner
    assert len(attributes) == 0


def test_register_is_idempotent(owner):
    assert register_owner(owner) is register_owner(owner)


def test_subclass_inherits_copies(owner):
    register_owner(owner).add(Attribute(owner, name="title", kind="named"))

    class Child(owner):
        pass

    class GrandChild(Child):
        pass

    inherited = register_owner(GrandChild)
    assert inherited.names() == ["title"]
    assert inherited["title"].owner is GrandChild
    assert not is_registered(Child)


def test_later_parent_changes_do_not_leak(owner):
    parent = register_owner(owner)

    class Child(owner):
        pass

    register_owner(Child)
    parent.add(Attribute(owner, name="late", kind="named"))
    assert "late" not in get_attributes(Child)


def test_get_attributes_unregistered():
    class Unknown:
        pass

    with pytest.raises(KeyError, match="Unknown"):
        get_attributes(Unknown)


def test_clear_registry(owner):
    register_owner(owner)
    clear_registry()
    assert not is_registered(owner)


_declared_earlier: list[type] = []


def test_declared_class_is_registered():
    class Temporary(Attributer):
        title = option(str)

    _declared_earlier.append(Temporary)
    assert is_registered(Temporary)


def test_registry_restored_between_tests():
    """Classes declared inside one test do not outlive it."""
    assert _declared_earlier
    assert not is_registered(_declared_earlier[0])
