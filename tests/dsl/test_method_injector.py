"""Tests for accessor installation and visibility enforcement."""

import pytest

from attributer import Attributer, argument, option
from attributer.core.errors import ValidationError
from attributer.dsl.method_injector import AttributeAccessor, assign


class Account(Attributer):
    owner_name = argument(str)
    balance = option(int, default=0).private_write()
    pin = option(str).private()
    note = option().protected_read()

    def deposit(self, amount):
        self._balance = self._balance + amount

    def check_pin(self, candidate):
        return self._pin == candidate


class TestInstallation:
    def test_public_accessor_replaces_builder(self):
        assert isinstance(Account.__dict__["owner_name"], AttributeAccessor)
        assert "_owner_name" not in Account.__dict__

    def test_internal_accessor_for_restricted_attributes(self):
        for name in ("balance", "pin", "note"):
            accessor = Account.__dict__[f"_{name}"]
            assert isinstance(accessor, AttributeAccessor)
            assert accessor.internal is True

    def test_accessor_on_class_returns_descriptor(self):
        assert isinstance(Account.balance, AttributeAccessor)
        assert repr(Account._pin) == "<AttributeAccessor pin (internal)>"

    def test_user_members_are_not_overwritten(self):
        class Custom(Attributer):
            label = option(str)

            @property
            def _label(self):
                return "custom"

            label_private = option(str).private()

            def _label_private(self):
                return "mine"

        instance = Custom(label="x", label_private="y")
        assert instance.label == "x"
        assert instance._label == "custom"
        assert instance._label_private() == "mine"


class TestVisibility:
    def test_public_read_and_write(self):
        account = Account("ada")
        account.owner_name = "grace"
        assert account.owner_name == "grace"

    def test_private_write_denied(self):
        account = Account("ada")
        assert account.balance == 0
        with pytest.raises(AttributeError, match="`Account.balance` is private and cannot be written"):
            account.balance = 100
        assert account.balance == 0

    def test_internal_accessor_writes_through_pipeline(self):
        account = Account("ada")
        account.deposit(5)
        assert account.balance == 5
        with pytest.raises(ValidationError):
            account._balance = "lots"

    def test_private_read_denied(self):
        account = Account("ada", pin="1234")
        with pytest.raises(AttributeError, match="use `_pin` inside the class"):
            account.pin
        assert account.check_pin("1234")

    def test_protected_read_denied(self):
        account = Account("ada", note="vip")
        with pytest.raises(AttributeError, match="is protected and cannot be read"):
            account.note
        account.note = "regular"
        assert account._note == "regular"

    def test_delete_refused(self):
        account = Account("ada")
        with pytest.raises(AttributeError, match="cannot be deleted"):
            del account.owner_name


def test_assign_runs_pipeline():
    account = Account("ada")
    assign(account, "owner_name", "grace")
    assert account.owner_name == "grace"
    with pytest.raises(ValidationError):
        assign(account, "owner_name", 42)


def test_assign_unknown_attribute():
    with pytest.raises(KeyError):
        assign(Account("ada"), "missing", 1)


def test_parent_attribute_declared_after_subclass():
    class Parent(Attributer):
        title = option(str)

    class Child(Parent):
        pass

    Parent.option("late", default=1)

    assert Parent().late == 1
    child = Child()
    assert not hasattr(child, "late")
    with pytest.raises(AttributeError, match="'Child' object has no attribute 'late'"):
        child.late
    with pytest.raises(AttributeError):
        child.late = 2
