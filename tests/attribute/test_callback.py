"""Tests for change callbacks."""

import pytest

from attributer.core.errors import CallbackExecutionError, ErrorCategory, InvalidHandlerError


def test_receives_old_and_new(make_attribute, instance):
    changes = []
    attribute = make_attribute(callbacks=[lambda old, new: changes.append((old, new))])
    attribute.callback.apply(instance, None, "a")
    assert changes == [(None, "a")]


def test_receives_instance_when_declared(make_attribute, instance):
    seen = []
    attribute = make_attribute(callbacks=[lambda obj, old, new: seen.append(obj)])
    attribute.callback.apply(instance, None, 1)
    assert seen == [instance]


def test_all_run_and_errors_aggregate(make_attribute, instance):
    calls = []

    def first(old, new):
        calls.append("first")
        raise ValueError("first failed")

    def second(old, new):
        calls.append("second")

    def third(old, new):
        calls.append("third")
        raise RuntimeError("third failed")

    attribute = make_attribute(callbacks=[first, second, third])
    with pytest.raises(CallbackExecutionError) as exc_info:
        attribute.callback.apply(instance, 1, 2)

    error = exc_info.value
    assert calls == ["first", "second", "third"]
    assert [str(e) for e in error.errors] == ["first failed", "third failed"]
    assert error.category is ErrorCategory.CALLBACK
    assert error.to_dict()["errors"] == ["ValueError: first failed", "RuntimeError: third failed"]


def test_non_callable_rejected(make_attribute):
    with pytest.raises(InvalidHandlerError, match="Must be a callable"):
        make_attribute(callbacks=["on_change"])


def test_single_argument_callable_rejected(make_attribute):
    with pytest.raises(InvalidHandlerError):
        make_attribute(callbacks=[lambda new: None])


def test_defaulted_parameter_does_not_make_room_for_instance(make_attribute, instance):
    received = []

    def changed(first, second, third=None):
        received.append((first, second, third))

    attribute = make_attribute(callbacks=[changed])
    attribute.callback.apply(instance, "old", "new")
    assert received == [("old", "new", None)]


def test_three_required_parameters_receive_instance(make_attribute, instance):
    received = []

    def changed(obj, old, new):
        received.append(obj)

    attribute = make_attribute(callbacks=[changed])
    attribute.callback.apply(instance, "old", "new")
    assert received == [instance]
