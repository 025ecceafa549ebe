"""Tests for the coercion stage."""

import pytest

from attributer.attribute.coercer import Coercer
from attributer.attribute.handlers import MethodReference
from attributer.core.errors import CoercionExecutionError, InvalidHandlerError
from attributer.core.undefined import UNDEFINED


class TestCoercerApply:
    def test_no_handlers_is_identity(self, make_attribute, instance):
        coercer = make_attribute().coercer
        assert coercer.apply(instance, "value") == "value"

    def test_handlers_fold_left_to_right(self, make_attribute, instance):
        attribute = make_attribute(coercers=[str.strip, str.upper, lambda v: v + "!"])
        assert attribute.coercer.apply(instance, "  ok ") == "OK!"

    def test_single_handler_is_accepted(self, make_attribute, instance):
        attribute = make_attribute(coercers=int)
        assert attribute.coercer.apply(instance, "42") == 42

    def test_method_reference(self, make_attribute, instance):
        attribute = make_attribute(coercers=[MethodReference("normalize")])
        assert attribute.coercer.apply(instance, "  padded  ") == "padded"

    def test_bare_method_name(self, make_attribute, instance):
        attribute = make_attribute(coercers="normalize")
        assert attribute.coercer.apply(instance, " x ") == "x"

    def test_handler_receiving_instance(self, make_attribute, instance):
        seen = []

        def remember(owner_instance, value):
            seen.append(owner_instance)
            return value * 2

        attribute = make_attribute(coercers=[remember])
        assert attribute.coercer.apply(instance, 3) == 6
        assert seen == [instance]

    def test_undefined_passes_through(self, make_attribute, instance):
        calls = []
        attribute = make_attribute(coercers=[lambda v: calls.append(v) or v])
        assert attribute.coercer.apply(instance, UNDEFINED) is UNDEFINED
        assert calls == []

    def test_none_skipped_when_not_nilable(self, make_attribute, instance):
        calls = []
        attribute = make_attribute(nilable=False, coercers=[lambda v: calls.append(v) or v])
        assert attribute.coercer.apply(instance, None) is None
        assert calls == []

    def test_none_coerced_when_nilable(self, make_attribute, instance):
        attribute = make_attribute(coercers=[lambda v: "fallback" if v is None else v])
        assert attribute.coercer.apply(instance, None) == "fallback"


class TestCoercerFailure:
    def test_first_failure_aborts_chain(self, make_attribute, instance):
        calls = []

        def fail(value):
            raise ValueError("boom")

        attribute = make_attribute(coercers=[fail, lambda v: calls.append(v) or v])
        with pytest.raises(CoercionExecutionError) as exc_info:
            attribute.coercer.apply(instance, "x")

        error = exc_info.value
        assert calls == []
        assert error.handler is fail
        assert isinstance(error.cause, ValueError)
        assert isinstance(error.__cause__, ValueError)
        assert "`Owner.field`" in str(error)
        assert "ValueError: boom" in str(error)
        assert error.context.attribute == "field"

    def test_int_conversion_error_is_wrapped(self, make_attribute, instance):
        attribute = make_attribute(coercers=[int])
        with pytest.raises(CoercionExecutionError):
            attribute.coercer.apply(instance, "not a number")


class TestCoercerConfiguration:
    def test_rejects_non_callable(self, make_attribute):
        with pytest.raises(InvalidHandlerError, match="invalid coercer"):
            make_attribute(coercers=[42])

    def test_rejects_unknown_method(self, make_attribute):
        with pytest.raises(InvalidHandlerError, match="invalid coercer"):
            make_attribute(coercers=[MethodReference("missing")])

    def test_rejects_wrong_arity(self, make_attribute):
        with pytest.raises(InvalidHandlerError):
            make_attribute(coercers=[lambda a, b, c: a])

    def test_duplicate_handlers_collapse(self, make_attribute):
        attribute = make_attribute(coercers=[str.strip, str.strip])
        assert attribute.coercer.handlers == [str.strip]

    def test_duplicate_is_bound_to_new_attribute(self, make_attribute):
        attribute = make_attribute(coercers=[str.strip])
        other = make_attribute(name="other")
        duplicate = attribute.coercer.duplicate_with_attribute(other)
        assert duplicate.attribute is other
        assert duplicate.handlers == [str.strip]
        assert attribute.coercer.attribute is attribute

    def test_duplicate_requires_attribute(self, make_attribute):
        with pytest.raises(TypeError, match="invalid attribute"):
            make_attribute().coercer.duplicate_with_attribute(object())


def test_owner_required(owner):
    with pytest.raises(TypeError, match="invalid attribute"):
        Coercer(owner, [])
