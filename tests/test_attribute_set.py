"""Tests for AttributeSet ordering, merging and filtering."""

import pytest

from attributer import Attribute, AttributeSet


@pytest.fixture
def positional(owner):
    def factory(name, position, **options):
        return Attribute(owner, name=name, kind="positional", position=position, **options)

    return factory


@pytest.fixture
def named(owner):
    def factory(name, **options):
        return Attribute(owner, name=name, kind="named", **options)

    return factory


class TestCanonicalOrder:
    def test_required_then_defaulted_then_named(self, owner, positional, named):
        attributes = AttributeSet(
            owner,
            [
                named("verbose"),
                positional("limit", 1, default=10),
                positional("source", 0),
                named("mode"),
                positional("target", 2),
            ],
        )
        assert attributes.names() == ["source", "target", "limit", "verbose", "mode"]

    def test_order_independent_of_insertion(self, owner, positional, named):
        items = [positional("a", 0), positional("b", 1, default=1), named("c"), positional("d", 2)]
        forward = AttributeSet(owner, items)
        backward = AttributeSet(owner, list(reversed(items)))
        assert forward.names()[:3] == backward.names()[:3] == ["a", "d", "b"]

    def test_named_keep_declaration_order(self, owner, named):
        attributes = AttributeSet(owner, [named("z"), named("a"), named("m")])
        assert attributes.names() == ["z", "a", "m"]

    def test_positional_without_position_sorts_last_in_group(self, owner, positional):
        attributes = AttributeSet(owner, [positional("later", None), positional("first", 3)])
        assert attributes.names() == ["first", "later"]


class TestMapping:
    def test_lookup(self, owner, named):
        attribute = named("title")
        attributes = AttributeSet(owner, [attribute])
        assert attributes["title"] is attribute
        assert "title" in attributes
        assert len(attributes) == 1
        assert attributes.get("missing") is None
        with pytest.raises(KeyError):
            attributes["missing"]

    def test_add_rejects_non_attribute(self, owner):
        with pytest.raises(TypeError, match="Invalid attribute"):
            AttributeSet(owner).add("title")

    def test_foreign_attribute_is_rebound(self, owner, named):
        class Other:
            pass

        attribute = named("title")
        attributes = AttributeSet(Other, [attribute])
        assert attributes["title"] is not attribute
        assert attributes["title"].owner is Other
        assert attribute.owner is owner

    def test_add_merges_same_name(self, owner, named):
        def v1(value):
            return True

        def v2(value):
            return True

        attributes = AttributeSet(owner, [named("title", validators=[v1])])
        attributes.add(named("title", validators=[v2]))
        assert len(attributes) == 1
        assert attributes["title"].validator.handlers == [v1, v2]
        assert attributes["title"].owner is owner


class TestDerivedSets:
    def test_positional_and_named(self, owner, positional, named):
        attributes = AttributeSet(owner, [positional("a", 0), named("b")])
        assert attributes.positional().names() == ["a"]
        assert attributes.named().names() == ["b"]

    def test_select_reject_exclude(self, owner, positional, named):
        attributes = AttributeSet(owner, [positional("a", 0), named("b"), named("c", default=1)])
        assert attributes.select(lambda name, attribute: attribute.has_default).names() == ["c"]
        assert attributes.reject(lambda name, attribute: name == "a").names() == ["b", "c"]
        assert attributes.exclude("a", "c").names() == ["b"]
        assert attributes.names() == ["a", "b", "c"]

    def test_duplicate_with_owner_is_independent(self, owner, named):
        class Child(owner):
            pass

        attributes = AttributeSet(owner, [named("title")])
        duplicate = attributes.duplicate_with_owner(Child)
        duplicate.add(Attribute(Child, name="extra", kind="named"))

        assert duplicate.owner is Child
        assert duplicate["title"].owner is Child
        assert duplicate["title"] is not attributes["title"]
        assert "extra" not in attributes

    def test_merge(self, owner, positional, named):
        class Child(owner):
            pass

        parent = AttributeSet(owner, [positional("a", 0), named("b", description="parent")])
        child = AttributeSet(Child, [Attribute(Child, name="b", kind="named", nilable=False)])
        merged = parent.merge(child)

        assert merged.owner is Child
        assert merged.names() == ["a", "b"]
        assert merged["b"].signature.is_nilable is False
        assert merged["b"].description == "parent"
        assert all(attribute.owner is Child for attribute in merged.values())


def test_repr(owner, named):
    assert repr(AttributeSet(owner, [named("title")])) == "AttributeSet(Owner, ['title'])"
