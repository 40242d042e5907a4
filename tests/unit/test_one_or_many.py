"""Unit tests for activitystreams.one_or_many: the cardinality union."""
from __future__ import annotations

import pytest

from activitystreams.one_or_many import OneOrMany


class TestConstruction:
    def test_scalar_is_single(self) -> None:
        value = OneOrMany("x")
        assert value.is_single
        assert not value.is_many

    @pytest.mark.parametrize("items", [["x"], ("x",), []])
    def test_sequence_is_many(self, items: object) -> None:
        assert OneOrMany(items).is_many

    def test_one_keeps_list_as_single_item(self) -> None:
        value = OneOrMany.one([1, 2])
        assert value.as_single() == [1, 2]

    def test_copy_constructor(self) -> None:
        original = OneOrMany.many(["a"])
        copied = OneOrMany(original)
        copied.add("b")
        assert original.into_many() == ["a"]
        assert copied.into_many() == ["a", "b"]


class TestAccessors:
    def test_as_single_on_scalar(self) -> None:
        assert OneOrMany.one("x").as_single() == "x"

    def test_as_single_on_one_element_array_is_none(self) -> None:
        assert OneOrMany.many(["x"]).as_single() is None

    def test_as_many(self) -> None:
        assert OneOrMany.many(["x", "y"]).as_many() == ["x", "y"]
        assert OneOrMany.one("x").as_many() is None

    def test_into_single_unwraps_one_element_array(self) -> None:
        assert OneOrMany.many(["x"]).into_single() == "x"
        assert OneOrMany.one("x").into_single() == "x"

    def test_into_single_with_several_is_none(self) -> None:
        assert OneOrMany.many(["x", "y"]).into_single() is None

    def test_into_many_always_list(self) -> None:
        assert OneOrMany.one("x").into_many() == ["x"]

    def test_first(self) -> None:
        assert OneOrMany.many(["a", "b"]).first() == "a"
        assert OneOrMany.many([]).first() is None

    def test_len_and_iter(self) -> None:
        value = OneOrMany.many([1, 2, 3])
        assert len(value) == 3
        assert list(value) == [1, 2, 3]


class TestAdd:
    def test_add_turns_single_into_pair(self) -> None:
        value = OneOrMany.one("a").add("b")
        assert value.is_many
        assert value.into_many() == ["a", "b"]

    def test_add_appends_to_many(self) -> None:
        value = OneOrMany.many(["a"]).add("b")
        assert value.as_many() == ["a", "b"]


class TestWireConversion:
    def test_from_raw_scalar(self) -> None:
        value = OneOrMany.from_raw("x", str.upper)
        assert value == OneOrMany.one("X")

    def test_from_raw_one_element_array_stays_many(self) -> None:
        value = OneOrMany.from_raw(["x"], str.upper)
        assert value.is_many
        assert value.as_single() is None
        assert value.into_many() == ["X"]

    def test_into_raw_reproduces_variant(self) -> None:
        assert OneOrMany.from_raw(["x"], str).into_raw(str) == ["x"]
        assert OneOrMany.from_raw("x", str).into_raw(str) == "x"

    def test_map_keeps_variant(self) -> None:
        assert OneOrMany.many([1]).map(lambda n: n + 1) == OneOrMany.many([2])
        assert OneOrMany.one(1).map(lambda n: n + 1) == OneOrMany.one(2)

    def test_equality_distinguishes_variants(self) -> None:
        assert OneOrMany.one("x") != OneOrMany.many(["x"])

    def test_repr(self) -> None:
        assert repr(OneOrMany.one("x")) == "OneOrMany.one('x')"
        assert repr(OneOrMany.many(["x"])) == "OneOrMany.many(['x'])"
