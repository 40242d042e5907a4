"""Unit tests for activitystreams.bag: PropertyBag field operations,
parsing errors and ordered serialization.
"""
from __future__ import annotations

import pytest

from activitystreams.bag import PropertyBag, load_json
from activitystreams.errors import DeserializationError, MalformedJson, UnexpectedShape


class TestPropertyBagParsing:
    def test_from_raw_wraps_object(self) -> None:
        bag = PropertyBag.from_raw({"type": "Note", "content": "hi"})
        assert bag.get("type") == "Note"
        assert len(bag) == 2

    @pytest.mark.parametrize("raw", [[], "Note", 3, None, True])
    def test_from_raw_rejects_non_objects(self, raw: object) -> None:
        with pytest.raises(UnexpectedShape) as exc_info:
            PropertyBag.from_raw(raw)
        assert exc_info.value.field is None
        assert exc_info.value.expected == "object"

    def test_from_raw_rejects_non_string_keys(self) -> None:
        with pytest.raises(UnexpectedShape):
            PropertyBag.from_raw({1: "x"})

    def test_from_json(self) -> None:
        bag = PropertyBag.from_json('{"a": 1, "b": [1, 2]}')
        assert bag.get("b") == [1, 2]

    def test_from_json_malformed(self) -> None:
        with pytest.raises(MalformedJson) as exc_info:
            PropertyBag.from_json('{"a": ')
        assert exc_info.value.line == 1
        assert exc_info.value.col > 0

    def test_from_json_array_is_unexpected_shape(self) -> None:
        with pytest.raises(UnexpectedShape):
            PropertyBag.from_json("[1, 2]")

    def test_errors_are_deserialization_errors(self) -> None:
        with pytest.raises(DeserializationError):
            PropertyBag.from_json("not json")

    def test_load_json_rejects_non_text(self) -> None:
        with pytest.raises(MalformedJson):
            load_json(None)  # type: ignore[arg-type]

    def test_deeply_nested_document_rejected(self) -> None:
        text = '{"type": "Note", "x": ' + "[" * 100000 + "]" * 100000 + "}"
        with pytest.raises(MalformedJson) as exc_info:
            PropertyBag.from_json(text)
        assert exc_info.value.message == "document nested too deeply"


class TestPropertyBagOperations:
    def test_get_absent_returns_none(self) -> None:
        assert PropertyBag().get("missing") is None

    def test_set_is_chainable(self) -> None:
        bag = PropertyBag().set("a", 1).set("b", 2)
        assert bag.keys() == ["a", "b"]

    def test_set_overwrites_in_place(self) -> None:
        bag = PropertyBag({"a": 1, "b": 2}).set("a", 3)
        assert bag.items() == [("a", 3), ("b", 2)]

    def test_take_removes_and_returns(self) -> None:
        bag = PropertyBag({"a": 1})
        assert bag.take("a") == 1
        assert "a" not in bag
        assert bag.take("a") is None

    def test_delete_ignores_absence(self) -> None:
        bag = PropertyBag({"a": 1}).delete("a").delete("a")
        assert len(bag) == 0

    def test_split_moves_named_fields(self) -> None:
        bag = PropertyBag({"id": "x", "totalItems": 3, "type": "T", "other": True})
        moved = bag.split({"totalItems", "other", "absent"})
        assert moved.keys() == ["totalItems", "other"]
        assert bag.keys() == ["id", "type"]

    def test_merge_overwrites(self) -> None:
        bag = PropertyBag({"a": 1}).merge(PropertyBag({"a": 2, "b": 3}))
        assert bag.items() == [("a", 2), ("b", 3)]

    def test_copy_is_deep(self) -> None:
        bag = PropertyBag({"a": [1]})
        clone = bag.copy()
        clone.get("a").append(2)
        assert bag.get("a") == [1]

    def test_equality(self) -> None:
        assert PropertyBag({"a": 1}) == PropertyBag({"a": 1})
        assert PropertyBag({"a": 1}) != PropertyBag({"a": 2})

    def test_iteration_yields_names(self) -> None:
        assert list(PropertyBag({"x": 1, "y": 2})) == ["x", "y"]


class TestPropertyBagSerialization:
    def test_into_raw_orders_named_fields_first(self) -> None:
        bag = PropertyBag({"z": 1, "type": "Note", "a": 2, "id": "x"})
        assert list(bag.into_raw(order=("id", "type"))) == ["id", "type", "z", "a"]

    def test_into_raw_skips_absent_order_names(self) -> None:
        bag = PropertyBag({"z": 1})
        assert bag.into_raw(order=("id", "type")) == {"z": 1}

    def test_into_raw_preserves_unknown_order(self) -> None:
        bag = PropertyBag({"c": 1, "b": 2, "a": 3})
        assert list(bag.into_raw()) == ["c", "b", "a"]

    def test_into_raw_returns_a_copy(self) -> None:
        bag = PropertyBag({"a": {"nested": [1]}})
        raw = bag.into_raw()
        raw["a"]["nested"].append(2)
        assert bag.get("a") == {"nested": [1]}

    def test_to_json_keeps_unicode(self) -> None:
        assert PropertyBag({"name": "Zoë"}).to_json() == '{"name": "Zoë"}'
