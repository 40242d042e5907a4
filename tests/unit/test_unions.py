"""Unit tests for activitystreams.unions: AnyString and AnyBase variant
selection, fallback and conversion helpers.
"""
from __future__ import annotations

import json
import logging

import pytest

import activitystreams
from activitystreams.activity import Create
from activitystreams.bag import PropertyBag
from activitystreams.errors import UnexpectedShape
from activitystreams.kind import Kind
from activitystreams.link import PlainLink
from activitystreams.node import Node
from activitystreams.object import Image, Note, ObjectProperties
from activitystreams.primitives import RdfLangString, XsdAnyUri
from activitystreams.registry import KindRegistry
from activitystreams.unions import AnyBase, AnyString


class Emoji(ObjectProperties, Node):
    KIND = Kind("Emoji")


# ===========================================================================
# AnyString
# ===========================================================================


class TestAnyString:
    def test_plain_string(self) -> None:
        value = AnyString.from_raw("hello")
        assert value.variant == "xsd_string"
        assert value.as_xsd_string() == "hello"
        assert value.as_rdf_lang_string() is None

    def test_lang_string(self) -> None:
        value = AnyString.from_raw({"@value": "Bonjour", "@language": "fr"})
        assert value.variant == "rdf_lang_string"
        assert value.as_rdf_lang_string() == RdfLangString("Bonjour", "fr")
        assert value.as_xsd_string() is None

    @pytest.mark.parametrize("raw", ["hello", {"@value": "Hallo", "@language": "de"}])
    def test_into_raw_reproduces_shape(self, raw: object) -> None:
        assert AnyString.from_raw(raw).into_raw() == raw

    @pytest.mark.parametrize("raw", [1, None, ["x"], {"@value": "x"}])
    def test_other_shapes_rejected(self, raw: object) -> None:
        assert AnyString.try_from_raw(raw) is None
        with pytest.raises(UnexpectedShape):
            AnyString.from_raw(raw)

    def test_coerce(self) -> None:
        assert AnyString.coerce("x") == AnyString.from_xsd_string("x")
        lang = RdfLangString("x", "en")
        assert AnyString.coerce(lang) == AnyString.from_rdf_lang_string(lang)
        with pytest.raises(TypeError):
            AnyString.coerce(3)

    def test_str(self) -> None:
        assert str(AnyString.from_xsd_string("x")) == "x"
        assert str(AnyString.from_rdf_lang_string(RdfLangString("y", "en"))) == "y"

    def test_unknown_variant_rejected(self) -> None:
        with pytest.raises(ValueError):
            AnyString("base", "x")


# ===========================================================================
# AnyBase
# ===========================================================================


class TestAnyBaseStrings:
    def test_uri_preferred_over_string(self) -> None:
        value = AnyBase.from_raw("https://example.com/notes/1")
        assert value.variant == "xsd_any_uri"
        assert value.as_xsd_any_uri() == XsdAnyUri("https://example.com/notes/1")
        assert value.as_xsd_string() is None

    def test_non_uri_string(self) -> None:
        value = AnyBase.from_raw("just words")
        assert value.variant == "xsd_string"
        assert value.as_xsd_string() == "just words"

    @pytest.mark.parametrize("raw", ["https://example.com/a", "just words"])
    def test_into_raw_is_same_string(self, raw: str) -> None:
        assert AnyBase.from_raw(raw).into_raw() == raw

    def test_id_of_reference(self) -> None:
        assert AnyBase.from_raw("https://example.com/a").id() == XsdAnyUri("https://example.com/a")

    def test_kind_of_reference_is_none(self) -> None:
        assert AnyBase.from_raw("https://example.com/a").kind() is None

    @pytest.mark.parametrize("raw", [1, None, True, ["https://example.com/a"]])
    def test_non_string_non_object_rejected(self, raw: object) -> None:
        assert AnyBase.try_from_raw(raw) is None


class TestAnyBaseObjects:
    def test_registered_kind_is_base(self) -> None:
        value = AnyBase.from_raw({"type": "Note", "content": "hi"})
        assert value.variant == "base"
        assert isinstance(value.as_base(), Note)
        assert value.kind() == "Note"

    def test_multi_typed_nested_object(self) -> None:
        value = AnyBase.from_raw({"type": ["x:Clip", "Note"], "content": "hi"})
        assert value.variant == "base"
        assert isinstance(value.as_base(), Note)
        assert value.kind() == "x:Clip"

    def test_unregistered_kind_is_unparsed(self) -> None:
        raw = {"type": "x:Custom", "x:field": [1, {"deep": True}]}
        value = AnyBase.from_raw(raw)
        assert value.variant == "unparsed"
        assert value.as_unparsed() == PropertyBag(raw)
        assert value.kind() == "x:Custom"
        assert value.into_raw() == raw

    def test_untyped_object_is_unparsed(self) -> None:
        value = AnyBase.from_raw({"href": "https://example.com"})
        assert value.variant == "unparsed"
        assert value.kind() is None

    def test_invalid_registered_kind_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        raw = {"type": "Note", "published": "not a date"}
        with caplog.at_level(logging.DEBUG, logger="activitystreams.unions"):
            value = AnyBase.from_raw(raw)
        assert value.variant == "unparsed"
        assert value.into_raw() == raw
        assert "keeping it unparsed" in caplog.text

    def test_out_of_range_field_falls_back(self) -> None:
        raw = {"type": "Video", "duration": "PT" + "9" * 400 + "S"}
        value = AnyBase.from_raw(raw)
        assert value.variant == "unparsed"
        assert value.into_raw() == raw

    def test_nested_out_of_range_field_keeps_parent(self) -> None:
        video = {"type": "Video", "duration": "P9999999999D"}
        doc = activitystreams.parse(json.dumps({"type": "Create", "object": video}))
        assert isinstance(doc, Create)
        assert doc.object.as_single().variant == "unparsed"
        assert doc.into_raw() == {"type": "Create", "object": video}

    def test_custom_registry(self, registry: KindRegistry) -> None:
        registry.register_class(Emoji)
        value = AnyBase.from_raw({"type": "Emoji", "name": ":blob:"}, registry)
        assert isinstance(value.as_base(), Emoji)

    def test_default_registry_does_not_know_custom_kind(self) -> None:
        assert AnyBase.from_raw({"type": "Emoji"}).variant == "unparsed"

    def test_input_is_not_aliased(self) -> None:
        raw = {"type": "x:Custom", "list": [1]}
        value = AnyBase.from_raw(raw)
        raw["list"].append(2)
        assert value.into_raw() == {"type": "x:Custom", "list": [1]}

    def test_id_of_base_and_unparsed(self) -> None:
        base = AnyBase.from_raw({"type": "Note", "id": "https://example.com/n/1"})
        unparsed = AnyBase.from_raw({"type": "x:Y", "id": "https://example.com/y/1"})
        assert base.id() == XsdAnyUri("https://example.com/n/1")
        assert unparsed.id() == XsdAnyUri("https://example.com/y/1")
        assert AnyBase.from_raw({"type": "x:Y", "id": "not an iri"}).id() is None


class TestAnyBaseDowncast:
    def test_downcast_matching_base(self) -> None:
        value = AnyBase.from_raw({"type": "Image", "url": "https://example.com/i.png"})
        image = value.downcast(Image)
        assert isinstance(image, Image)
        assert image is value.as_base()

    def test_downcast_mismatch_is_none(self) -> None:
        value = AnyBase.from_raw({"type": "Image"})
        assert value.downcast(Note) is None

    def test_downcast_unparsed(self) -> None:
        value = AnyBase.from_raw({"type": "Emoji", "name": ":blob:"})
        emoji = value.downcast(Emoji)
        assert isinstance(emoji, Emoji)
        assert emoji.name.as_single() == AnyString.from_xsd_string(":blob:")

    def test_downcast_string_is_none(self) -> None:
        assert AnyBase.from_raw("https://example.com").downcast(Note) is None


class TestAnyBaseCoerce:
    def test_coerce_node(self) -> None:
        note = Note(content="hi")
        assert AnyBase.coerce(note).as_base() is note

    def test_coerce_uri(self) -> None:
        uri = XsdAnyUri("https://example.com")
        assert AnyBase.coerce(uri).as_xsd_any_uri() is uri

    def test_coerce_strings_like_wire(self) -> None:
        assert AnyBase.coerce("https://example.com").variant == "xsd_any_uri"
        assert AnyBase.coerce("words").variant == "xsd_string"

    def test_coerce_dict_and_bag(self) -> None:
        assert AnyBase.coerce({"type": "Link", "href": "https://e.x/"}).variant == "base"
        assert AnyBase.coerce(PropertyBag({"a": 1})).variant == "unparsed"

    def test_coerce_rejects_other(self) -> None:
        with pytest.raises(TypeError):
            AnyBase.coerce(3.5)

    def test_equality_and_repr(self) -> None:
        link = PlainLink(href="https://e.x/")
        assert AnyBase.from_base(link) == AnyBase.from_base(link)
        assert AnyBase.from_xsd_string("a") != AnyString.from_xsd_string("a")
        assert repr(AnyBase.from_xsd_string("a")) == "AnyBase.xsd_string('a')"
