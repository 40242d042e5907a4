"""Unit tests for activitystreams.ext and activitystreams.apub: splitting
one wire object across a base and an extension field set.
"""
from __future__ import annotations

import logging
from typing import Any

import pytest

from activitystreams.actor import Person
from activitystreams.apub import (
    ApActorProperties,
    ApObjectProperties,
    EndpointProperties,
    context,
    public,
    security,
)
from activitystreams.errors import ExtensionFieldConflict, MissingRequiredField
from activitystreams.ext import Ext, check_disjoint
from activitystreams.fields import Field
from activitystreams.node import Node, Properties
from activitystreams.object import Note, Video
from activitystreams.primitives import XsdAnyUri
from activitystreams.shapes import NonNegativeIntegerShape, StringShape, UriShape


class Counted(Properties):
    total_items = Field("totalItems", NonNegativeIntegerShape(), functional=True)


class Identified(Properties):
    id = Field("id", UriShape(), functional=True)
    kind = Field("type", StringShape(), functional=True)


class Clashing(Properties):
    name = Field("displayName", StringShape())


class TestDisjointness:
    def test_base_and_extension_round_trip(self) -> None:
        raw = {"id": "https://e.x/c", "type": "Thing", "totalItems": 3}
        ext = Ext.from_raw(raw, base=Identified, extension=Counted)
        assert ext.base.into_raw() == {"id": "https://e.x/c", "type": "Thing"}
        assert ext.extension.into_raw() == {"totalItems": 3}
        assert ext.into_raw() == raw

    def test_overlap_raises(self) -> None:
        with pytest.raises(ExtensionFieldConflict) as exc_info:
            check_disjoint(Note, Clashing)
        assert exc_info.value.fields == ("displayName",)

    def test_overlap_raises_on_construction(self) -> None:
        with pytest.raises(ExtensionFieldConflict):
            Ext(Note(), Clashing())

    def test_check_is_cached(self) -> None:
        check_disjoint.cache_clear()
        check_disjoint(Node, Counted)
        check_disjoint(Node, Counted)
        assert check_disjoint.cache_info().hits == 1

    def test_check_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        check_disjoint.cache_clear()
        with caplog.at_level(logging.DEBUG, logger="activitystreams.ext"):
            check_disjoint(Video, ApObjectProperties)
        assert "ApObjectProperties" in caplog.text


class TestActorExtension:
    def test_split(self, actor_raw: dict[str, Any]) -> None:
        actor = Ext.from_raw(actor_raw, base=Person, extension=ApActorProperties)
        assert actor.extension.inbox == XsdAnyUri("https://social.example/users/alice/inbox")
        assert actor.extension.preferred_username == "alice"
        assert actor.base.name.as_single().as_xsd_string() == "Alice"
        assert "inbox" not in actor.base
        assert "name" not in actor.extension

    def test_unknown_fields_stay_with_base(self, actor_raw: dict[str, Any]) -> None:
        actor = Ext.from_raw(actor_raw, base=Person, extension=ApActorProperties)
        assert actor.base.unknown_fields() == ["publicKey"]
        assert actor.extension.unknown_fields() == []

    def test_round_trip(self, actor_raw: dict[str, Any]) -> None:
        actor = Ext.from_raw(actor_raw, base=Person, extension=ApActorProperties)
        assert actor.into_raw() == actor_raw

    def test_base_fields_first(self, actor_raw: dict[str, Any]) -> None:
        keys = list(Ext.from_raw(actor_raw, base=Person, extension=ApActorProperties).into_raw())
        assert keys.index("publicKey") < keys.index("inbox")

    def test_endpoints_nested(self, actor_raw: dict[str, Any]) -> None:
        actor = Ext.from_raw(actor_raw, base=Person, extension=ApActorProperties)
        endpoints = actor.extension.endpoints
        assert isinstance(endpoints, EndpointProperties)
        assert endpoints.shared_inbox == XsdAnyUri("https://social.example/inbox")

    def test_inbox_required(self, actor_raw: dict[str, Any]) -> None:
        del actor_raw["inbox"]
        with pytest.raises(MissingRequiredField) as exc_info:
            Ext.from_raw(actor_raw, base=Person, extension=ApActorProperties)
        assert exc_info.value.field == "inbox"

    def test_from_json(self) -> None:
        text = '{"type": "Person", "inbox": "https://e.x/i", "outbox": "https://e.x/o"}'
        actor = Ext.from_json(text, base=Person, extension=ApActorProperties)
        assert actor.extension.outbox == XsdAnyUri("https://e.x/o")

    def test_input_not_mutated(self, actor_raw: dict[str, Any]) -> None:
        before = dict(actor_raw)
        Ext.from_raw(actor_raw, base=Person, extension=ApActorProperties)
        assert actor_raw == before


class TestFull:
    def test_object_full(self) -> None:
        ext = Video.full(name="Clip")
        assert isinstance(ext.base, Video)
        assert isinstance(ext.extension, ApObjectProperties)
        ext.extension.likes = "https://e.x/v/likes"
        assert ext.into_raw() == {"type": "Video", "name": "Clip", "likes": "https://e.x/v/likes"}

    def test_actor_full(self) -> None:
        ext = Person.full()
        assert isinstance(ext.extension, ApActorProperties)
        ext.extension.set("inbox", "https://e.x/i").set("outbox", "https://e.x/o")
        assert ext.to_json() == '{"type": "Person", "inbox": "https://e.x/i", "outbox": "https://e.x/o"}'

    def test_extension_wins_over_base_unknown_field(self, caplog: pytest.LogCaptureFixture) -> None:
        ext = Person.full()
        ext.base.set("inbox", "https://e.x/old")
        ext.extension.set("inbox", "https://e.x/i").set("outbox", "https://e.x/o")
        with caplog.at_level(logging.DEBUG, logger="activitystreams.ext"):
            raw = ext.into_raw()
        assert raw["inbox"] == "https://e.x/i"
        assert "inbox" in caplog.text
        assert "ApActorProperties" in caplog.text

    def test_equality(self) -> None:
        assert Video.full() == Video.full()
        assert Video.full() != Note.full()


class TestWellKnownIris:
    def test_context(self) -> None:
        assert str(context()) == "https://www.w3.org/ns/activitystreams"

    def test_security(self) -> None:
        assert str(security()) == "https://w3id.org/security/v1"

    def test_public(self) -> None:
        assert str(public()) == "https://www.w3.org/ns/activitystreams#Public"

    def test_addressing_public(self) -> None:
        note = Note(to=public())
        assert note.into_raw()["to"] == "https://www.w3.org/ns/activitystreams#Public"
