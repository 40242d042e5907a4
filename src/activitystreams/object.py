"""Object field sets and the concrete object kinds.

Every class here is registered in the default kind registry, so nested
objects of these kinds parse as typed values.

Example
-------
::

    from activitystreams.object import Note

    note = Note(content="Hello", to="https://www.w3.org/ns/activitystreams#Public")
    note.add("tag", "https://example.com/tags/greeting")
    note.into_raw()
"""
from __future__ import annotations

from typing import Any

from activitystreams.fields import Field
from activitystreams.kind import Kind
from activitystreams.node import BaseProperties, Node
from activitystreams.registry import kinds
from activitystreams.roles import Actor, Object
from activitystreams.shapes import (
    DateTimeShape,
    DurationShape,
    FloatShape,
    StringShape,
    UnionShape,
)
from activitystreams.unions import AnyBase, AnyString

_ANY_BASE = UnionShape(AnyBase)
_ANY_STRING = UnionShape(AnyString)


class ObjectProperties(BaseProperties):
    """Fields shared by every object kind, activities and collections included."""

    attachment = Field("attachment", _ANY_BASE)
    attributed_to = Field("attributedTo", _ANY_BASE)
    audience = Field("audience", _ANY_BASE)
    content = Field("content", _ANY_STRING)
    context = Field("context", _ANY_BASE)
    summary = Field("summary", _ANY_STRING)
    url = Field("url", _ANY_BASE)
    generator = Field("generator", _ANY_BASE)
    icon = Field("icon", _ANY_BASE)
    image = Field("image", _ANY_BASE)
    location = Field("location", _ANY_BASE)
    tag = Field("tag", _ANY_BASE)
    start_time = Field("startTime", DateTimeShape(), functional=True)
    end_time = Field("endTime", DateTimeShape(), functional=True)
    duration = Field("duration", DurationShape(), functional=True)
    published = Field("published", DateTimeShape(), functional=True)
    updated = Field("updated", DateTimeShape(), functional=True)
    in_reply_to = Field("inReplyTo", _ANY_BASE)
    replies = Field("replies", _ANY_BASE)
    to = Field("to", _ANY_BASE)
    bto = Field("bto", _ANY_BASE)
    cc = Field("cc", _ANY_BASE)
    bcc = Field("bcc", _ANY_BASE)

    @classmethod
    def full(cls, **fields: Any) -> Any:
        """Return a new instance paired with its ActivityPub extension.

        Actors get ``ApActorProperties``; everything else gets
        ``ApObjectProperties``.
        """
        from activitystreams.apub import ApActorProperties, ApObjectProperties
        from activitystreams.ext import Ext

        extension = ApActorProperties() if issubclass(cls, Actor) else ApObjectProperties()
        return Ext(cls(**fields), extension)


class PlaceProperties(ObjectProperties):
    accuracy = Field("accuracy", FloatShape(), functional=True)
    altitude = Field("altitude", FloatShape(), functional=True)
    latitude = Field("latitude", FloatShape(), functional=True)
    longitude = Field("longitude", FloatShape(), functional=True)
    radius = Field("radius", FloatShape(), functional=True)
    units = Field("units", StringShape(), functional=True)


class ProfileProperties(ObjectProperties):
    describes = Field("describes", _ANY_BASE, functional=True)


class RelationshipProperties(ObjectProperties):
    subject = Field("subject", _ANY_BASE, functional=True)
    object = Field("object", _ANY_BASE)
    relationship = Field("relationship", _ANY_BASE)


class TombstoneProperties(ObjectProperties):
    former_type = Field("formerType", StringShape())
    deleted = Field("deleted", DateTimeShape(), functional=True)


# ---------------------------------------------------------------------------
# Concrete kinds
# ---------------------------------------------------------------------------


@kinds.register()
class PlainObject(Object, ObjectProperties, Node):
    """The generic ``Object`` kind."""

    KIND = Kind("Object")


@kinds.register()
class Article(Object, ObjectProperties, Node):
    KIND = Kind("Article")


@kinds.register()
class Audio(Object, ObjectProperties, Node):
    KIND = Kind("Audio")


@kinds.register()
class Document(Object, ObjectProperties, Node):
    KIND = Kind("Document")


@kinds.register()
class Event(Object, ObjectProperties, Node):
    KIND = Kind("Event")


@kinds.register()
class Image(Object, ObjectProperties, Node):
    KIND = Kind("Image")


@kinds.register()
class Note(Object, ObjectProperties, Node):
    """A short written work, typically a single paragraph."""

    KIND = Kind("Note")


@kinds.register()
class Page(Object, ObjectProperties, Node):
    KIND = Kind("Page")


@kinds.register()
class Place(Object, PlaceProperties, Node):
    """A logical or physical location."""

    KIND = Kind("Place")


@kinds.register()
class Profile(Object, ProfileProperties, Node):
    """Content about another object, named by ``describes``."""

    KIND = Kind("Profile")


@kinds.register()
class Relationship(Object, RelationshipProperties, Node):
    """States that ``subject`` relates to ``object`` via ``relationship``."""

    KIND = Kind("Relationship")


@kinds.register()
class Tombstone(Object, TombstoneProperties, Node):
    """Stands in for an object that has been deleted."""

    KIND = Kind("Tombstone")


@kinds.register()
class Video(Object, ObjectProperties, Node):
    KIND = Kind("Video")


__all__ = [
    "Article",
    "Audio",
    "Document",
    "Event",
    "Image",
    "Note",
    "ObjectProperties",
    "Page",
    "Place",
    "PlaceProperties",
    "PlainObject",
    "Profile",
    "ProfileProperties",
    "Relationship",
    "RelationshipProperties",
    "Tombstone",
    "TombstoneProperties",
    "Video",
]
