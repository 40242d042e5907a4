"""Link field set and the ``Link`` / ``Mention`` kinds."""
from __future__ import annotations

from activitystreams.fields import Field
from activitystreams.kind import Kind
from activitystreams.node import BaseProperties, Node
from activitystreams.registry import kinds
from activitystreams.roles import Link
from activitystreams.shapes import NonNegativeIntegerShape, StringShape, UriShape


class LinkProperties(BaseProperties):
    """A qualified reference to a resource, as opposed to the resource itself."""

    href = Field("href", UriShape(), functional=True)
    hreflang = Field("hreflang", StringShape(), functional=True)
    rel = Field("rel", StringShape())
    height = Field("height", NonNegativeIntegerShape(), functional=True)
    width = Field("width", NonNegativeIntegerShape(), functional=True)


@kinds.register()
class PlainLink(Link, LinkProperties, Node):
    """The generic ``Link`` kind."""

    KIND = Kind("Link")


@kinds.register()
class Mention(Link, LinkProperties, Node):
    KIND = Kind("Mention")


__all__ = ["LinkProperties", "Mention", "PlainLink"]
