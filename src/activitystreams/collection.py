"""Collection field sets and the four collection kinds.

``items`` holds the members of an unordered collection and
``orderedItems`` those of an ordered one; both may be absent when the
members are paged through ``first``/``next``.
"""
from __future__ import annotations

from activitystreams.fields import Field
from activitystreams.kind import Kind
from activitystreams.node import Node
from activitystreams.object import ObjectProperties
from activitystreams.one_or_many import OneOrMany
from activitystreams.registry import kinds
from activitystreams.roles import Collection, CollectionPage
from activitystreams.shapes import NonNegativeIntegerShape, UnionShape
from activitystreams.unions import AnyBase

_ANY_BASE = UnionShape(AnyBase)


class CollectionProperties(ObjectProperties):
    total_items = Field("totalItems", NonNegativeIntegerShape(), functional=True)
    current = Field("current", _ANY_BASE, functional=True)
    first = Field("first", _ANY_BASE, functional=True)
    last = Field("last", _ANY_BASE, functional=True)
    items = Field("items", _ANY_BASE)
    ordered_items = Field("orderedItems", _ANY_BASE)

    def members(self) -> list[AnyBase]:
        """Every inline member, from ``orderedItems`` then ``items``."""
        found: list[AnyBase] = []
        for name in ("orderedItems", "items"):
            values: OneOrMany[AnyBase] | None = self.get(name)
            if values is not None:
                found.extend(values)
        return found


class CollectionPageProperties(CollectionProperties):
    part_of = Field("partOf", _ANY_BASE, functional=True)
    next = Field("next", _ANY_BASE, functional=True)
    prev = Field("prev", _ANY_BASE, functional=True)


class OrderedCollectionPageProperties(CollectionPageProperties):
    start_index = Field("startIndex", NonNegativeIntegerShape(), functional=True)


@kinds.register()
class UnorderedCollection(Collection, CollectionProperties, Node):
    """The generic ``Collection`` kind."""

    KIND = Kind("Collection")


@kinds.register()
class OrderedCollection(Collection, CollectionProperties, Node):
    KIND = Kind("OrderedCollection")


@kinds.register()
class UnorderedCollectionPage(CollectionPage, CollectionPageProperties, Node):
    """The generic ``CollectionPage`` kind."""

    KIND = Kind("CollectionPage")


@kinds.register()
class OrderedCollectionPage(CollectionPage, OrderedCollectionPageProperties, Node):
    KIND = Kind("OrderedCollectionPage")


__all__ = [
    "CollectionPageProperties",
    "CollectionProperties",
    "OrderedCollection",
    "OrderedCollectionPage",
    "OrderedCollectionPageProperties",
    "UnorderedCollection",
    "UnorderedCollectionPage",
]
