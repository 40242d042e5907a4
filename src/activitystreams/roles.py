"""Role markers.

Empty classes that concrete vocabulary types inherit to state what they
are.  They carry no fields and no behaviour; use them in ``isinstance``
checks and type annotations::

    def deliver(activity: Activity) -> None: ...

    isinstance(Video(), Object)   # True
    isinstance(Mention(), Link)   # True
"""
from __future__ import annotations


class Base:
    """Anything that can appear as a node in a document."""

    __slots__ = ()


class Object(Base):
    __slots__ = ()


class Link(Base):
    __slots__ = ()


class Actor(Object):
    __slots__ = ()


class Activity(Object):
    __slots__ = ()


class IntransitiveActivity(Activity):
    """An activity with no direct object."""

    __slots__ = ()


class Collection(Object):
    __slots__ = ()


class CollectionPage(Collection):
    __slots__ = ()


__all__ = [
    "Activity",
    "Actor",
    "Base",
    "Collection",
    "CollectionPage",
    "IntransitiveActivity",
    "Link",
    "Object",
]
