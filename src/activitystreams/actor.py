"""Actor kinds.

Actors share the object field set; the ActivityPub fields they need to
take part in federation (``inbox``, ``outbox`` and friends) live in
``activitystreams.apub.ApActorProperties`` and are attached with
``Person.full()`` or ``Ext.from_raw``.
"""
from __future__ import annotations

from activitystreams.kind import Kind
from activitystreams.node import Node
from activitystreams.object import ObjectProperties
from activitystreams.registry import kinds
from activitystreams.roles import Actor


@kinds.register()
class Application(Actor, ObjectProperties, Node):
    KIND = Kind("Application")


@kinds.register()
class Group(Actor, ObjectProperties, Node):
    KIND = Kind("Group")


@kinds.register()
class Organization(Actor, ObjectProperties, Node):
    KIND = Kind("Organization")


@kinds.register()
class Person(Actor, ObjectProperties, Node):
    KIND = Kind("Person")


@kinds.register()
class Service(Actor, ObjectProperties, Node):
    KIND = Kind("Service")


__all__ = ["Application", "Group", "Organization", "Person", "Service"]
