"""Activity field sets and the concrete activity kinds.

Transitive activities act on an ``object``.  ``Arrive``, ``Travel`` and
``Question`` are intransitive and have no ``object`` field; a document
carrying one anyway keeps it as an unknown field.
"""
from __future__ import annotations

from activitystreams.fields import Field
from activitystreams.kind import Kind
from activitystreams.node import Node
from activitystreams.object import ObjectProperties
from activitystreams.registry import kinds
from activitystreams.roles import Activity, IntransitiveActivity
from activitystreams.shapes import RawShape, UnionShape
from activitystreams.unions import AnyBase

_ANY_BASE = UnionShape(AnyBase)


class ActivityProperties(ObjectProperties):
    actor = Field("actor", _ANY_BASE)
    object = Field("object", _ANY_BASE)
    target = Field("target", _ANY_BASE)
    result = Field("result", _ANY_BASE)
    origin = Field("origin", _ANY_BASE)
    instrument = Field("instrument", _ANY_BASE)


class IntransitiveActivityProperties(ObjectProperties):
    actor = Field("actor", _ANY_BASE)
    target = Field("target", _ANY_BASE)
    result = Field("result", _ANY_BASE)
    origin = Field("origin", _ANY_BASE)
    instrument = Field("instrument", _ANY_BASE)


class QuestionProperties(IntransitiveActivityProperties):
    """Exclusive (``oneOf``) or inclusive (``anyOf``) answer options."""

    one_of = Field("oneOf", _ANY_BASE)
    any_of = Field("anyOf", _ANY_BASE)
    # A date-time, a boolean or an object; kept as received.
    closed = Field("closed", RawShape(), functional=True)


# ---------------------------------------------------------------------------
# Transitive
# ---------------------------------------------------------------------------


@kinds.register()
class Accept(Activity, ActivityProperties, Node):
    """The actor accepts the object."""

    KIND = Kind("Accept")


@kinds.register()
class Add(Activity, ActivityProperties, Node):
    """The actor added the object to the target."""

    KIND = Kind("Add")


@kinds.register()
class Announce(Activity, ActivityProperties, Node):
    KIND = Kind("Announce")


@kinds.register()
class Block(Activity, ActivityProperties, Node):
    KIND = Kind("Block")


@kinds.register()
class Create(Activity, ActivityProperties, Node):
    KIND = Kind("Create")


@kinds.register()
class Delete(Activity, ActivityProperties, Node):
    KIND = Kind("Delete")


@kinds.register()
class Dislike(Activity, ActivityProperties, Node):
    KIND = Kind("Dislike")


@kinds.register()
class Flag(Activity, ActivityProperties, Node):
    KIND = Kind("Flag")


@kinds.register()
class Follow(Activity, ActivityProperties, Node):
    """The actor is interested in the object; typically another actor."""

    KIND = Kind("Follow")


@kinds.register()
class Ignore(Activity, ActivityProperties, Node):
    KIND = Kind("Ignore")


@kinds.register()
class Invite(Activity, ActivityProperties, Node):
    """The actor extends an invitation for the object to the target."""

    KIND = Kind("Invite")


@kinds.register()
class Join(Activity, ActivityProperties, Node):
    KIND = Kind("Join")


@kinds.register()
class Leave(Activity, ActivityProperties, Node):
    KIND = Kind("Leave")


@kinds.register()
class Like(Activity, ActivityProperties, Node):
    KIND = Kind("Like")


@kinds.register()
class Listen(Activity, ActivityProperties, Node):
    KIND = Kind("Listen")


@kinds.register()
class Move(Activity, ActivityProperties, Node):
    """The object moved from ``origin`` to ``target``."""

    KIND = Kind("Move")


@kinds.register()
class Offer(Activity, ActivityProperties, Node):
    KIND = Kind("Offer")


@kinds.register()
class Read(Activity, ActivityProperties, Node):
    KIND = Kind("Read")


@kinds.register()
class Reject(Activity, ActivityProperties, Node):
    KIND = Kind("Reject")


@kinds.register()
class Remove(Activity, ActivityProperties, Node):
    KIND = Kind("Remove")


@kinds.register()
class TentativeAccept(Activity, ActivityProperties, Node):
    KIND = Kind("TentativeAccept")


@kinds.register()
class TentativeReject(Activity, ActivityProperties, Node):
    KIND = Kind("TentativeReject")


@kinds.register()
class Undo(Activity, ActivityProperties, Node):
    """Reverses a previous activity, given as the object."""

    KIND = Kind("Undo")


@kinds.register()
class Update(Activity, ActivityProperties, Node):
    KIND = Kind("Update")


@kinds.register()
class View(Activity, ActivityProperties, Node):
    KIND = Kind("View")


# ---------------------------------------------------------------------------
# Intransitive
# ---------------------------------------------------------------------------


@kinds.register()
class Arrive(IntransitiveActivity, IntransitiveActivityProperties, Node):
    """The actor arrived at ``location``, optionally from ``origin``."""

    KIND = Kind("Arrive")


@kinds.register()
class Travel(IntransitiveActivity, IntransitiveActivityProperties, Node):
    """The actor traveled to ``target`` from ``origin``."""

    KIND = Kind("Travel")


@kinds.register()
class Question(IntransitiveActivity, QuestionProperties, Node):
    KIND = Kind("Question")


__all__ = [
    "Accept",
    "ActivityProperties",
    "Add",
    "Announce",
    "Arrive",
    "Block",
    "Create",
    "Delete",
    "Dislike",
    "Flag",
    "Follow",
    "Ignore",
    "IntransitiveActivityProperties",
    "Invite",
    "Join",
    "Leave",
    "Like",
    "Listen",
    "Move",
    "Offer",
    "Question",
    "QuestionProperties",
    "Read",
    "Reject",
    "Remove",
    "TentativeAccept",
    "TentativeReject",
    "Travel",
    "Undo",
    "Update",
    "View",
]
