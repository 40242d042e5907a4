"""Kind tags: the literal strings carried in a document's ``type`` field.

A ``Kind`` stands for exactly one literal such as ``"Video"``.  It
serializes to that literal and deserializes only from it, which makes it
the discriminant for type-directed parsing.  Dispatch happens in two
phases: ``peek_kind`` reads the tag from a raw object without decoding
anything else, then the caller parses the whole object with the schema
registered for that tag.

Usage
-----
::

    from activitystreams.kind import Kind, peek_kind

    VIDEO = Kind("Video")
    VIDEO.deserialize("Video")   # -> VIDEO
    VIDEO.deserialize("Image")   # raises KindMismatch
    peek_kind({"type": "Note", "content": "hi"})  # -> "Note"
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

from activitystreams.bag import PropertyBag
from activitystreams.errors import KindMismatch, UnexpectedShape, json_type_name

TYPE_FIELD: Final[str] = "type"

# Activity Streams 1.0 spellings still seen in the wild.
TYPE_ALIASES: Final[tuple[str, ...]] = ("objectType", "verb")


@dataclass(frozen=True, slots=True)
class Kind:
    """A zero-payload marker identified by a single literal string.

    Parameters
    ----------
    literal:
        The exact string this kind stands for.  Matching is
        case-sensitive with no normalization.
    """

    literal: str

    def serialize(self) -> str:
        return self.literal

    def deserialize(self, value: Any) -> "Kind":
        """Accept ``value`` only if it equals this kind's literal.

        Raises
        ------
        UnexpectedShape
            If ``value`` is not a string.
        KindMismatch
            If ``value`` is a different string.
        """
        if not isinstance(value, str):
            raise UnexpectedShape(field=TYPE_FIELD, expected="string", found=json_type_name(value))
        if value != self.literal:
            raise KindMismatch(expected=self.literal, found=value)
        return self

    def matches(self, value: Any) -> bool:
        return value == self.literal

    def __str__(self) -> str:
        return self.literal


def peek_kinds(raw: Any) -> list[str]:
    """Return every ``type`` literal of a raw JSON object or bag.

    A string tag yields one literal and an array tag yields its string
    entries in order.  Non-objects and missing tags yield an empty list.
    """
    if not isinstance(raw, (dict, PropertyBag)):
        return []
    for name in (TYPE_FIELD, *TYPE_ALIASES):
        if name in raw:
            value = raw.get(name)
            if isinstance(value, str):
                return [value]
            if isinstance(value, list):
                return [entry for entry in value if isinstance(entry, str)]
            return []
    return []


def peek_kind(raw: Any) -> str | None:
    """Return the primary ``type`` string of a raw JSON object or bag, or ``None``.

    Only the tag is inspected.  For an array tag the first string entry is
    returned.  Non-objects, missing tags and tags of any other shape yield
    ``None``.
    """
    kinds = peek_kinds(raw)
    return kinds[0] if kinds else None


__all__ = ["Kind", "TYPE_ALIASES", "TYPE_FIELD", "peek_kind", "peek_kinds"]
