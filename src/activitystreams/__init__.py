"""activitystreams: a typed, extensible data model for ActivityStreams 2.0.

Public API
----------
The stable public surface is everything exported from this module plus
the vocabulary modules (``activitystreams.object``, ``.link``,
``.actor``, ``.activity``, ``.collection`` and ``.apub``).

Example
-------
::

    import activitystreams
    from activitystreams.object import Video

    # Dispatch on "type" to the registered wrapper
    doc = activitystreams.parse('{"type": "Video", "name": "Intro", "x:codec": "av1"}')
    isinstance(doc, Video)        # True

    # Typed access; unknown fields survive untouched
    doc.name.as_single()          # AnyString.xsd_string('Intro')
    doc.get("x:codec")            # 'av1'

    activitystreams.dumps(doc)

    activitystreams.__version__
    '0.1.0'
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from activitystreams.bag import PropertyBag
from activitystreams.errors import (
    ActivityStreamsError,
    DeserializationError,
    ExtensionFieldConflict,
    KindMismatch,
    MalformedJson,
    MissingRequiredField,
    UnexpectedShape,
)
from activitystreams.ext import Ext
from activitystreams.fields import Field
from activitystreams.kind import Kind, peek_kind, peek_kinds
from activitystreams.node import BaseProperties, Node, Properties
from activitystreams.one_or_many import OneOrMany
from activitystreams.unions import AnyBase, AnyString

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from activitystreams.primitives import XsdAnyUri
    from activitystreams.serializer import Document


def parse(text: str | bytes, strict: bool = False) -> Node:
    """Parse JSON text into the wrapper registered for its ``type``.

    Parameters
    ----------
    text:
        A JSON object as text.
    strict:
        When ``True``, unregistered or missing kinds raise instead of
        parsing as a bare ``Node``.

    Returns
    -------
    Node
        The typed document.

    Raises
    ------
    activitystreams.DeserializationError
        If the text is not valid JSON or does not fit the schema.
    activitystreams.registry.UnknownKindError
        In strict mode, when no class is registered for the kind.
    """
    from activitystreams.serializer import DocumentSerializer

    return DocumentSerializer(strict=strict).from_json(text)


def dumps(document: "Document", indent: int | None = None) -> str:
    """Serialize a document (or ``Ext`` pair) to JSON text."""
    from activitystreams.serializer import DocumentSerializer

    return DocumentSerializer(indent=indent).to_json(document)


def from_raw(data: Any) -> Node:
    """Like ``parse`` but for an already decoded JSON object."""
    from activitystreams.serializer import DocumentSerializer

    return DocumentSerializer().from_dict(data)


def context() -> "XsdAnyUri":
    """The ActivityStreams JSON-LD context IRI."""
    from activitystreams.apub import context as _context

    return _context()


def security() -> "XsdAnyUri":
    """The W3C security vocabulary context IRI."""
    from activitystreams.apub import security as _security

    return _security()


def public() -> "XsdAnyUri":
    """The IRI addressing a document to everyone."""
    from activitystreams.apub import public as _public

    return _public()


__all__ = [
    "__version__",
    "ActivityStreamsError",
    "AnyBase",
    "AnyString",
    "BaseProperties",
    "DeserializationError",
    "Ext",
    "ExtensionFieldConflict",
    "Field",
    "Kind",
    "KindMismatch",
    "MalformedJson",
    "MissingRequiredField",
    "Node",
    "OneOrMany",
    "Properties",
    "PropertyBag",
    "UnexpectedShape",
    "context",
    "dumps",
    "from_raw",
    "parse",
    "peek_kind",
    "peek_kinds",
    "public",
    "security",
]
