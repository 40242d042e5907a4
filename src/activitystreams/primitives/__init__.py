"""Value types held by ActivityStreams fields.

Each type follows the same contract: ``Type.parse(text)`` returns a value
or raises a ``ValueError`` subclass, and ``str(value)`` formats it back.
"""
from __future__ import annotations

from activitystreams.primitives.media_type import InvalidMediaType, MimeMediaType
from activitystreams.primitives.rdf_lang_string import RdfLangString
from activitystreams.primitives.uri import InvalidUri, XsdAnyUri
from activitystreams.primitives.xsd_datetime import InvalidDateTime, XsdDateTime
from activitystreams.primitives.xsd_duration import InvalidDuration, XsdDuration

__all__ = [
    "InvalidDateTime",
    "InvalidDuration",
    "InvalidMediaType",
    "InvalidUri",
    "MimeMediaType",
    "RdfLangString",
    "XsdAnyUri",
    "XsdDateTime",
    "XsdDuration",
]
