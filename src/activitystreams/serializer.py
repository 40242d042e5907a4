"""Document (de)serialization to and from JSON and YAML.

``DocumentSerializer`` performs two-phase dispatch: it peeks at a raw
object's ``type``, looks the literal up in a kind registry and parses the
object with the registered class.  Objects of unregistered kinds fall
back to a bare ``Node`` unless the serializer is strict.

Usage
-----
::

    from activitystreams.serializer import DocumentSerializer

    serializer = DocumentSerializer()
    doc = serializer.from_json('{"type": "Note", "content": "hi"}')
    type(doc).__name__              # "Note"
    yaml_text = serializer.to_yaml(doc)
    assert serializer.from_yaml(yaml_text) == doc
"""
from __future__ import annotations

import json
import logging
from typing import Any

import yaml

from activitystreams.bag import RawObject, load_json
from activitystreams.errors import MalformedJson, UnexpectedShape, json_type_name
from activitystreams.ext import Ext
from activitystreams.kind import peek_kind
from activitystreams.node import Node, Properties
from activitystreams.registry import KindRegistry, UnknownKindError, default_registry

logger = logging.getLogger(__name__)

Document = Properties | Ext

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _JsonLoader(yaml.SafeLoader):
    """SafeLoader that leaves unquoted dates and times as strings."""


_JsonLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _TIMESTAMP_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _check_json_value(value: Any, field: str | None = None) -> None:
    """Reject values YAML can express but JSON cannot, such as binary or sets."""
    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnexpectedShape(field=field, expected="string key", found=type(key).__name__)
            _check_json_value(item, key if field is None else field)
    elif isinstance(value, list):
        for item in value:
            _check_json_value(item, field)
    elif value is not None and not isinstance(value, (str, bool, int, float)):
        raise UnexpectedShape(field=field, expected="JSON value", found=type(value).__name__)


class DocumentSerializer:
    """Converts between typed documents and JSON/YAML text.

    Parameters
    ----------
    registry:
        Kind registry used for dispatch and for nested objects.  Defaults
        to the shared registry with the builtin vocabulary loaded.
    indent:
        Indentation for ``to_json``; ``None`` emits a single line.
    ensure_ascii:
        Passed through to ``json.dumps``.
    strict:
        When True, documents whose ``type`` is missing or unregistered
        raise ``UnknownKindError`` instead of parsing as a bare ``Node``.
    """

    def __init__(
        self,
        registry: KindRegistry | None = None,
        indent: int | None = 2,
        ensure_ascii: bool = False,
        strict: bool = False,
    ) -> None:
        self.registry = registry if registry is not None else default_registry()
        self.indent = indent
        self.ensure_ascii = ensure_ascii
        self.strict = strict

    # ------------------------------------------------------------------
    # Dispatch (dict → document)
    # ------------------------------------------------------------------

    def resolve(self, data: Any) -> type[Node]:
        """Pick the wrapper class for a raw object from its ``type``.

        Raises
        ------
        UnknownKindError
            In strict mode, when the kind is missing or unregistered.
        """
        cls = self.registry.resolve(data)
        if cls is not None:
            return cls
        kind = peek_kind(data)
        if self.strict:
            raise UnknownKindError(kind if kind is not None else "<missing>", self.registry.name)
        logger.debug("No class registered for kind %r; parsing as a bare Node.", kind)
        return Node

    def from_dict(self, data: Any, kind: type[Node] | None = None) -> Node:
        """Parse a decoded JSON object into its registered wrapper.

        Parameters
        ----------
        data:
            The decoded object.
        kind:
            Force a wrapper class instead of dispatching on ``type``.

        Raises
        ------
        DeserializationError
            If ``data`` is not an object or does not fit the schema.
        UnknownKindError
            In strict mode, when dispatch finds no class.
        """
        if not isinstance(data, dict):
            raise UnexpectedShape(field=None, expected="object", found=json_type_name(data))
        cls = kind if kind is not None else self.resolve(data)
        return cls.from_raw(data, registry=self.registry)

    def to_dict(self, document: Document) -> RawObject:
        """Flatten a document back into one JSON-compatible dict."""
        return document.into_raw()

    # ------------------------------------------------------------------
    # JSON helpers
    # ------------------------------------------------------------------

    def to_json(self, document: Document) -> str:
        """Serialize a document to a JSON string."""
        return json.dumps(self.to_dict(document), indent=self.indent, ensure_ascii=self.ensure_ascii)

    def from_json(self, text: str | bytes, kind: type[Node] | None = None) -> Node:
        """Deserialize a document from a JSON string."""
        return self.from_dict(load_json(text), kind)

    # ------------------------------------------------------------------
    # YAML helpers
    # ------------------------------------------------------------------

    def to_yaml(self, document: Document) -> str:
        """Serialize a document to a YAML string, keeping field order."""
        return yaml.safe_dump(
            self.to_dict(document),
            default_flow_style=False,
            allow_unicode=True,
            sort_keys=False,
        )

    def from_yaml(self, text: str, kind: type[Node] | None = None) -> Node:
        """Deserialize a document from a YAML string.

        Raises
        ------
        MalformedJson
            If ``text`` is not valid YAML or nests too deeply.
        UnexpectedShape
            If the YAML holds values with no JSON equivalent.
        """
        try:
            data = yaml.load(text, Loader=_JsonLoader)
            _check_json_value(data)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            if mark is not None:
                raise MalformedJson(message=str(exc), line=mark.line + 1, col=mark.column + 1) from None
            raise MalformedJson(message=str(exc)) from None
        except RecursionError:
            raise MalformedJson(message="document nested too deeply") from None
        return self.from_dict(data, kind)


__all__ = ["Document", "DocumentSerializer"]
