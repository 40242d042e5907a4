"""Error types for the ActivityStreams document model.

Every failure raised while turning JSON into typed documents derives from
``DeserializationError`` and carries enough structured context (field
name, expected shape, offending value) for a caller to report it or to
retry against another schema.  Unknown fields never produce errors:
unrecognized is not the same as invalid.
"""
from __future__ import annotations

from dataclasses import dataclass, field


def json_type_name(value: object) -> str:
    """Return the JSON type name of a raw decoded value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


class ActivityStreamsError(Exception):
    """Base class for every error raised by this package."""


class DeserializationError(ActivityStreamsError, ValueError):
    """A document could not be turned into the requested structure.

    No partially built object is ever returned alongside this error.
    """


@dataclass
class MalformedJson(DeserializationError):
    """The input text is not valid JSON (or YAML).

    Parameters
    ----------
    message:
        Description from the underlying decoder.
    line:
        1-based line of the failure, ``0`` when unknown.
    col:
        1-based column of the failure, ``0`` when unknown.
    """

    message: str
    line: int = 0
    col: int = 0

    def __str__(self) -> str:
        if self.line:
            return f"MalformedJson at {self.line}:{self.col}: {self.message}"
        return f"MalformedJson: {self.message}"

    def __post_init__(self) -> None:
        self.args = (str(self),)


@dataclass
class UnexpectedShape(DeserializationError):
    """A JSON value does not match any accepted shape of its declared type.

    Parameters
    ----------
    field:
        Wire name of the offending field, or ``None`` for a top-level
        document that is not a JSON object.
    expected:
        Human-readable name of the declared shape.
    found:
        JSON type of the value actually present.
    """

    field: str | None
    expected: str
    found: str

    def __str__(self) -> str:
        where = f"field {self.field!r}" if self.field is not None else "document"
        return f"UnexpectedShape in {where}: expected {self.expected}, found {self.found}"

    def __post_init__(self) -> None:
        self.args = (str(self),)


@dataclass
class KindMismatch(DeserializationError):
    """A type tag did not equal the literal a schema expects.

    Callers use this as "not this schema, try another", not as a sign of
    corruption.
    """

    expected: str
    found: str | None

    def __str__(self) -> str:
        if self.found is None:
            return f"KindMismatch: expected type {self.expected!r}, found no type"
        return f"KindMismatch: expected type {self.expected!r}, found {self.found!r}"

    def __post_init__(self) -> None:
        self.args = (str(self),)


@dataclass
class MissingRequiredField(DeserializationError):
    """A field the schema declares mandatory is absent."""

    field: str
    schema: str = ""

    def __str__(self) -> str:
        owner = f" for {self.schema}" if self.schema else ""
        return f"MissingRequiredField: {self.field!r} is required{owner}"

    def __post_init__(self) -> None:
        self.args = (str(self),)


@dataclass
class ExtensionFieldConflict(ActivityStreamsError, TypeError):
    """A base schema and an extension schema declare the same wire names.

    This is a programming error detected once per class pair, never a
    property of incoming data.
    """

    base: str
    extension: str
    fields: tuple[str, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        names = ", ".join(repr(name) for name in self.fields)
        return (
            f"ExtensionFieldConflict: {self.extension} redeclares "
            f"field(s) {names} already owned by {self.base}"
        )

    def __post_init__(self) -> None:
        self.args = (str(self),)


__all__ = [
    "ActivityStreamsError",
    "DeserializationError",
    "ExtensionFieldConflict",
    "KindMismatch",
    "MalformedJson",
    "MissingRequiredField",
    "UnexpectedShape",
    "json_type_name",
]
