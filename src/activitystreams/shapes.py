"""Per-field value codecs.

A ``Shape`` knows how to turn one raw JSON value into the Python value a
typed accessor returns (``decode``), how to turn it back (``encode``),
and which Python values a caller may assign (``coerce``).  Cardinality is
not a shape's concern: ``Field`` applies the shape once for functional
fields and element-wise through ``OneOrMany`` for the rest.

Shapes signal a mismatch with ``ShapeError``; ``Field`` converts that into
the public, field-scoped ``UnexpectedShape``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from activitystreams.errors import json_type_name
from activitystreams.kind import Kind
from activitystreams.primitives import MimeMediaType, XsdAnyUri, XsdDateTime, XsdDuration

if TYPE_CHECKING:
    from activitystreams.node import Properties
    from activitystreams.registry import KindRegistry
    from activitystreams.unions import ShapeUnion


class ShapeError(ValueError):
    """A raw value does not fit a shape."""

    def __init__(self, expected: str, value: Any) -> None:
        self.expected = expected
        self.found = json_type_name(value)
        super().__init__(f"expected {expected}, found {self.found}")


class Shape(ABC):
    """Codec for the values of one field."""

    name: str = "value"

    @abstractmethod
    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> Any:
        """Turn a raw JSON value into a typed value or raise ``ShapeError``."""

    def encode(self, value: Any) -> Any:
        return value

    def coerce(self, value: Any) -> Any:
        """Normalize a value assigned through an accessor."""
        return value

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------


class RawShape(Shape):
    """Any JSON value, kept as is."""

    name = "any JSON value"

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> Any:
        return raw


class StringShape(Shape):
    name = "string"

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> str:
        if not isinstance(raw, str):
            raise ShapeError(self.name, raw)
        return raw

    def coerce(self, value: Any) -> str:
        if not isinstance(value, str):
            raise ShapeError(self.name, value)
        return value


class BooleanShape(Shape):
    name = "boolean"

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> bool:
        if not isinstance(raw, bool):
            raise ShapeError(self.name, raw)
        return raw

    coerce = decode


class FloatShape(Shape):
    name = "number"

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> float:
        if isinstance(raw, bool) or not isinstance(raw, (int, float)):
            raise ShapeError(self.name, raw)
        return float(raw)

    def coerce(self, value: Any) -> float:
        return self.decode(value)


class NonNegativeIntegerShape(Shape):
    name = "non-negative integer"

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> int:
        if isinstance(raw, bool) or not isinstance(raw, int) or raw < 0:
            raise ShapeError(self.name, raw)
        return raw

    def coerce(self, value: Any) -> int:
        return self.decode(value)


class TypeShape(Shape):
    """The ``type`` tag: one string, or several for multi-typed nodes."""

    name = "string or array of strings"

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> str | list[str]:
        if isinstance(raw, str):
            return raw
        if isinstance(raw, list) and raw and all(isinstance(item, str) for item in raw):
            return list(raw)
        raise ShapeError(self.name, raw)

    def coerce(self, value: Any) -> str | list[str]:
        if isinstance(value, Kind):
            return value.serialize()
        if isinstance(value, tuple):
            value = list(value)
        return self.decode(value)


# ---------------------------------------------------------------------------
# Primitive value types
# ---------------------------------------------------------------------------


class _ParsedStringShape(Shape):
    """A string parsed into one of the primitive value types."""

    value_type: Any = None

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> Any:
        if not isinstance(raw, str):
            raise ShapeError(self.name, raw)
        try:
            return self.value_type.parse(raw)
        except (ValueError, OverflowError):
            raise ShapeError(self.name, raw) from None

    def encode(self, value: Any) -> str:
        return str(value)

    def coerce(self, value: Any) -> Any:
        if isinstance(value, self.value_type):
            return value
        return self.decode(value)


class UriShape(_ParsedStringShape):
    name = "absolute URI"
    value_type = XsdAnyUri


class DateTimeShape(_ParsedStringShape):
    name = "RFC 3339 date-time"
    value_type = XsdDateTime

    def coerce(self, value: Any) -> XsdDateTime:
        if isinstance(value, datetime):
            return XsdDateTime(value)
        return super().coerce(value)


class DurationShape(_ParsedStringShape):
    name = "ISO 8601 duration"
    value_type = XsdDuration

    def coerce(self, value: Any) -> XsdDuration:
        if isinstance(value, timedelta):
            return XsdDuration(value)
        return super().coerce(value)


class MediaTypeShape(_ParsedStringShape):
    name = "MIME media type"
    value_type = MimeMediaType


# ---------------------------------------------------------------------------
# Composite shapes
# ---------------------------------------------------------------------------


class UnionShape(Shape):
    """Delegates to a ``ShapeUnion`` subclass such as ``AnyBase``."""

    def __init__(self, union_cls: type["ShapeUnion"]) -> None:
        self.union_cls = union_cls
        self.name = union_cls.describe()

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> "ShapeUnion":
        decoded = self.union_cls.try_from_raw(raw, registry)
        if decoded is None:
            raise ShapeError(self.name, raw)
        return decoded

    def encode(self, value: "ShapeUnion") -> Any:
        return value.into_raw()

    def coerce(self, value: Any) -> "ShapeUnion":
        return self.union_cls.coerce(value)

    def __repr__(self) -> str:
        return f"UnionShape({self.union_cls.__name__})"


class NestedShape(Shape):
    """A nested JSON object owned by its own ``Properties`` subclass."""

    def __init__(self, properties_cls: type["Properties"]) -> None:
        self.properties_cls = properties_cls
        self.name = f"{properties_cls.__name__} object"

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> "Properties":
        if not isinstance(raw, dict):
            raise ShapeError(self.name, raw)
        return self.properties_cls.from_raw(raw, registry=registry)

    def encode(self, value: "Properties") -> Any:
        return value.into_raw()

    def coerce(self, value: Any) -> "Properties":
        if isinstance(value, self.properties_cls):
            return value
        return self.decode(value)

    def __repr__(self) -> str:
        return f"NestedShape({self.properties_cls.__name__})"


__all__ = [
    "BooleanShape",
    "DateTimeShape",
    "DurationShape",
    "FloatShape",
    "MediaTypeShape",
    "NestedShape",
    "NonNegativeIntegerShape",
    "RawShape",
    "Shape",
    "ShapeError",
    "StringShape",
    "TypeShape",
    "UnionShape",
    "UriShape",
]
