"""Shape unions: values that may take one of several JSON shapes.

Many ActivityStreams properties accept more than one kind of value.
``attributedTo`` may be a bare IRI or an embedded ``Person``; ``summary``
may be a plain string or a language-tagged value object.  A
``ShapeUnion`` holds exactly one populated variant and remembers which,
so it re-serializes in the shape it arrived in.

Variants are tried in a fixed priority order on input:

* ``AnyString``: ``xsd_string``, then ``rdf_lang_string``.
* ``AnyBase``: ``xsd_any_uri``, ``xsd_string``, ``base`` (a nested object
  whose ``type`` is registered), then ``unparsed``.  The last one accepts
  any JSON object, so nested objects of unknown kinds never fail to parse.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, ClassVar

from activitystreams.bag import PropertyBag
from activitystreams.errors import DeserializationError, UnexpectedShape, json_type_name
from activitystreams.kind import peek_kind
from activitystreams.primitives import RdfLangString, XsdAnyUri

if TYPE_CHECKING:
    from activitystreams.node import Node, Properties
    from activitystreams.registry import KindRegistry

logger = logging.getLogger(__name__)


class ShapeUnion:
    """A value tagged with the variant it was read as.

    Subclasses list their variant names in ``VARIANTS`` in priority order
    and implement ``try_from_raw`` and ``into_raw``.
    """

    VARIANTS: ClassVar[tuple[str, ...]] = ()

    __slots__ = ("_variant", "_value")

    def __init__(self, variant: str, value: Any) -> None:
        if variant not in self.VARIANTS:
            raise ValueError(f"{type(self).__name__} has no variant {variant!r}")
        self._variant = variant
        self._value = value

    @property
    def variant(self) -> str:
        return self._variant

    @property
    def value(self) -> Any:
        return self._value

    @classmethod
    def describe(cls) -> str:
        return f"{cls.__name__} ({' | '.join(cls.VARIANTS)})"

    @classmethod
    def try_from_raw(cls, raw: Any, registry: "KindRegistry | None" = None) -> Any:
        """Return the first matching variant, or ``None``."""
        raise NotImplementedError

    @classmethod
    def from_raw(cls, raw: Any, registry: "KindRegistry | None" = None) -> Any:
        """Like ``try_from_raw`` but raises when no variant matches.

        Raises
        ------
        UnexpectedShape
            If ``raw`` fits none of the variants.
        """
        decoded = cls.try_from_raw(raw, registry)
        if decoded is None:
            raise UnexpectedShape(field=None, expected=cls.describe(), found=json_type_name(raw))
        return decoded

    def into_raw(self) -> Any:
        raise NotImplementedError

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """Wrap a plain Python value in the matching variant."""
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ShapeUnion):
            return NotImplemented
        return (
            type(self) is type(other)
            and self._variant == other._variant
            and self._value == other._value
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self._variant}({self._value!r})"


# ---------------------------------------------------------------------------
# AnyString
# ---------------------------------------------------------------------------


class AnyString(ShapeUnion):
    """A plain string or a language-tagged string."""

    VARIANTS = ("xsd_string", "rdf_lang_string")

    __slots__ = ()

    @classmethod
    def from_xsd_string(cls, value: str) -> "AnyString":
        return cls("xsd_string", value)

    @classmethod
    def from_rdf_lang_string(cls, value: RdfLangString) -> "AnyString":
        return cls("rdf_lang_string", value)

    @classmethod
    def try_from_raw(cls, raw: Any, registry: "KindRegistry | None" = None) -> "AnyString | None":
        if isinstance(raw, str):
            return cls.from_xsd_string(raw)
        try:
            return cls.from_rdf_lang_string(RdfLangString.from_raw(raw))
        except ValueError:
            return None

    def into_raw(self) -> Any:
        if self._variant == "xsd_string":
            return self._value
        return self._value.into_raw()

    @classmethod
    def coerce(cls, value: Any) -> "AnyString":
        if isinstance(value, AnyString):
            return value
        if isinstance(value, str):
            return cls.from_xsd_string(value)
        if isinstance(value, RdfLangString):
            return cls.from_rdf_lang_string(value)
        raise TypeError(f"expected str or RdfLangString, got {type(value).__name__}")

    def as_xsd_string(self) -> str | None:
        return self._value if self._variant == "xsd_string" else None

    def as_rdf_lang_string(self) -> RdfLangString | None:
        return self._value if self._variant == "rdf_lang_string" else None

    def __str__(self) -> str:
        if self._variant == "xsd_string":
            return self._value
        return self._value.value


# ---------------------------------------------------------------------------
# AnyBase
# ---------------------------------------------------------------------------


class AnyBase(ShapeUnion):
    """A reference, a plain string, a typed nested node or an opaque object."""

    VARIANTS = ("xsd_any_uri", "xsd_string", "base", "unparsed")

    __slots__ = ()

    @classmethod
    def from_xsd_any_uri(cls, value: XsdAnyUri) -> "AnyBase":
        return cls("xsd_any_uri", value)

    @classmethod
    def from_xsd_string(cls, value: str) -> "AnyBase":
        return cls("xsd_string", value)

    @classmethod
    def from_base(cls, value: "Node") -> "AnyBase":
        return cls("base", value)

    @classmethod
    def from_unparsed(cls, value: PropertyBag) -> "AnyBase":
        return cls("unparsed", value)

    @classmethod
    def try_from_raw(cls, raw: Any, registry: "KindRegistry | None" = None) -> "AnyBase | None":
        if isinstance(raw, str):
            if XsdAnyUri.is_valid(raw):
                return cls.from_xsd_any_uri(XsdAnyUri(raw))
            return cls.from_xsd_string(raw)
        if not isinstance(raw, dict):
            return None
        if registry is None:
            from activitystreams.registry import default_registry

            registry = default_registry()
        node_cls = registry.resolve(raw)
        if node_cls is not None:
            try:
                return cls.from_base(node_cls.from_raw(raw, registry=registry))
            except DeserializationError as exc:
                logger.debug(
                    "Nested %r did not parse as %s (%s); keeping it unparsed.",
                    peek_kind(raw),
                    node_cls.__qualname__,
                    exc,
                )
        return cls.from_unparsed(PropertyBag.from_raw(raw).copy())

    def into_raw(self) -> Any:
        if self._variant == "xsd_any_uri":
            return str(self._value)
        if self._variant == "xsd_string":
            return self._value
        return self._value.into_raw()

    @classmethod
    def coerce(cls, value: Any) -> "AnyBase":
        from activitystreams.node import Node

        if isinstance(value, AnyBase):
            return value
        if isinstance(value, XsdAnyUri):
            return cls.from_xsd_any_uri(value)
        if isinstance(value, Node):
            return cls.from_base(value)
        if isinstance(value, PropertyBag):
            return cls.from_unparsed(value)
        if isinstance(value, (str, dict)):
            return cls.from_raw(value)
        raise TypeError(
            f"expected a URI, string, Node, PropertyBag or dict, got {type(value).__name__}"
        )

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def as_xsd_any_uri(self) -> XsdAnyUri | None:
        return self._value if self._variant == "xsd_any_uri" else None

    def as_xsd_string(self) -> str | None:
        return self._value if self._variant == "xsd_string" else None

    def as_base(self) -> "Node | None":
        return self._value if self._variant == "base" else None

    def as_unparsed(self) -> PropertyBag | None:
        return self._value if self._variant == "unparsed" else None

    def kind(self) -> str | None:
        """The nested object's ``type``, for ``base`` and ``unparsed`` only."""
        if self._variant == "base":
            return self._value.type_name
        if self._variant == "unparsed":
            return peek_kind(self._value)
        return None

    def id(self) -> XsdAnyUri | None:
        """The IRI this value refers to or is identified by, if any."""
        if self._variant == "xsd_any_uri":
            return self._value
        if self._variant == "base":
            return self._value.get("id")
        if self._variant == "unparsed":
            raw_id = self._value.get("id")
            if XsdAnyUri.is_valid(raw_id):
                return XsdAnyUri(raw_id)
        return None

    def downcast(self, cls: type["Properties"]) -> Any:
        """Reinterpret a nested object as ``cls``, or return ``None``.

        Works for both ``base`` and ``unparsed`` values, so an object kept
        opaque can still be read through a schema chosen by the caller.
        """
        if self._variant == "base" and isinstance(self._value, cls):
            return self._value
        if self._variant not in ("base", "unparsed"):
            return None
        raw = self._value.into_raw()
        try:
            return cls.from_raw(raw)
        except DeserializationError as exc:
            logger.debug("Downcast to %s failed: %s", cls.__qualname__, exc)
            return None


__all__ = ["AnyBase", "AnyString", "ShapeUnion"]
