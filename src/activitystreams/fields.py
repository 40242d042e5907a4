"""Field descriptors and the schemas built from them.

A field-set class declares its known properties as ``Field`` class
attributes::

    class LinkProperties(BaseProperties):
        href = Field("href", UriShape(), functional=True)
        rel = Field("rel", StringShape())

Each ``Field`` is a descriptor: reading ``link.href`` decodes the raw
value held in the owner's property bag, assigning encodes into it, and
``del`` removes it.  The ``Schema`` of a class is every ``Field`` found
along its MRO, base-most first, which fixes the order known fields are
serialized in.
"""
from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from activitystreams.bag import PropertyBag
from activitystreams.errors import MissingRequiredField, UnexpectedShape
from activitystreams.one_or_many import OneOrMany
from activitystreams.shapes import Shape, ShapeError

if TYPE_CHECKING:
    from activitystreams.registry import KindRegistry


class Field:
    """One known property of a field set.

    Parameters
    ----------
    name:
        Canonical wire name, e.g. ``"mediaType"``.
    shape:
        Codec for the field's values.
    functional:
        When True the field holds at most one value and reads back as
        that value; otherwise it reads back as ``OneOrMany``.
    required:
        When True parsing fails with ``MissingRequiredField`` if the
        field is absent.
    aliases:
        Alternative wire names accepted on input (e.g. the Activity
        Streams 1.0 ``displayName`` for ``name``).  They are kept as
        received until the field is written through an accessor.
    """

    __slots__ = ("name", "shape", "functional", "required", "aliases", "attr")

    def __init__(
        self,
        name: str,
        shape: Shape,
        *,
        functional: bool = False,
        required: bool = False,
        aliases: tuple[str, ...] = (),
    ) -> None:
        self.name = name
        self.shape = shape
        self.functional = functional
        self.required = required
        self.aliases = tuple(aliases)
        self.attr = name

    def __set_name__(self, owner: type, attr: str) -> None:
        self.attr = attr

    @property
    def wire_names(self) -> tuple[str, ...]:
        return (self.name, *self.aliases)

    def locate(self, bag: PropertyBag) -> str | None:
        """Return the wire name this field is stored under in ``bag``."""
        for candidate in self.wire_names:
            if candidate in bag:
                return candidate
        return None

    # ------------------------------------------------------------------
    # Codec
    # ------------------------------------------------------------------

    def decode(self, raw: Any, registry: "KindRegistry | None" = None) -> Any:
        """Decode a raw wire value.

        Raises
        ------
        UnexpectedShape
            If ``raw`` (or one of its elements) does not fit the shape.
        """
        try:
            if self.functional:
                return self.shape.decode(raw, registry)
            return OneOrMany.from_raw(raw, lambda item: self.shape.decode(item, registry))
        except ShapeError as exc:
            raise UnexpectedShape(field=self.name, expected=exc.expected, found=exc.found) from None

    def encode(self, value: Any) -> Any:
        """Encode a Python value for storage in a bag.

        Non-functional fields accept a ``OneOrMany``, a list or tuple
        (stored as an array), or a single value (stored bare).

        Raises
        ------
        TypeError
            If ``value`` cannot be assigned to this field.
        """
        try:
            if self.functional:
                return self.shape.encode(self.shape.coerce(value))
            values = value if isinstance(value, OneOrMany) else OneOrMany(value)
            return values.into_raw(lambda item: self.shape.encode(self.shape.coerce(item)))
        except (ValueError, TypeError) as exc:
            raise TypeError(f"cannot assign to {self.name!r}: {exc}") from None

    # ------------------------------------------------------------------
    # Descriptor protocol
    # ------------------------------------------------------------------

    def __get__(self, instance: Any, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance.get(self.name)

    def __set__(self, instance: Any, value: Any) -> None:
        instance.set(self.name, value)

    def __delete__(self, instance: Any) -> None:
        instance.delete(self.name)

    def __repr__(self) -> str:
        flags = []
        if self.functional:
            flags.append("functional")
        if self.required:
            flags.append("required")
        suffix = f", {', '.join(flags)}" if flags else ""
        return f"Field({self.name!r}, {self.shape!r}{suffix})"


class Schema:
    """The ordered known fields of one field-set class."""

    def __init__(self, owner: str, fields: Iterable[Field]) -> None:
        self.owner = owner
        self.fields: tuple[Field, ...] = tuple(fields)
        self._lookup: dict[str, Field] = {}
        for f in self.fields:
            for key in (*f.wire_names, f.attr):
                self._lookup.setdefault(key, f)

    @classmethod
    def for_class(cls, klass: type) -> "Schema":
        """Collect every ``Field`` along ``klass``'s MRO, base-most first.

        A subclass redeclaring a wire name replaces the inherited field in
        its original position.
        """
        collected: dict[str, Field] = {}
        for ancestor in reversed(klass.__mro__):
            for value in vars(ancestor).values():
                if isinstance(value, Field):
                    collected[value.name] = value
        return cls(klass.__qualname__, collected.values())

    def lookup(self, key: str) -> Field | None:
        """Find a field by wire name, alias or Python attribute name."""
        return self._lookup.get(key)

    @property
    def order(self) -> tuple[str, ...]:
        """Every wire name, aliases included, in serialization order."""
        return tuple(name for f in self.fields for name in f.wire_names)

    @property
    def names(self) -> frozenset[str]:
        return frozenset(self.order)

    def validate(self, bag: PropertyBag, registry: "KindRegistry | None" = None) -> None:
        """Check required fields and the shape of every known field present.

        Raises
        ------
        MissingRequiredField
            If a required field is absent.
        UnexpectedShape
            If a present field does not fit its shape.
        """
        for f in self.fields:
            key = f.locate(bag)
            if key is None:
                if f.required:
                    raise MissingRequiredField(field=f.name, schema=self.owner)
                continue
            raw = bag.get(key)
            if raw is not None:
                f.decode(raw, registry)

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __repr__(self) -> str:
        return f"Schema({self.owner!r}, fields={[f.name for f in self.fields]})"


__all__ = ["Field", "Schema"]
