"""Typed wrappers over a single property bag.

``Properties`` is the machinery every field set shares: it owns one flat
``PropertyBag`` and exposes the accessor surface (``get``/``set``/``add``/
``take``/``delete``) keyed by wire name, alias or Python attribute name.
Field-set classes subclass it and declare ``Field`` descriptors; their
schema is assembled automatically when the class is created.

``Node`` adds the ``BaseProperties`` field set and an optional ``KIND``.
A concrete vocabulary class fixes ``KIND`` so that parsing rejects
documents carrying any other ``type``::

    class Video(Object, ObjectProperties, Node):
        KIND = Kind("Video")

    video = Video.from_raw({"type": "Video", "duration": "PT4M20S"})
    video.duration          # XsdDuration(value=timedelta(seconds=260))
    video.set("ext:codec", "av1").into_raw()

A bare ``Node`` has no ``KIND`` and parses any JSON object.
"""
from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, ClassVar, Self

from activitystreams.bag import PropertyBag, RawObject, load_json
from activitystreams.errors import MissingRequiredField
from activitystreams.fields import Field, Schema
from activitystreams.kind import TYPE_ALIASES, TYPE_FIELD, Kind
from activitystreams.one_or_many import OneOrMany
from activitystreams.shapes import MediaTypeShape, RawShape, TypeShape, UnionShape, UriShape
from activitystreams.unions import AnyBase, AnyString

if TYPE_CHECKING:
    from activitystreams.registry import KindRegistry


class Properties:
    """Owner of one property bag, projected through a fixed field set.

    Keyword arguments are assigned through ``set`` in the order given.
    """

    schema: ClassVar[Schema]

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        cls.schema = Schema.for_class(cls)

    def __init__(self, **fields: Any) -> None:
        self._bag = PropertyBag()
        self._registry: KindRegistry | None = None
        for name, value in fields.items():
            self.set(name, value)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def from_raw(cls, raw: Any, registry: "KindRegistry | None" = None) -> Self:
        """Build from a decoded JSON object.

        The input is deep-copied; later changes to ``raw`` do not leak
        into the wrapper.  ``registry`` resolves nested typed objects and
        defaults to the builtin vocabulary.

        Raises
        ------
        UnexpectedShape
            If ``raw`` is not an object, or a known field has the wrong
            shape.
        MissingRequiredField
            If a required field is absent.
        KindMismatch
            If the wrapper has a fixed kind and ``type`` differs.
        """
        if isinstance(raw, PropertyBag):
            bag = raw.copy()
        else:
            bag = PropertyBag.from_raw(raw).copy()
        return cls.from_bag(bag, registry)

    @classmethod
    def from_bag(cls, bag: PropertyBag, registry: "KindRegistry | None" = None) -> Self:
        """Adopt ``bag`` without copying it, validating as ``from_raw`` does."""
        cls._check(bag, registry)
        instance = cls.__new__(cls)
        instance._bag = bag
        instance._registry = registry
        return instance

    @classmethod
    def from_json(cls, text: str | bytes, registry: "KindRegistry | None" = None) -> Self:
        return cls.from_bag(PropertyBag.from_raw(load_json(text)), registry)

    @classmethod
    def _check(cls, bag: PropertyBag, registry: "KindRegistry | None") -> None:
        cls.schema.validate(bag, registry)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def into_raw(self) -> RawObject:
        """Flatten into one JSON object: known fields first, then the rest."""
        return self._bag.into_raw(order=self.schema.order)

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.into_raw(), indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def bag(self) -> PropertyBag:
        return self._bag

    @property
    def registry(self) -> "KindRegistry":
        if self._registry is None:
            from activitystreams.registry import default_registry

            return default_registry()
        return self._registry

    def get(self, name: str) -> Any:
        """Return the decoded value of ``name``, or ``None`` when absent.

        Known functional fields decode to a single value, known
        non-functional fields to ``OneOrMany``.  Unknown names return the
        raw JSON value.
        """
        field = self.schema.lookup(name)
        if field is None:
            return self._bag.get(name)
        key = field.locate(self._bag)
        if key is None:
            return None
        raw = self._bag.get(key)
        if raw is None:
            return None
        return field.decode(raw, self.registry)

    def set(self, name: str, value: Any) -> Self:
        """Assign ``name``; ``None`` deletes it.  Returns self for chaining.

        A known field is stored under its canonical wire name, replacing
        any alias it was received under.
        """
        if value is None:
            return self.delete(name)
        field = self.schema.lookup(name)
        if field is None:
            self._bag.set(name, value.into_raw() if isinstance(value, Properties) else value)
            return self
        raw = field.encode(value)
        for alias in field.aliases:
            self._bag.delete(alias)
        self._bag.set(field.name, raw)
        return self

    def add(self, name: str, value: Any) -> Self:
        """Append ``value`` to a non-functional field.  Returns self.

        Raises
        ------
        TypeError
            If ``name`` is a functional field.
        """
        field = self.schema.lookup(name)
        if field is None:
            current = self._bag.get(name)
            if isinstance(value, Properties):
                value = value.into_raw()
            if current is None:
                self._bag.set(name, value)
            elif isinstance(current, list):
                current.append(value)
            else:
                self._bag.set(name, [current, value])
            return self
        if field.functional:
            raise TypeError(f"{field.name!r} is functional and holds at most one value; use set()")
        current = self.get(field.name)
        if current is None:
            return self.set(field.name, OneOrMany.one(value))
        return self.set(field.name, current.add(value))

    def take(self, name: str) -> Any:
        """Remove ``name`` and return its decoded value, or ``None``."""
        value = self.get(name)
        self.delete(name)
        return value

    def delete(self, name: str) -> Self:
        """Remove ``name`` under every wire name it may be stored as."""
        field = self.schema.lookup(name)
        if field is None:
            self._bag.delete(name)
            return self
        for wire_name in field.wire_names:
            self._bag.delete(wire_name)
        return self

    def known_fields(self) -> list[str]:
        """Wire names present in the bag that this schema claims."""
        claimed = self.schema.names
        return [name for name in self._bag if name in claimed]

    def unknown_fields(self) -> list[str]:
        """Wire names present in the bag that no known field claims."""
        claimed = self.schema.names
        return [name for name in self._bag if name not in claimed]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        field = self.schema.lookup(name)
        if field is None:
            return name in self._bag
        return field.locate(self._bag) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Properties):
            return NotImplemented
        return type(self) is type(other) and self._bag == other._bag

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._bag.into_raw(order=self.schema.order)!r})"


Properties.schema = Schema("Properties", ())


class BaseProperties(Properties):
    """Fields every ActivityStreams node may carry."""

    ld_context = Field("@context", RawShape())
    id = Field("id", UriShape(), functional=True, aliases=("@id",))
    kind = Field(TYPE_FIELD, TypeShape(), functional=True, aliases=TYPE_ALIASES)
    name = Field("name", UnionShape(AnyString), aliases=("displayName",))
    media_type = Field("mediaType", MediaTypeShape(), functional=True)
    preview = Field("preview", UnionShape(AnyBase))


class Node(BaseProperties):
    """A JSON-LD node object, optionally pinned to one ``KIND``."""

    KIND: ClassVar[Kind | None] = None

    def __init__(self, **fields: Any) -> None:
        super().__init__()
        if self.KIND is not None:
            self._bag.set(TYPE_FIELD, self.KIND.serialize())
        for name, value in fields.items():
            self.set(name, value)

    @classmethod
    def _check(cls, bag: PropertyBag, registry: "KindRegistry | None") -> None:
        if cls.KIND is not None:
            key = cls.kind.locate(bag)
            if key is None:
                raise MissingRequiredField(field=TYPE_FIELD, schema=cls.__qualname__)
            raw = bag.get(key)
            if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
                # Multi-typed nodes match when any of their types does.
                if cls.KIND.literal not in raw:
                    cls.KIND.deserialize(raw[0] if raw else None)
            else:
                cls.KIND.deserialize(raw)
        super()._check(bag, registry)

    @property
    def type_name(self) -> str | None:
        """The first ``type`` literal, or ``None`` for an untyped node."""
        value = self.get(TYPE_FIELD)
        if isinstance(value, list):
            return value[0]
        return value


__all__ = ["BaseProperties", "Node", "Properties"]
