"""Pairing a base wrapper with an independently defined extension.

An ActivityPub actor is one flat JSON object, but its fields come from
two vocabularies: the ActivityStreams ``Person`` fields and the
ActivityPub ``inbox``/``outbox``/... fields.  ``Ext`` keeps them in two
wrappers and splits or merges them at the wire boundary::

    ext = Ext.from_raw(raw, base=Person, extension=ApActorProperties)
    ext.base.name
    ext.extension.inbox
    ext.into_raw() == raw    # same fields, base first

The extension's declared names move to the extension wrapper; every
other field, unknown ones included, stays with the base.  The two field
sets must not overlap, which is checked once per class pair.
"""
from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from activitystreams.bag import PropertyBag, RawObject, load_json
from activitystreams.errors import ExtensionFieldConflict
from activitystreams.node import Properties

if TYPE_CHECKING:
    from activitystreams.registry import KindRegistry

logger = logging.getLogger(__name__)

B = TypeVar("B", bound=Properties)
E = TypeVar("E", bound=Properties)


@lru_cache(maxsize=None)
def check_disjoint(base: type[Properties], extension: type[Properties]) -> frozenset[str]:
    """Verify two field sets share no wire names; return the extension's names.

    Raises
    ------
    ExtensionFieldConflict
        If any wire name (aliases included) is declared by both.
    """
    base_names = base.schema.names
    extension_names = extension.schema.names
    overlap = base_names & extension_names
    if overlap:
        raise ExtensionFieldConflict(
            base=base.__qualname__,
            extension=extension.__qualname__,
            fields=tuple(sorted(overlap)),
        )
    logger.debug("Extension %s is disjoint from %s", extension.__qualname__, base.__qualname__)
    return extension_names


class Ext(Generic[B, E]):
    """A base wrapper and an extension wrapper sharing one wire object.

    Parameters
    ----------
    base:
        The primary wrapper, e.g. a ``Person``.
    extension:
        The extension field set, e.g. ``ApActorProperties``.
    """

    __slots__ = ("_base", "_extension")

    def __init__(self, base: B, extension: E) -> None:
        check_disjoint(type(base), type(extension))
        self._base = base
        self._extension = extension

    @classmethod
    def from_raw(
        cls,
        raw: Any,
        *,
        base: type[B],
        extension: type[E],
        registry: "KindRegistry | None" = None,
    ) -> "Ext[B, E]":
        """Parse one JSON object into a base and an extension wrapper.

        Raises
        ------
        DeserializationError
            Whatever the base or extension parse raises.
        ExtensionFieldConflict
            If the two field sets overlap.
        """
        extension_names = check_disjoint(base, extension)
        remainder = PropertyBag.from_raw(raw).copy()
        moved = remainder.split(extension_names)
        return cls(base.from_bag(remainder, registry), extension.from_bag(moved, registry))

    @classmethod
    def from_json(
        cls,
        text: str | bytes,
        *,
        base: type[B],
        extension: type[E],
        registry: "KindRegistry | None" = None,
    ) -> "Ext[B, E]":
        return cls.from_raw(load_json(text), base=base, extension=extension, registry=registry)

    @property
    def base(self) -> B:
        return self._base

    @property
    def extension(self) -> E:
        return self._extension

    def into_raw(self) -> RawObject:
        """Merge both halves into one object, base fields first."""
        merged = self._base.into_raw()
        extension_raw = self._extension.into_raw()
        shadowed = [name for name in extension_raw if name in merged]
        if shadowed:
            logger.debug(
                "Base fields %s are shadowed by %s fields.", shadowed, type(self._extension).__name__
            )
        merged.update(extension_raw)
        return merged

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.into_raw(), indent=indent, ensure_ascii=False)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ext):
            return NotImplemented
        return self._base == other._base and self._extension == other._extension

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ext(base={self._base!r}, extension={self._extension!r})"


__all__ = ["Ext", "check_disjoint"]
