"""Cardinality union for non-functional properties.

ActivityStreams distinguishes *functional* properties (at most one value)
from non-functional ones, which may appear on the wire either as a bare
value or as an array::

    {"summary": "x"}
    {"summary": ["x", {"@value": "y", "@language": "en"}]}

``OneOrMany`` keeps track of which form was received.  A one-element
array stays an array: ``as_single()`` only answers for a bare value, and
re-serializing reproduces the original shape.
"""
from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


class OneOrMany(Generic[T]):
    """Either one value or a list of values.

    ``OneOrMany(value)`` picks the variant from the Python shape: lists
    and tuples become the many variant, anything else the single one.
    Use ``OneOrMany.one`` to store a list-typed value as a single item.
    """

    __slots__ = ("_items", "_many")

    def __init__(self, value: T | Iterable[T]) -> None:
        if isinstance(value, OneOrMany):
            self._items: list[T] = list(value._items)
            self._many = value._many
        elif isinstance(value, (list, tuple)):
            self._items = list(value)
            self._many = True
        else:
            self._items = [value]  # type: ignore[list-item]
            self._many = False

    @classmethod
    def one(cls, value: T) -> "OneOrMany[T]":
        instance = cls.__new__(cls)
        instance._items = [value]
        instance._many = False
        return instance

    @classmethod
    def many(cls, values: Iterable[T]) -> "OneOrMany[T]":
        instance = cls.__new__(cls)
        instance._items = list(values)
        instance._many = True
        return instance

    # ------------------------------------------------------------------
    # Wire conversion
    # ------------------------------------------------------------------

    @classmethod
    def from_raw(cls, raw: Any, decode: Callable[[Any], T]) -> "OneOrMany[T]":
        """Decode a raw JSON value, element by element for arrays."""
        if isinstance(raw, list):
            return cls.many(decode(item) for item in raw)
        return cls.one(decode(raw))

    def into_raw(self, encode: Callable[[T], Any]) -> Any:
        """Encode back to exactly the variant held."""
        if self._many:
            return [encode(item) for item in self._items]
        return encode(self._items[0])

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def is_single(self) -> bool:
        return not self._many

    @property
    def is_many(self) -> bool:
        return self._many

    def as_single(self) -> T | None:
        """Return the value if it is held as a bare scalar, else ``None``."""
        if self._many:
            return None
        return self._items[0]

    def as_many(self) -> list[T] | None:
        """Return a copy of the list if held as an array, else ``None``."""
        if not self._many:
            return None
        return list(self._items)

    def into_single(self) -> T | None:
        """Return the one value held, or ``None`` if there are several.

        Unlike ``as_single`` this also unwraps a one-element array.
        """
        if len(self._items) == 1:
            return self._items[0]
        return None

    def into_many(self) -> list[T]:
        """Return every value as a new list."""
        return list(self._items)

    def first(self) -> T | None:
        return self._items[0] if self._items else None

    def add(self, value: T) -> "OneOrMany[T]":
        """Append ``value``, turning a single value into a two-element list."""
        self._items.append(value)
        self._many = True
        return self

    def map(self, func: Callable[[T], U]) -> "OneOrMany[U]":
        """Apply ``func`` to every value, keeping the variant."""
        mapped: OneOrMany[U] = OneOrMany.__new__(OneOrMany)
        mapped._items = [func(item) for item in self._items]
        mapped._many = self._many
        return mapped

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OneOrMany):
            return NotImplemented
        return self._many == other._many and self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        if self._many:
            return f"OneOrMany.many({self._items!r})"
        return f"OneOrMany.one({self._items[0]!r})"


__all__ = ["OneOrMany"]
