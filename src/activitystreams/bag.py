"""The property bag: one JSON object level held as raw values.

Every typed wrapper in this package owns exactly one ``PropertyBag``.
Known fields are projected out of it on demand by field descriptors;
everything else stays in the bag untouched, so a document always
re-serializes with every field it arrived with.

Usage
-----
::

    from activitystreams.bag import PropertyBag

    bag = PropertyBag.from_json('{"type": "Note", "ext:mood": "calm"}')
    bag.set("content", "hello").delete("ext:mood")
    bag.into_raw(order=("type", "content"))
"""
from __future__ import annotations

import copy
import json
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from activitystreams.errors import MalformedJson, UnexpectedShape, json_type_name

JsonValue = Any
RawObject = dict[str, JsonValue]


class PropertyBag:
    """An insertion-ordered mapping from field name to raw JSON value.

    Parameters
    ----------
    fields:
        Optional initial contents.  The mapping is copied; the bag never
        aliases caller-owned containers at the top level.
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Mapping[str, JsonValue] | None = None) -> None:
        self._fields: RawObject = dict(fields) if fields else {}

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    @classmethod
    def from_raw(cls, raw: object) -> "PropertyBag":
        """Wrap an already decoded JSON value.

        Raises
        ------
        UnexpectedShape
            If ``raw`` is not a JSON object.
        """
        if not isinstance(raw, dict):
            raise UnexpectedShape(field=None, expected="object", found=json_type_name(raw))
        for key in raw:
            if not isinstance(key, str):
                raise UnexpectedShape(field=None, expected="object with string keys", found="object")
        return cls(raw)

    @classmethod
    def from_json(cls, text: str | bytes) -> "PropertyBag":
        """Decode JSON text into a bag.

        Raises
        ------
        MalformedJson
            If ``text`` is not valid JSON.
        UnexpectedShape
            If the text decodes to something other than an object.
        """
        return cls.from_raw(load_json(text))

    # ------------------------------------------------------------------
    # Field operations
    # ------------------------------------------------------------------

    def get(self, name: str) -> JsonValue | None:
        """Return the raw value stored under ``name``, or ``None``."""
        return self._fields.get(name)

    def set(self, name: str, value: JsonValue) -> "PropertyBag":
        """Insert or overwrite ``name``; returns the bag for chaining."""
        self._fields[name] = value
        return self

    def take(self, name: str) -> JsonValue | None:
        """Remove ``name`` and return its raw value, or ``None``."""
        return self._fields.pop(name, None)

    def delete(self, name: str) -> "PropertyBag":
        """Remove ``name`` if present; returns the bag for chaining."""
        self._fields.pop(name, None)
        return self

    def split(self, names: Iterable[str]) -> "PropertyBag":
        """Move every field in ``names`` into a new bag and return it.

        Fields keep their original relative order in both bags.
        """
        wanted = set(names)
        moved = PropertyBag()
        for name in [key for key in self._fields if key in wanted]:
            moved._fields[name] = self._fields.pop(name)
        return moved

    def merge(self, other: "PropertyBag") -> "PropertyBag":
        """Copy every field of ``other`` into this bag, overwriting."""
        self._fields.update(other._fields)
        return self

    def copy(self) -> "PropertyBag":
        """Return a deep copy."""
        return PropertyBag(copy.deepcopy(self._fields))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def into_raw(self, order: Iterable[str] = ()) -> RawObject:
        """Flatten into a plain dict.

        Names listed in ``order`` that are present come first, in that
        order; every other field follows in its original relative order.
        The result is a deep copy and may be mutated freely.
        """
        result: RawObject = {}
        for name in order:
            if name in self._fields and name not in result:
                result[name] = copy.deepcopy(self._fields[name])
        for name, value in self._fields.items():
            if name not in result:
                result[name] = copy.deepcopy(value)
        return result

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self._fields, indent=indent, ensure_ascii=False)

    # ------------------------------------------------------------------
    # Mapping protocol
    # ------------------------------------------------------------------

    def keys(self) -> list[str]:
        return list(self._fields)

    def items(self) -> list[tuple[str, JsonValue]]:
        return list(self._fields.items())

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PropertyBag):
            return NotImplemented
        return self._fields == other._fields

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PropertyBag({self._fields!r})"


def load_json(text: str | bytes) -> JsonValue:
    """Decode JSON text, mapping decoder failures to ``MalformedJson``."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MalformedJson(message=exc.msg, line=exc.lineno, col=exc.colno) from None
    except UnicodeDecodeError as exc:
        raise MalformedJson(message=str(exc)) from None
    except TypeError as exc:
        raise MalformedJson(message=str(exc)) from None
    except RecursionError:
        raise MalformedJson(message="document nested too deeply") from None


__all__ = ["JsonValue", "PropertyBag", "RawObject", "load_json"]
