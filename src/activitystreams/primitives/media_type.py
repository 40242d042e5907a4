"""MIME media types (``mediaType``), e.g. ``video/webm`` or
``text/html; charset=utf-8``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Final

# RFC 7230 token characters
_TOKEN: Final[re.Pattern[str]] = re.compile(r"[!#$%&'*+.^_`|~0-9A-Za-z\-]+")


class InvalidMediaType(ValueError):
    """Raised when a string is not a ``type/subtype`` media type."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid media type {value!r}: {reason}")


@dataclass(frozen=True, slots=True)
class MimeMediaType:
    """A parsed media type.

    Parameters
    ----------
    type:
        Top-level type, lower-cased (``video``).
    subtype:
        Subtype, lower-cased (``webm``).
    params:
        ``(name, value)`` parameter pairs in their original order; names
        are lower-cased, values kept as written without quotes.
    """

    type: str
    subtype: str
    params: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def parse(cls, text: str) -> "MimeMediaType":
        if not isinstance(text, str):
            raise InvalidMediaType(repr(text), "not a string")
        essence, *raw_params = text.split(";")
        top, sep, sub = essence.strip().partition("/")
        if not sep or not _TOKEN.fullmatch(top) or not _TOKEN.fullmatch(sub):
            raise InvalidMediaType(text, "expected type/subtype")

        params: list[tuple[str, str]] = []
        for raw in raw_params:
            raw = raw.strip()
            if not raw:
                continue
            name, eq, value = raw.partition("=")
            name = name.strip()
            value = value.strip()
            if not eq or not _TOKEN.fullmatch(name):
                raise InvalidMediaType(text, f"bad parameter {raw!r}")
            if len(value) >= 2 and value[0] == value[-1] == '"':
                value = value[1:-1]
            elif not _TOKEN.fullmatch(value):
                raise InvalidMediaType(text, f"bad parameter value {value!r}")
            params.append((name.lower(), value))
        return cls(top.lower(), sub.lower(), tuple(params))

    @property
    def essence(self) -> str:
        """``type/subtype`` without parameters."""
        return f"{self.type}/{self.subtype}"

    def param(self, name: str) -> str | None:
        name = name.lower()
        for key, value in self.params:
            if key == name:
                return value
        return None

    def __str__(self) -> str:
        rendered = [self.essence]
        for key, value in self.params:
            if _TOKEN.fullmatch(value):
                rendered.append(f"{key}={value}")
            else:
                rendered.append(f'{key}="{value}"')
        return "; ".join(rendered)


__all__ = ["InvalidMediaType", "MimeMediaType"]
