"""Absolute URI references (``xsd:anyURI``).

Identifiers, links and collection pointers in ActivityStreams documents
are absolute IRIs such as ``https://example.com/notes/1`` or
``acct:alice@example.com``.  ``XsdAnyUri`` validates that shape with
``urllib.parse`` and otherwise keeps the text exactly as received so that
documents re-serialize byte for byte.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Final
from urllib.parse import SplitResult, urlsplit

_SCHEME: Final[re.Pattern[str]] = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*")
_FORBIDDEN: Final[re.Pattern[str]] = re.compile(r"[\s<>\"{}|\\^`\x00-\x1f\x7f]")


class InvalidUri(ValueError):
    """Raised when a string is not an absolute URI reference."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid URI {value!r}: {reason}")


@dataclass(frozen=True, slots=True)
class XsdAnyUri:
    """An absolute URI reference, stored verbatim.

    Parameters
    ----------
    value:
        The URI text.  Use ``XsdAnyUri.parse`` to build a validated
        instance from untrusted input.
    """

    value: str

    @classmethod
    def parse(cls, text: str) -> "XsdAnyUri":
        """Validate ``text`` as an absolute URI and wrap it.

        Raises
        ------
        InvalidUri
            If ``text`` has no scheme, contains characters that are never
            legal in a URI, or has nothing after the scheme.
        """
        if not isinstance(text, str):
            raise InvalidUri(repr(text), "not a string")
        if _FORBIDDEN.search(text):
            raise InvalidUri(text, "contains whitespace or forbidden characters")
        scheme, sep, rest = text.partition(":")
        if not sep or not _SCHEME.fullmatch(scheme):
            raise InvalidUri(text, "missing scheme")
        if not rest:
            raise InvalidUri(text, "empty after scheme")
        try:
            urlsplit(text)
        except ValueError as exc:
            raise InvalidUri(text, str(exc)) from None
        return cls(text)

    @classmethod
    def is_valid(cls, text: object) -> bool:
        """Return True if ``text`` would be accepted by ``parse``."""
        if not isinstance(text, str):
            return False
        try:
            cls.parse(text)
        except InvalidUri:
            return False
        return True

    @property
    def parts(self) -> SplitResult:
        """The URI split into scheme, netloc, path, query and fragment."""
        return urlsplit(self.value)

    @property
    def scheme(self) -> str:
        return self.parts.scheme

    @property
    def host(self) -> str | None:
        return self.parts.hostname

    @property
    def path(self) -> str:
        return self.parts.path

    def __str__(self) -> str:
        return self.value


__all__ = ["InvalidUri", "XsdAnyUri"]
