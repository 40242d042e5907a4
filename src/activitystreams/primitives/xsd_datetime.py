"""RFC 3339 timestamps (``xsd:dateTime``).

``published``, ``updated``, ``startTime`` and friends carry timestamps
with a mandatory UTC offset.  Parsing goes through
``datetime.fromisoformat``; formatting renders UTC as ``Z``.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone


class InvalidDateTime(ValueError):
    """Raised when a string is not an RFC 3339 timestamp."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid date-time {value!r}: {reason}")


@dataclass(frozen=True, slots=True, order=True)
class XsdDateTime:
    """A timezone-aware instant."""

    value: datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None or self.value.utcoffset() is None:
            raise InvalidDateTime(self.value.isoformat(), "missing UTC offset")

    @classmethod
    def parse(cls, text: str) -> "XsdDateTime":
        """Parse an RFC 3339 timestamp such as ``2020-01-01T12:00:00Z``."""
        if not isinstance(text, str):
            raise InvalidDateTime(repr(text), "not a string")
        if "T" not in text and "t" not in text:
            raise InvalidDateTime(text, "missing time component")
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidDateTime(text, str(exc)) from None
        if parsed.tzinfo is None:
            raise InvalidDateTime(text, "missing UTC offset")
        return cls(parsed)

    @classmethod
    def now(cls) -> "XsdDateTime":
        return cls(datetime.now(timezone.utc))

    def __str__(self) -> str:
        text = self.value.isoformat()
        if self.value.utcoffset() == timedelta(0):
            return text.removesuffix("+00:00") + "Z"
        return text


__all__ = ["InvalidDateTime", "XsdDateTime"]
