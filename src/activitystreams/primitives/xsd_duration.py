"""ISO 8601 durations (``xsd:duration``).

Only the ``duration`` field of media objects uses this type, e.g.
``PT4M20S``.  Calendar units are approximated when converting to a
``timedelta``: a year counts as 365 days and a month as 31 days.  Output
always uses days and smaller units, so ``P1Y`` formats as ``P365D``.
A leading minus sign is accepted either before or after the ``P``.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Final

_DURATION: Final[re.Pattern[str]] = re.compile(
    r"(?P<sign>-)?P(?P<inner_sign>-)?"
    r"(?:(?P<years>\d+)Y)?"
    r"(?:(?P<months>\d+)M)?"
    r"(?:(?P<weeks>\d+)W)?"
    r"(?:(?P<days>\d+)D)?"
    r"(?:T"
    r"(?:(?P<hours>\d+)H)?"
    r"(?:(?P<minutes>\d+)M)?"
    r"(?:(?P<seconds>\d+(?:\.\d+)?)S)?"
    r")?"
)

_DAYS_PER_YEAR: Final[int] = 365
_DAYS_PER_MONTH: Final[int] = 31


class InvalidDuration(ValueError):
    """Raised when a string is not an ISO 8601 duration."""

    def __init__(self, value: str, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid duration {value!r}: {reason}")


@dataclass(frozen=True, slots=True, order=True)
class XsdDuration:
    """A signed length of time."""

    value: timedelta

    @classmethod
    def parse(cls, text: str) -> "XsdDuration":
        if not isinstance(text, str):
            raise InvalidDuration(repr(text), "not a string")
        match = _DURATION.fullmatch(text)
        if match is None:
            raise InvalidDuration(text, "does not match PnYnMnDTnHnMnS")
        parts = match.groupdict()
        if parts["sign"] and parts["inner_sign"]:
            raise InvalidDuration(text, "sign given twice")
        units = ("years", "months", "weeks", "days", "hours", "minutes", "seconds")
        if all(parts[unit] is None for unit in units):
            raise InvalidDuration(text, "no components")
        if text.endswith("T"):
            raise InvalidDuration(text, "time designator without components")

        try:
            days = (
                int(parts["years"] or 0) * _DAYS_PER_YEAR
                + int(parts["months"] or 0) * _DAYS_PER_MONTH
                + int(parts["weeks"] or 0) * 7
                + int(parts["days"] or 0)
            )
            duration = timedelta(
                days=days,
                hours=int(parts["hours"] or 0),
                minutes=int(parts["minutes"] or 0),
                seconds=float(parts["seconds"] or 0),
            )
        except (OverflowError, ValueError):
            raise InvalidDuration(text, "out of range") from None
        if parts["sign"] or parts["inner_sign"]:
            duration = -duration
        return cls(duration)

    @property
    def total_seconds(self) -> float:
        return self.value.total_seconds()

    def __str__(self) -> str:
        duration = self.value
        sign = ""
        if duration < timedelta(0):
            sign = "-"
            duration = -duration

        days = duration.days
        hours, remainder = divmod(duration.seconds, 3600)
        minutes, seconds = divmod(remainder, 60)

        text = f"{sign}P"
        if days:
            text += f"{days}D"
        if hours or minutes or seconds or duration.microseconds:
            text += "T"
            if hours:
                text += f"{hours}H"
            if minutes:
                text += f"{minutes}M"
            if duration.microseconds:
                fraction = f"{duration.microseconds:06d}".rstrip("0")
                text += f"{seconds}.{fraction}S"
            elif seconds:
                text += f"{seconds}S"
        if text.endswith("P"):
            text += "T0S"
        return text


__all__ = ["InvalidDuration", "XsdDuration"]
