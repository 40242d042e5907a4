"""Language-tagged strings (``rdf:langString``).

On the wire these are JSON-LD value objects::

    {"@value": "Bonjour", "@language": "fr"}
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class RdfLangString:
    """A string paired with the BCP 47 tag of its language."""

    value: str
    language: str

    @classmethod
    def from_raw(cls, raw: Any) -> "RdfLangString":
        """Build from a ``{"@value", "@language"}`` object.

        Raises
        ------
        ValueError
            If ``raw`` is not an object holding exactly those two string
            members.
        """
        if not isinstance(raw, dict) or set(raw) != {"@value", "@language"}:
            raise ValueError("expected an object with '@value' and '@language'")
        value = raw["@value"]
        language = raw["@language"]
        if not isinstance(value, str) or not isinstance(language, str):
            raise ValueError("'@value' and '@language' must be strings")
        return cls(value=value, language=language)

    def into_raw(self) -> dict[str, str]:
        return {"@value": self.value, "@language": self.language}

    def __str__(self) -> str:
        return f"{self.language}:{self.value}"


__all__ = ["RdfLangString"]
