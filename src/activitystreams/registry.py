"""Kind registry: the table that maps ``type`` literals to wrapper classes.

Shape unions and the document serializer consult a registry whenever they
meet a nested object, so registering a class is all it takes to make a
third-party vocabulary parse as typed values instead of opaque bags.
Packages can also contribute kinds lazily by declaring entry-points in
the ``"activitystreams.kinds"`` group.

Example
-------
Register a custom kind with the decorator::

    from activitystreams import Kind, Node, ObjectProperties
    from activitystreams.registry import kinds

    @kinds.register()
    class Emoji(ObjectProperties, Node):
        KIND = Kind("Emoji")

Load every installed vocabulary via entry-points::

    kinds.load_entrypoints()

Resolve a raw document::

    cls = kinds.resolve({"type": "Emoji", "name": ":blob:"})
"""
from __future__ import annotations

import importlib
import importlib.metadata
import logging
from collections.abc import Callable
from typing import Any, Final

from activitystreams.kind import peek_kinds
from activitystreams.node import Node

logger = logging.getLogger(__name__)

DEFAULT_ENTRYPOINT_GROUP: Final[str] = "activitystreams.kinds"

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "activitystreams.object",
    "activitystreams.link",
    "activitystreams.actor",
    "activitystreams.activity",
    "activitystreams.collection",
)


class UnknownKindError(KeyError):
    """Raised when a requested kind literal is not in the registry."""

    def __init__(self, kind: str, registry_name: str) -> None:
        self.kind = kind
        self.registry_name = registry_name
        super().__init__(
            f"Kind {kind!r} is not registered in the {registry_name!r} registry. "
            "Check that the vocabulary is imported or its entry-points are declared."
        )


class KindAlreadyRegisteredError(ValueError):
    """Raised when attempting to register a kind literal that already exists."""

    def __init__(self, kind: str, registry_name: str) -> None:
        self.kind = kind
        self.registry_name = registry_name
        super().__init__(
            f"Kind {kind!r} is already registered in the {registry_name!r} registry. "
            "Deregister the existing entry first to replace it."
        )


def _literal_for(cls: Any, kind: str | None) -> str:
    if not (isinstance(cls, type) and issubclass(cls, Node)):
        raise TypeError(f"Cannot register {cls!r}: it must be a subclass of Node.")
    if kind is not None:
        return kind
    if cls.KIND is None:
        raise TypeError(
            f"Cannot register {cls.__qualname__}: it declares no KIND and no "
            "explicit kind was given."
        )
    return cls.KIND.literal


class KindRegistry:
    """Mutable mapping from kind literal to ``Node`` subclass.

    Parameters
    ----------
    name:
        A human-readable name for this registry (used in error messages).
    """

    def __init__(self, name: str = "kinds") -> None:
        self._name = name
        self._kinds: dict[str, type[Node]] = {}

    @property
    def name(self) -> str:
        return self._name

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(self, kind: str | None = None) -> Callable[[type[Node]], type[Node]]:
        """Return a class decorator that registers the decorated class.

        Parameters
        ----------
        kind:
            The literal to register under.  Defaults to the class's own
            ``KIND``.

        Raises
        ------
        KindAlreadyRegisteredError
            If the literal is already in use in this registry.
        TypeError
            If the decorated class is not a ``Node`` subclass, or has no
            ``KIND`` and no explicit ``kind`` was passed.
        """

        def decorator(cls: type[Node]) -> type[Node]:
            self.register_class(cls, kind)
            return cls

        return decorator

    def register_class(self, cls: type[Node], kind: str | None = None) -> None:
        """Register ``cls`` directly without the decorator syntax."""
        literal = _literal_for(cls, kind)
        if literal in self._kinds:
            raise KindAlreadyRegisteredError(literal, self._name)
        self._kinds[literal] = cls
        logger.debug("Registered kind %r -> %s in registry %r", literal, cls.__qualname__, self._name)

    def deregister(self, kind: str) -> None:
        """Remove ``kind`` from the registry.

        Raises
        ------
        UnknownKindError
            If ``kind`` is not currently registered.
        """
        if kind not in self._kinds:
            raise UnknownKindError(kind, self._name)
        del self._kinds[kind]
        logger.debug("Deregistered kind %r from registry %r", kind, self._name)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get(self, kind: str) -> type[Node]:
        """Return the class registered under ``kind``.

        Raises
        ------
        UnknownKindError
            If nothing is registered under ``kind``.
        """
        try:
            return self._kinds[kind]
        except KeyError:
            raise UnknownKindError(kind, self._name) from None

    def find(self, kind: str | None) -> type[Node] | None:
        """Like ``get`` but returns ``None`` for unknown or missing kinds."""
        if kind is None:
            return None
        return self._kinds.get(kind)

    def resolve(self, raw: Any) -> type[Node] | None:
        """Peek at a raw object's ``type`` and return its registered class.

        For a multi-typed object the first registered literal wins.
        """
        for literal in peek_kinds(raw):
            cls = self._kinds.get(literal)
            if cls is not None:
                return cls
        return None

    def list_kinds(self) -> list[str]:
        """Return every registered literal in alphabetical order."""
        return sorted(self._kinds)

    def copy(self, name: str | None = None) -> "KindRegistry":
        """Return an independent registry with the same entries."""
        clone = KindRegistry(name or self._name)
        clone._kinds = dict(self._kinds)
        return clone

    def __contains__(self, kind: object) -> bool:
        return kind in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)

    def __repr__(self) -> str:
        return f"KindRegistry(name={self._name!r}, kinds={len(self._kinds)})"

    # ------------------------------------------------------------------
    # Entry-point loading
    # ------------------------------------------------------------------

    def load_entrypoints(self, group: str = DEFAULT_ENTRYPOINT_GROUP) -> None:
        """Discover and register kinds declared as package entry-points.

        Each entry-point value must resolve to a ``Node`` subclass and is
        registered under the entry-point name.  Names that are already
        registered are skipped, so repeated calls are idempotent.

        Example
        -------
        In a downstream package's ``pyproject.toml``::

            [project.entry-points."activitystreams.kinds"]
            Emoji = "my_vocab.emoji:Emoji"
        """
        for ep in importlib.metadata.entry_points(group=group):
            if ep.name in self._kinds:
                logger.debug("Entry-point %r already registered in %r; skipping.", ep.name, self._name)
                continue
            try:
                cls = ep.load()
            except Exception:
                logger.exception("Failed to load entry-point %r from group %r; skipping.", ep.name, group)
                continue
            try:
                self.register_class(cls, ep.name)
            except (KindAlreadyRegisteredError, TypeError):
                logger.warning(
                    "Entry-point %r loaded but could not be registered in registry %r; skipping.",
                    ep.name,
                    self._name,
                )


# Populated by the builtin vocabulary modules as they are imported.
kinds = KindRegistry("activitystreams")

_builtins_loaded = False


def default_registry() -> KindRegistry:
    """Return the shared registry with the builtin vocabulary loaded."""
    global _builtins_loaded
    if not _builtins_loaded:
        for module in _BUILTIN_MODULES:
            importlib.import_module(module)
        _builtins_loaded = True
    return kinds


__all__ = [
    "DEFAULT_ENTRYPOINT_GROUP",
    "KindAlreadyRegisteredError",
    "KindRegistry",
    "UnknownKindError",
    "default_registry",
    "kinds",
]
