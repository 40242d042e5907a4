"""Shared test fixtures for activitystreams.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
domain-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest

from activitystreams.registry import KindRegistry, default_registry


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "activitystreams"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def registry() -> KindRegistry:
    """A private copy of the builtin registry that tests may mutate."""
    return default_registry().copy("test")


@pytest.fixture()
def video_raw() -> dict[str, Any]:
    """A video document with known, aliased and unknown fields."""
    return {
        "@context": "https://www.w3.org/ns/activitystreams",
        "type": "Video",
        "id": "https://example.com/videos/1",
        "displayName": "Intro",
        "x:codec": "av1",
        "duration": "PT4M20S",
        "summary": ["A short clip"],
        "x:chapters": [{"t": 0}, {"t": 60}],
    }


@pytest.fixture()
def actor_raw() -> dict[str, Any]:
    """A federated actor: ActivityStreams and ActivityPub fields in one object."""
    return {
        "@context": [
            "https://www.w3.org/ns/activitystreams",
            "https://w3id.org/security/v1",
        ],
        "id": "https://social.example/users/alice",
        "type": "Person",
        "name": "Alice",
        "preferredUsername": "alice",
        "inbox": "https://social.example/users/alice/inbox",
        "outbox": "https://social.example/users/alice/outbox",
        "followers": "https://social.example/users/alice/followers",
        "endpoints": {"sharedInbox": "https://social.example/inbox"},
        "publicKey": {
            "id": "https://social.example/users/alice#main-key",
            "owner": "https://social.example/users/alice",
            "publicKeyPem": "-----BEGIN PUBLIC KEY-----...",
        },
    }


@pytest.fixture()
def write_document(tmp_path: Path):
    """Return a helper that writes text to a file under ``tmp_path``."""

    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
