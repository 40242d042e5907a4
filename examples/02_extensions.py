#!/usr/bin/env python3
"""Example: Extensions: activitystreams

Parse a federated actor into its ActivityStreams and ActivityPub halves,
then add a custom kind of your own.

Usage:
    python examples/02_extensions.py

Requirements:
    pip install activitystreams
"""
from __future__ import annotations

from activitystreams import Kind, Node
from activitystreams.actor import Person
from activitystreams.apub import ApActorProperties
from activitystreams.ext import Ext
from activitystreams.fields import Field
from activitystreams.object import ObjectProperties
from activitystreams.registry import default_registry
from activitystreams.serializer import DocumentSerializer
from activitystreams.shapes import StringShape

ACTOR_JSON = """
{
  "@context": "https://www.w3.org/ns/activitystreams",
  "id": "https://social.example/users/alice",
  "type": "Person",
  "name": "Alice",
  "preferredUsername": "alice",
  "inbox": "https://social.example/users/alice/inbox",
  "outbox": "https://social.example/users/alice/outbox",
  "endpoints": {"sharedInbox": "https://social.example/inbox"}
}
"""


class Emoji(ObjectProperties, Node):
    """A custom emoji, as federated by several microblogging servers."""

    KIND = Kind("Emoji")

    shortcode = Field("shortcode", StringShape(), functional=True)


def main() -> None:
    # Step 1: Split one wire object across two field sets
    actor = Ext.from_json(ACTOR_JSON, base=Person, extension=ApActorProperties)
    print(f"Name: {actor.base.name.as_single()}")
    print(f"Inbox: {actor.extension.inbox}")
    print(f"Shared inbox: {actor.extension.endpoints.shared_inbox}")

    # Step 2: Register a custom kind in a private registry
    registry = default_registry().copy("custom")
    registry.register_class(Emoji)
    serializer = DocumentSerializer(registry=registry, indent=None)

    note = serializer.from_json(
        '{"type": "Note", "content": "hi :blob:",'
        ' "tag": {"type": "Emoji", "shortcode": ":blob:"}}'
    )
    emoji = note.tag.as_single().downcast(Emoji)
    print(f"Tag kind: {type(emoji).__name__}, shortcode={emoji.shortcode}")
    print(serializer.to_json(note))


if __name__ == "__main__":
    main()
