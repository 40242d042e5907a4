#!/usr/bin/env python3
"""Example: Dispatch: activitystreams

Walk an outbox page, dispatching each item on its "type" and falling
back gracefully for kinds nobody registered.

Usage:
    python examples/03_dispatch.py

Requirements:
    pip install activitystreams
"""
from __future__ import annotations

from activitystreams.activity import Create, Follow
from activitystreams.collection import OrderedCollectionPage
from activitystreams.serializer import DocumentSerializer

OUTBOX_PAGE = {
    "type": "OrderedCollectionPage",
    "partOf": "https://social.example/users/alice/outbox",
    "orderedItems": [
        {"type": "Create", "actor": "https://social.example/users/alice",
         "object": {"type": "Note", "content": "Hello"}},
        {"type": "Follow", "object": "https://other.example/users/bob"},
        {"type": "x:Poke", "x:strength": 3},
        "https://social.example/activities/42",
    ],
}


def main() -> None:
    serializer = DocumentSerializer()
    page = serializer.from_dict(OUTBOX_PAGE)
    assert isinstance(page, OrderedCollectionPage)
    print(f"Page of {page.part_of.id()}")

    for item in page.members():
        if item.downcast(Create) is not None:
            note = item.as_base().object.as_single().as_base()
            print(f"  Create: {note.content.as_single()}")
        elif item.downcast(Follow) is not None:
            print(f"  Follow: {item.as_base().object.as_single().id()}")
        elif item.id() is not None and item.kind() is None:
            print(f"  Reference: {item.id()}")
        else:
            print(f"  Unparsed {item.kind()}: {item.into_raw()}")

    print(serializer.to_yaml(page))


if __name__ == "__main__":
    main()
