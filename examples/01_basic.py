#!/usr/bin/env python3
"""Example: Basic: activitystreams

Build a Video, serialize it to JSON and parse it back.

Usage:
    python examples/01_basic.py

Requirements:
    pip install activitystreams
"""
from __future__ import annotations

from datetime import timedelta

import activitystreams
from activitystreams.object import Video


def main() -> None:
    print(f"activitystreams version: {activitystreams.__version__}")

    # Step 1: Build a video with typed setters
    video = Video()
    (
        video.set("@context", str(activitystreams.context()))
        .set("id", "https://example.com/@example/lions")
        .set("url", "https://example.com/@example/lions/video.webm")
        .set("name", "My Cool Video")
        .set("summary", "A video about some cool lions")
        .set("mediaType", "video/webm")
        .set("duration", timedelta(minutes=4, seconds=20))
    )
    print(f"Video: {video!r}")

    # Step 2: Serialize
    text = activitystreams.dumps(video)
    print(f"json: {text}")

    # Step 3: Parse it back; dispatch picks Video from "type"
    again = activitystreams.parse(text)
    print(f"Video again: {again!r}")
    print(f"Equal after round trip: {again == video}")
    print(f"Duration: {again.duration.value}")


if __name__ == "__main__":
    main()
