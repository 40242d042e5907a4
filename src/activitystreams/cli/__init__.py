"""CLI package.

The ``cli`` sub-package contains the Click application for inspecting,
checking and converting ActivityStreams documents.  It imports only from
the public API of the parent package and its vocabulary modules.
"""
from __future__ import annotations
