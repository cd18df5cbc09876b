"""
Default collaborators injected into ``BlogService``.

The service only needs a source of unique identifiers and a clock.
Both are plain callables so tests can pass deterministic fakes.
"""

import time
import uuid


def new_id() -> str:
    """Return a fresh random identifier for a blog record."""
    return str(uuid.uuid4())


def now_ns() -> int:
    """Return the current wall-clock time in nanoseconds since the epoch."""
    return time.time_ns()
