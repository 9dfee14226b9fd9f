"""Time utilities for stored records."""

import time


def unix_now() -> int:
    """Return the current Unix time in whole seconds."""
    return int(time.time())
