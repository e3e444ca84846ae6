from __future__ import annotations

import os
import sys

# Terminals that cannot address the cursor.
_DUMB_TERMS = frozenset({"dumb", "unknown"})


def is_tty_available() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def supports_fullscreen_ui() -> bool:
    """A full-screen sheet needs a TTY on both ends and a cursor-capable TERM."""
    if not is_tty_available():
        return False
    return os.environ.get("TERM", "").lower() not in _DUMB_TERMS
