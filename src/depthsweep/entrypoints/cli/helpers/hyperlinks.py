"""OSC-8 hyperlinks for the DEPTHSWEEP CLI help epilog.

Renders a URL as a clickable terminal link when the output stream looks like
a terminal known to understand OSC-8, and as the bare URL otherwise.
"""

import os
import sys
from typing import TextIO

_OSC8_TERM_PROGRAMS = frozenset(
    {"apple_terminal", "vscode", "iterm.app", "wezterm", "kitty"}
)
_OSC8_TERM_PREFIXES = ("alacritty", "konsole")


def supports_osc8(stream: TextIO | None = None) -> bool:
    """Best-effort guess whether ``stream`` renders OSC-8 hyperlinks.

    Non-TTY streams (pipes, files, Click's test runner) never do. For TTYs the
    decision is based on ``TERM_PROGRAM``, ``TERM``, and the session variables
    set by Windows Terminal (``WT_SESSION``) and VTE terminals (``VTE_VERSION``).
    """
    stream = stream or sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None or not isatty():
        return False
    if (os.getenv("TERM_PROGRAM") or "").lower() in _OSC8_TERM_PROGRAMS:
        return True
    if os.getenv("WT_SESSION") or os.getenv("VTE_VERSION"):
        return True
    return os.getenv("TERM", "").startswith(_OSC8_TERM_PREFIXES)


def hyperlink(url: str) -> str:
    """Wrap ``url`` in a BEL-terminated OSC-8 sequence when supported."""
    if not supports_osc8():
        return url
    return f"\x1b]8;;{url}\x07{url}\x1b]8;;\x07"
