"""Terminal text utilities: escape-aware length measurement and wrap simulation.

Every byte of the edit line is treated as one terminal column. SGR escape
runs (``ESC`` up to and including the first ``m``) take no columns at all.
"""

from __future__ import annotations

import re

ESC = "\x1b"

# An escape run starts at ESC and ends at (and includes) the first "m".
_SGR_RUN_RE = re.compile(r"\x1b[^m]*m?")


# ---------------------------------------------------------------------------
# Visible length
# ---------------------------------------------------------------------------


def strip_ansi(text: str) -> str:
    """Remove every SGR escape run from *text*."""
    if ESC not in text:
        return text
    return _SGR_RUN_RE.sub("", text)


def visible_length(text: str) -> int:
    """Return the number of columns *text* occupies when printed.

    Bytes inside an escape run are not counted. An unterminated run hides
    everything up to the end of the string.
    """
    return len(strip_ansi(text))


def is_printable(code: int) -> bool:
    """Check whether a byte value is a printable ASCII character."""
    return 0x20 <= code <= 0x7E


# ---------------------------------------------------------------------------
# Wrap simulation
# ---------------------------------------------------------------------------


def iter_visible(text: str):
    """Yield ``(char, visible)`` pairs for every character of *text*.

    ``visible`` is ``False`` for characters that belong to an escape run.
    """
    escaped = False
    for ch in text:
        if ch == ESC:
            escaped = True
        yield ch, not escaped
        if escaped and ch == "m":
            escaped = False


def wrap_extent(text: str, width: int, start_x: int = 0) -> tuple[int, int]:
    """Simulate printing *text* from column *start_x* on a *width*-column row.

    ``"\\n"`` returns to column 0 of the next row; any other visible
    character advances one column and wraps to the next row on reaching
    *width*. Returns the final ``(x, y)`` with ``y`` counted from the row
    printing started on.
    """
    width = max(width, 1)
    x, y = start_x, 0
    for ch, visible in iter_visible(text):
        if not visible:
            continue
        if ch == "\n":
            x = 0
            y += 1
            continue
        x += 1
        if x >= width:
            x = 0
            y += 1
    return x, y
