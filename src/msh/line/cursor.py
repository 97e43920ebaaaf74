"""Believed on-screen cursor position, tracked without querying the terminal.

The model's origin ``(0, 0)`` is wherever the terminal cursor was when the
session began. Everything written through :meth:`CursorModel.write` is
replayed against the current width so the model follows the terminal's own
wrapping, and all movement is issued as relative escape sequences.
"""

from __future__ import annotations

import logging

from msh.line.terminal import Terminal
from msh.line.utils import iter_visible

logger = logging.getLogger(__name__)

_CURSOR_RIGHT_FMT = "\x1b[{}C"
_CURSOR_LEFT_FMT = "\x1b[{}D"
_CURSOR_DOWN_FMT = "\x1b[{}B"
_CURSOR_UP_FMT = "\x1b[{}A"

_UNINITIALIZED = "cursor control is uninitialized"


class CursorModel:
    """Tracks ``(x, y)`` relative to the session origin."""

    def __init__(self, terminal: Terminal) -> None:
        self._terminal = terminal
        self._active = False
        self._x = 0
        self._y = 0

    # -- session ------------------------------------------------------------

    def begin(self) -> None:
        """Fix the origin at the current terminal cursor."""
        self._active = True
        self._x = 0
        self._y = 0

    def end(self) -> None:
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    @property
    def x(self) -> int:
        if not self._active:
            logger.error(_UNINITIALIZED)
            return 0
        return self._x

    @property
    def y(self) -> int:
        if not self._active:
            logger.error(_UNINITIALIZED)
            return 0
        return self._y

    # -- output -------------------------------------------------------------

    def write(self, text: str) -> None:
        """Print *text* and advance the model as the terminal would.

        A visible character landing in the last column is followed by an
        explicit line break so the terminal never sits in its pending-wrap
        state.
        """
        if not self._active:
            logger.error(_UNINITIALIZED)
            return
        width = max(self._terminal.columns, 1)
        out: list[str] = []
        for ch, visible in iter_visible(text):
            out.append(ch)
            if not visible:
                continue
            if ch == "\n":
                self._x = 0
                self._y += 1
            elif self._x >= width - 1:
                out.append("\r\n")
                self._x = 0
                self._y += 1
            else:
                self._x += 1
        self._terminal.write("".join(out))

    def move_by(self, dx: int, dy: int) -> None:
        """Move the cursor relative to its current position."""
        if not self._active:
            logger.error(_UNINITIALIZED)
            return
        # A zero count still moves one cell, so zero components are skipped.
        seq = ""
        if dx > 0:
            seq += _CURSOR_RIGHT_FMT.format(dx)
        elif dx < 0:
            seq += _CURSOR_LEFT_FMT.format(-dx)
        if dy > 0:
            seq += _CURSOR_DOWN_FMT.format(dy)
        elif dy < 0:
            seq += _CURSOR_UP_FMT.format(-dy)
        if seq:
            self._terminal.write(seq)
        self._x += dx
        self._y += dy

    def reset_to_origin(self) -> None:
        self.move_by(-self.x, -self.y)
