"""Full repaint of the edit line after every event.

Each redraw walks back to the session origin, erases every row the previous
paint occupied (measured against the width *now*, which may differ from the
width it was painted at), paints the prompt and buffer again, and finally
moves the cursor to the logical edit position. Nothing is patched
incrementally, so a prompt of different length or a narrower terminal
between two paints leaves no stale characters. A wider terminal may: rows
that were broken at the old width fit on fewer rows at the new one, and
only those are erased.
"""

from __future__ import annotations

import logging

from msh.line.cursor import CursorModel
from msh.line.terminal import Terminal
from msh.line.utils import visible_length, wrap_extent

logger = logging.getLogger(__name__)


class LineRenderer:
    """Repaints ``prompt + buffer`` relative to a fixed origin."""

    def __init__(self, terminal: Terminal, cursor: CursorModel | None = None) -> None:
        self._terminal = terminal
        self._cursor = cursor if cursor is not None else CursorModel(terminal)
        self._previous = ""

    @property
    def cursor(self) -> CursorModel:
        return self._cursor

    @property
    def active(self) -> bool:
        return self._cursor.active

    @property
    def previous(self) -> str:
        """The exact ``prompt + buffer`` string painted last."""
        return self._previous

    def begin(self) -> None:
        self._cursor.begin()
        self._previous = ""

    def end(self) -> None:
        self._cursor.end()
        self._previous = ""

    def redraw(self, prompt: str, text: str, cursor_index: int) -> None:
        if not self._cursor.active:
            logger.error("redraw requested outside an editing session")
            return

        self._erase_previous()

        self._cursor.write(prompt)
        self._cursor.write(text)
        self._previous = prompt + text

        width = max(self._terminal.columns, 1)
        ty, tx = divmod(visible_length(prompt) + cursor_index, width)
        self._cursor.reset_to_origin()
        self._cursor.move_by(tx, ty)

    def _erase_previous(self) -> None:
        self._cursor.reset_to_origin()
        _, rows = wrap_extent(self._previous, self._terminal.columns)
        for row in range(rows + 1):
            self._terminal.clear_line()
            if row < rows:
                self._cursor.move_by(0, 1)
        self._cursor.reset_to_origin()
