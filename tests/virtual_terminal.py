"""Virtual terminal for testing -- implements the Terminal protocol in-memory.

This module provides a ``VirtualTerminal`` class that satisfies the
``msh.line.terminal.Terminal`` protocol without performing any real I/O.
Scripted input bytes are replayed by ``read_byte``, all output is captured
for assertions, and a small screen model interprets the output so tests can
check what is actually visible and where the cursor ended up.
"""

from __future__ import annotations

import re
from collections import deque
from typing import Callable

_CSI_RE = re.compile(r"\x1b\[([0-9;]*)([A-Za-z])")


class VirtualTerminal:
    """In-memory terminal that records all writes for test inspection.

    Parameters
    ----------
    columns:
        Number of terminal columns (width).
    input:
        Bytes (or an ASCII string) returned one at a time by ``read_byte``.
    """

    def __init__(self, columns: int = 80, input: bytes | str = b"") -> None:
        self._columns = columns
        self._input: deque[int] = deque()
        self._buffer: list[str] = []
        self.raw = False
        self.raw_enter_count = 0
        self.raw_leave_count = 0
        self.on_idle: Callable[[VirtualTerminal], None] | None = None
        self.feed(input)

        # Screen model: row -> {col: char}
        self._screen: dict[int, dict[int, str]] = {}
        self.row = 0
        self.col = 0
        self._pending_wrap = False

    # -- Terminal protocol: properties --------------------------------------

    @property
    def columns(self) -> int:
        return self._columns

    @columns.setter
    def columns(self, value: int) -> None:
        self._columns = value

    # -- Terminal protocol: raw mode ----------------------------------------

    def enter_raw_mode(self) -> None:
        self.raw = True
        self.raw_enter_count += 1

    def leave_raw_mode(self) -> None:
        self.raw = False
        self.raw_leave_count += 1

    # -- Terminal protocol: I/O ---------------------------------------------

    def read_byte(self) -> int | None:
        """Pop the next scripted byte; ``None`` once input is exhausted.

        When the queue runs dry ``on_idle`` is called first, which may
        inspect state or feed more input.
        """
        if not self._input and self.on_idle is not None:
            callback = self.on_idle
            self.on_idle = None
            callback(self)
        if not self._input:
            return None
        return self._input.popleft()

    def write(self, data: str) -> None:
        """Append *data* to the output log and apply it to the screen."""
        self._buffer.append(data)
        self._interpret(data)

    def clear_line(self) -> None:
        self.write("\x1b[2K")

    # -- Test helpers -------------------------------------------------------

    def feed(self, data: bytes | str) -> None:
        if isinstance(data, str):
            data = data.encode("latin-1")
        self._input.extend(data)

    @property
    def output(self) -> str:
        """Return everything written to the terminal as a single string."""
        return "".join(self._buffer)

    def clear_buffer(self) -> None:
        """Discard all recorded output (the screen model is kept)."""
        self._buffer.clear()

    def screen_lines(self) -> list[str]:
        """Visible text per row, from row 0 down to the last touched row."""
        if not self._screen:
            return []
        last = max(self._screen)
        lines = []
        for r in range(last + 1):
            cells = self._screen.get(r, {})
            if not cells:
                lines.append("")
                continue
            width = max(cells) + 1
            lines.append("".join(cells.get(c, " ") for c in range(width)).rstrip())
        while lines and not lines[-1]:
            lines.pop()
        return lines

    # -- Screen model -------------------------------------------------------

    def _interpret(self, data: str) -> None:
        i = 0
        while i < len(data):
            ch = data[i]
            if ch == "\x1b":
                match = _CSI_RE.match(data, i)
                if match is None:
                    i += 1
                    continue
                self._apply_csi(match.group(1), match.group(2))
                i = match.end()
                continue
            if ch == "\r":
                self.col = 0
                self._pending_wrap = False
            elif ch == "\n":
                self.row += 1
                self.col = 0
                self._pending_wrap = False
            else:
                self._put(ch)
            i += 1

    def _put(self, ch: str) -> None:
        if self._pending_wrap:
            self.row += 1
            self.col = 0
            self._pending_wrap = False
        self._screen.setdefault(self.row, {})[self.col] = ch
        if self.col >= self._columns - 1:
            self._pending_wrap = True
        else:
            self.col += 1

    def _apply_csi(self, params: str, final: str) -> None:
        n = int(params) if params.isdigit() else 1
        if final in "ABCD":
            self._pending_wrap = False
        if final == "A":
            self.row = max(self.row - n, 0)
        elif final == "B":
            self.row += n
        elif final == "C":
            self.col = min(self.col + n, self._columns - 1)
        elif final == "D":
            self.col = max(self.col - n, 0)
        elif final == "K" and params == "2":
            self._screen.pop(self.row, None)
