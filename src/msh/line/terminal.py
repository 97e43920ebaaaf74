"""Terminal abstraction for raw-mode byte-at-a-time interaction.

Provides a ``Terminal`` protocol and a concrete ``ProcessTerminal``
implementation on the process's stdin/stdout descriptors. Raw mode here is
the line editor's flavour of it: canonical mode, echo and newline echo off,
one byte per read with no timeout, and carriage return mapped to newline.
Output post-processing is left untouched.
"""

from __future__ import annotations

import atexit
import logging
import os
import sys
import termios
from contextlib import contextmanager
from typing import Iterator, Protocol, TextIO

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# ANSI escape constants
# ---------------------------------------------------------------------------

_CLEAR_LINE = "\x1b[2K"

DEFAULT_WIDTH = 80


# ---------------------------------------------------------------------------
# Terminal protocol
# ---------------------------------------------------------------------------


class Terminal(Protocol):
    """Interface for the terminal primitives the line editor needs."""

    def read_byte(self) -> int | None: ...

    def write(self, data: str) -> None: ...

    @property
    def columns(self) -> int: ...

    def clear_line(self) -> None: ...

    def enter_raw_mode(self) -> None: ...

    def leave_raw_mode(self) -> None: ...


@contextmanager
def raw_mode(terminal: Terminal) -> Iterator[Terminal]:
    """Hold *terminal* in raw mode for the duration of the ``with`` block.

    The previous mode is restored on every exit path, including exceptions.
    """
    terminal.enter_raw_mode()
    try:
        yield terminal
    finally:
        terminal.leave_raw_mode()


# ---------------------------------------------------------------------------
# Last-resort restore
# ---------------------------------------------------------------------------

_pending_restore: tuple[int, list] | None = None
_guard_installed = False


def _restore_pending() -> None:
    global _pending_restore
    if _pending_restore is None:
        return
    fd, attrs = _pending_restore
    _pending_restore = None
    try:
        termios.tcsetattr(fd, termios.TCSANOW, attrs)
    except (termios.error, OSError):
        pass


def install_restore_guard() -> None:
    """Register the process-exit hook that restores a still-raw terminal."""
    global _guard_installed
    if _guard_installed:
        return
    atexit.register(_restore_pending)
    _guard_installed = True


# ---------------------------------------------------------------------------
# ProcessTerminal implementation
# ---------------------------------------------------------------------------


class ProcessTerminal:
    """Concrete terminal backed by ``sys.stdin``/``sys.stdout`` by default."""

    def __init__(
        self,
        *,
        input_fd: int | None = None,
        output: TextIO | None = None,
        default_width: int = DEFAULT_WIDTH,
    ) -> None:
        self._input_fd = input_fd if input_fd is not None else sys.stdin.fileno()
        self._output = output if output is not None else sys.stdout
        self._default_width = default_width
        self._original_termios: list | None = None

    # -- properties ---------------------------------------------------------

    @property
    def columns(self) -> int:
        try:
            width = os.get_terminal_size(self._output.fileno()).columns
        except (ValueError, OSError):
            logger.debug("Width query failed, assuming %d columns", self._default_width)
            return self._default_width
        return width if width > 0 else self._default_width

    @property
    def is_raw(self) -> bool:
        return self._original_termios is not None

    # -- raw mode -----------------------------------------------------------

    def enter_raw_mode(self) -> None:
        """Snapshot the terminal attributes and switch to raw input."""
        global _pending_restore
        if self._original_termios is not None:
            return
        try:
            attrs = termios.tcgetattr(self._input_fd)
        except (termios.error, OSError):
            logger.debug("Input is not a terminal, raw mode skipped")
            return

        self._original_termios = attrs
        raw = termios.tcgetattr(self._input_fd)
        # iflag: map CR to NL
        raw[0] |= termios.ICRNL
        # lflag: no line buffering, no echo
        raw[3] &= ~(termios.ICANON | termios.ECHO | termios.ECHONL)
        raw[6][termios.VMIN] = 1
        raw[6][termios.VTIME] = 0
        termios.tcsetattr(self._input_fd, termios.TCSANOW, raw)

        _pending_restore = (self._input_fd, attrs)
        install_restore_guard()

    def leave_raw_mode(self) -> None:
        """Restore the exact attributes saved by :meth:`enter_raw_mode`."""
        global _pending_restore
        if self._original_termios is None:
            return
        attrs = self._original_termios
        self._original_termios = None
        _pending_restore = None
        try:
            termios.tcsetattr(self._input_fd, termios.TCSANOW, attrs)
        except (termios.error, OSError):
            logger.debug("Failed to restore terminal attributes", exc_info=True)

    # -- I/O ----------------------------------------------------------------

    def read_byte(self) -> int | None:
        """Block until one byte is available. ``None`` means end of input."""
        try:
            data = os.read(self._input_fd, 1)
        except OSError:
            logger.debug("Read failed, treating as end of input", exc_info=True)
            return None
        if not data:
            return None
        return data[0]

    def write(self, data: str) -> None:
        self._raw_write(data)

    def clear_line(self) -> None:
        self._raw_write(_CLEAR_LINE)

    # -- private: raw write ------------------------------------------------

    def _raw_write(self, data: str) -> None:
        """Write to the output stream and flush immediately."""
        try:
            self._output.write(data)
            self._output.flush()
        except OSError:
            pass
