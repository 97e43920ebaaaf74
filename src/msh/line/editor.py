"""Interactive line editor: one raw-mode session per submitted line."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from msh.line.buffer import DEFAULT_CAPACITY, EditBuffer
from msh.line.history import History, HistoryNavigator
from msh.line.keys import EditEvent, EventKind, KeyDecoder
from msh.line.redraw import LineRenderer
from msh.line.terminal import Terminal, raw_mode

logger = logging.getLogger(__name__)

PromptProvider = Callable[[], str]


@dataclass
class EditSession:
    """Mutable state of a single ``read_line`` call."""

    buffer: EditBuffer
    navigator: HistoryNavigator
    decoder: KeyDecoder = field(default_factory=KeyDecoder)
    eof: bool = False


class LineEditor:
    """Reads lines from a terminal with cursor keys and history recall.

    *prompt* is called before every repaint, so it may change between
    keystrokes and may contain SGR color codes.
    """

    def __init__(
        self,
        terminal: Terminal,
        prompt: PromptProvider,
        *,
        history: History | None = None,
        max_line_length: int = DEFAULT_CAPACITY,
    ) -> None:
        self._terminal = terminal
        self._prompt = prompt
        self._history = history if history is not None else History()
        self._max_line_length = max_line_length
        self._renderer = LineRenderer(terminal)
        self._at_eof = False

    @property
    def history(self) -> History:
        return self._history

    @property
    def renderer(self) -> LineRenderer:
        return self._renderer

    @property
    def at_eof(self) -> bool:
        """Whether the last session ended on end of input rather than Enter."""
        return self._at_eof

    def read_line(self) -> str:
        """Block until Enter or end of input and return the committed text.

        Non-empty lines are appended to the history.
        """
        session = EditSession(
            buffer=EditBuffer(self._max_line_length),
            navigator=HistoryNavigator(self._history),
        )

        with raw_mode(self._terminal):
            self._renderer.begin()
            try:
                self._render(session)
                while True:
                    event = session.decoder.read_event(self._terminal.read_byte)
                    if event.kind is EventKind.SUBMIT:
                        session.eof = event.eof
                        break
                    self._apply(session, event)
                    self._render(session)

                session.buffer.cursor = len(session.buffer)
                self._render(session)
                self._terminal.write("\r\n")
            finally:
                self._renderer.end()

        self._at_eof = session.eof
        line = session.buffer.text
        self._history.append(line)
        return line

    def _render(self, session: EditSession) -> None:
        self._renderer.redraw(self._prompt(), session.buffer.text, session.buffer.cursor)

    def _apply(self, session: EditSession, event: EditEvent) -> None:
        buf = session.buffer
        kind = event.kind

        if kind is EventKind.INSERT_CHAR:
            if buf.insert(event.char, buf.cursor):
                buf.cursor += 1
            else:
                logger.debug("Line is full, dropped %r", event.char)
        elif kind is EventKind.DELETE_BEFORE_CURSOR:
            if buf.cursor > 0:
                buf.cursor -= 1
                buf.remove_at(buf.cursor)
        elif kind is EventKind.DELETE_AT_CURSOR:
            if buf.cursor < len(buf):
                buf.remove_at(buf.cursor)
        elif kind is EventKind.CURSOR_LEFT:
            buf.move_left()
        elif kind is EventKind.CURSOR_RIGHT:
            buf.move_right()
        elif kind is EventKind.HISTORY_PREV:
            session.navigator.prev(buf)
        elif kind is EventKind.HISTORY_NEXT:
            session.navigator.next(buf)
