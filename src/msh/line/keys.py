"""Keyboard byte decoding for the line editor.

Turns the raw byte stream into logical edit events with a small state
machine::

    NORMAL --ESC--> SAW_ESC --any--> SAW_ESC_BRACKET --selector--> NORMAL
                                                    \\--'3'--> SAW_DELETE --any--> NORMAL

Only the arrow keys and the Delete key (``ESC [ 3 ~``) are recognised;
other escape sequences are swallowed without producing an event. Reading the
rest of an escape sequence blocks, so a lone Escape keypress waits for the
next two bytes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from msh.line.utils import is_printable

# ---------------------------------------------------------------------------
# Byte constants
# ---------------------------------------------------------------------------

ESC = 27
NEWLINE = 10
CARRIAGE_RETURN = 13
BACKSPACE = 127

ARROW_UP = 65
ARROW_DOWN = 66
ARROW_RIGHT = 67
ARROW_LEFT = 68
DELETE = 51


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------


class EventKind(Enum):
    INSERT_CHAR = "insert_char"
    DELETE_BEFORE_CURSOR = "delete_before_cursor"
    DELETE_AT_CURSOR = "delete_at_cursor"
    CURSOR_LEFT = "cursor_left"
    CURSOR_RIGHT = "cursor_right"
    HISTORY_PREV = "history_prev"
    HISTORY_NEXT = "history_next"
    SUBMIT = "submit"


@dataclass(frozen=True)
class EditEvent:
    kind: EventKind
    char: str = ""
    eof: bool = False


class DecoderState(Enum):
    NORMAL = "normal"
    SAW_ESC = "saw_esc"
    SAW_ESC_BRACKET = "saw_esc_bracket"
    SAW_DELETE = "saw_delete"


_SELECTORS: dict[int, EventKind] = {
    ARROW_UP: EventKind.HISTORY_PREV,
    ARROW_DOWN: EventKind.HISTORY_NEXT,
    ARROW_RIGHT: EventKind.CURSOR_RIGHT,
    ARROW_LEFT: EventKind.CURSOR_LEFT,
}


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------


class KeyDecoder:
    """Byte-at-a-time decoder. Feed bytes, collect events."""

    def __init__(self) -> None:
        self.state = DecoderState.NORMAL
        self._transitions: dict[
            DecoderState, Callable[[int], EditEvent | None]
        ] = {
            DecoderState.NORMAL: self._on_normal,
            DecoderState.SAW_ESC: self._on_esc,
            DecoderState.SAW_ESC_BRACKET: self._on_selector,
            DecoderState.SAW_DELETE: self._on_delete_terminator,
        }

    def feed(self, byte: int | None) -> EditEvent | None:
        """Advance the state machine by one byte.

        ``None`` stands for end of input and always yields a submit event,
        even in the middle of an escape sequence.
        """
        if byte is None:
            self.state = DecoderState.NORMAL
            return EditEvent(EventKind.SUBMIT, eof=True)
        return self._transitions[self.state](byte)

    def read_event(self, read_byte: Callable[[], int | None]) -> EditEvent:
        """Pull bytes from *read_byte* until one event is complete."""
        while True:
            event = self.feed(read_byte())
            if event is not None:
                return event

    # -- transitions --------------------------------------------------------

    def _on_normal(self, byte: int) -> EditEvent | None:
        if byte == ESC:
            self.state = DecoderState.SAW_ESC
            return None
        if byte == BACKSPACE:
            return EditEvent(EventKind.DELETE_BEFORE_CURSOR)
        if byte in (NEWLINE, CARRIAGE_RETURN):
            return EditEvent(EventKind.SUBMIT)
        if is_printable(byte):
            return EditEvent(EventKind.INSERT_CHAR, char=chr(byte))
        return None

    def _on_esc(self, byte: int) -> EditEvent | None:
        # Introducer byte ("[" or "O"), not inspected.
        self.state = DecoderState.SAW_ESC_BRACKET
        return None

    def _on_selector(self, byte: int) -> EditEvent | None:
        if byte == DELETE:
            self.state = DecoderState.SAW_DELETE
            return None
        self.state = DecoderState.NORMAL
        kind = _SELECTORS.get(byte)
        return EditEvent(kind) if kind is not None else None

    def _on_delete_terminator(self, byte: int) -> EditEvent | None:
        self.state = DecoderState.NORMAL
        return EditEvent(EventKind.DELETE_AT_CURSOR)
