"""msh-line: raw-mode line editor with history and wrap-aware redraw."""

# Text metrics
from msh.line.utils import is_printable, strip_ansi, visible_length, wrap_extent

# Terminal interface and implementation
from msh.line.terminal import ProcessTerminal, Terminal, install_restore_guard, raw_mode

# Cursor model and redraw
from msh.line.cursor import CursorModel
from msh.line.redraw import LineRenderer

# Editing state
from msh.line.buffer import EditBuffer
from msh.line.history import History, HistoryNavigator

# Keyboard input handling
from msh.line.keys import DecoderState, EditEvent, EventKind, KeyDecoder

# Editor
from msh.line.editor import EditSession, LineEditor, PromptProvider

__all__ = [
    # Text metrics
    "visible_length",
    "strip_ansi",
    "wrap_extent",
    "is_printable",
    # Terminal
    "Terminal",
    "ProcessTerminal",
    "raw_mode",
    "install_restore_guard",
    # Cursor / redraw
    "CursorModel",
    "LineRenderer",
    # Editing state
    "EditBuffer",
    "History",
    "HistoryNavigator",
    # Keys
    "DecoderState",
    "EditEvent",
    "EventKind",
    "KeyDecoder",
    # Editor
    "EditSession",
    "LineEditor",
    "PromptProvider",
]
