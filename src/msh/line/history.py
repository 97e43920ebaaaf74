"""Command history ring and per-session navigation."""

from __future__ import annotations

from collections import deque

from msh.line.buffer import EditBuffer

DEFAULT_HISTORY_SIZE = 200


class History:
    """Submitted non-empty lines, most recent last.

    Bounded histories drop the oldest entry once *capacity* is reached;
    ``capacity=None`` keeps everything.
    """

    def __init__(self, capacity: int | None = DEFAULT_HISTORY_SIZE) -> None:
        if capacity is not None and capacity < 1:
            capacity = None
        self._entries: deque[str] = deque(maxlen=capacity)

    @property
    def capacity(self) -> int | None:
        return self._entries.maxlen

    @property
    def entries(self) -> list[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def append(self, line: str) -> bool:
        """Record *line* unless it is empty. Duplicates are kept."""
        if not line:
            return False
        self._entries.append(line)
        return True

    def entry(self, back: int) -> str:
        """Return the entry *back* steps before the most recent one."""
        if not 0 <= back < len(self._entries):
            raise IndexError(f"history offset {back} outside [0, {len(self._entries)})")
        return self._entries[len(self._entries) - 1 - back]


class HistoryNavigator:
    """Walks a :class:`History` from the live draft towards older entries.

    ``index`` counts back from the most recent entry; ``-1`` is the draft.
    Entries are copied into the buffer, never modified.
    """

    def __init__(self, history: History) -> None:
        self._history = history
        self.index = -1

    def prev(self, buffer: EditBuffer) -> bool:
        """Load the next older entry. No-op at the oldest one."""
        if self.index >= len(self._history) - 1:
            return False
        self.index += 1
        buffer.load_from(self._history.entry(self.index))
        return True

    def next(self, buffer: EditBuffer) -> bool:
        """Load the next newer entry, or the empty draft past the newest."""
        if self.index <= -1:
            return False
        self.index -= 1
        if self.index == -1:
            buffer.load_from("")
        else:
            buffer.load_from(self._history.entry(self.index))
        return True
