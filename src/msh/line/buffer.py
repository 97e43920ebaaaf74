"""Bounded edit buffer with a cursor offset."""

from __future__ import annotations

DEFAULT_CAPACITY = 1000


class EditBuffer:
    """Mutable line text plus a cursor in ``[0, len]``.

    A buffer of capacity ``C`` holds at most ``C - 1`` characters; the last
    slot is reserved, matching the fixed-size line the shell commits.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._chars: list[str] = []
        self._cursor = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def text(self) -> str:
        return "".join(self._chars)

    @property
    def cursor(self) -> int:
        return self._cursor

    @cursor.setter
    def cursor(self, value: int) -> None:
        self._cursor = max(0, min(value, len(self._chars)))

    @property
    def full(self) -> bool:
        return len(self._chars) >= self._capacity - 1

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return self.text

    # -- editing ------------------------------------------------------------

    def insert(self, char: str, pos: int) -> bool:
        """Insert *char* at *pos*, shifting the tail right.

        Returns ``False`` (and leaves the buffer untouched) when full.
        The cursor is not moved.
        """
        if not 0 <= pos <= len(self._chars):
            raise IndexError(f"insert position {pos} outside [0, {len(self._chars)}]")
        if self.full:
            return False
        self._chars.insert(pos, char)
        return True

    def remove_at(self, pos: int) -> str:
        """Remove and return the character at *pos*, shifting the tail left."""
        if not 0 <= pos < len(self._chars):
            raise IndexError(f"remove position {pos} outside [0, {len(self._chars)})")
        removed = self._chars.pop(pos)
        self._cursor = min(self._cursor, len(self._chars))
        return removed

    def load_from(self, text: str) -> None:
        """Replace the contents with *text* and clamp the cursor."""
        self._chars = list(text[: self._capacity - 1])
        self._cursor = min(self._cursor, len(self._chars))

    # -- cursor movement ----------------------------------------------------

    def move_left(self) -> bool:
        if self._cursor > 0:
            self._cursor -= 1
            return True
        return False

    def move_right(self) -> bool:
        if self._cursor < len(self._chars):
            self._cursor += 1
            return True
        return False
