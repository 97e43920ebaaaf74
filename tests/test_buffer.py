"""Tests for msh.line.buffer.EditBuffer."""

from __future__ import annotations

import pytest

from msh.line.buffer import EditBuffer


def make_buffer(text: str, cursor: int | None = None, capacity: int = 1000) -> EditBuffer:
    buf = EditBuffer(capacity)
    buf.load_from(text)
    buf.cursor = len(text) if cursor is None else cursor
    return buf


class TestInsert:
    def test_insert_at_end(self) -> None:
        buf = make_buffer("abc")
        assert buf.insert("d", 3) is True
        assert buf.text == "abcd"

    def test_insert_in_middle_shifts_tail(self) -> None:
        buf = make_buffer("helo")
        buf.insert("l", 2)
        assert buf.text == "hello"

    def test_insert_at_start(self) -> None:
        buf = make_buffer("bc")
        buf.insert("a", 0)
        assert buf.text == "abc"

    def test_insert_does_not_move_cursor(self) -> None:
        buf = make_buffer("abc", cursor=1)
        buf.insert("x", 1)
        assert buf.cursor == 1

    def test_refused_when_full(self) -> None:
        buf = make_buffer("abcd", capacity=5)
        assert buf.full
        assert buf.insert("e", 4) is False
        assert buf.text == "abcd"

    def test_out_of_range_position(self) -> None:
        buf = make_buffer("abc")
        with pytest.raises(IndexError):
            buf.insert("x", 4)
        with pytest.raises(IndexError):
            buf.insert("x", -1)


class TestRemoveAt:
    def test_remove_shifts_tail_left(self) -> None:
        buf = make_buffer("hello")
        assert buf.remove_at(1) == "e"
        assert buf.text == "hllo"

    def test_remove_last_clamps_cursor(self) -> None:
        buf = make_buffer("abc")
        buf.remove_at(2)
        assert buf.cursor == 2

    def test_out_of_range_position(self) -> None:
        buf = make_buffer("abc")
        with pytest.raises(IndexError):
            buf.remove_at(3)


class TestInsertRemoveInverse:
    """insert followed by remove_at at the same position is a no-op."""

    @pytest.mark.parametrize("pos", range(6))
    @pytest.mark.parametrize("cursor", [0, 2, 5])
    def test_restores_text_and_cursor(self, pos: int, cursor: int) -> None:
        buf = make_buffer("hello", cursor=cursor)
        buf.insert("Z", pos)
        buf.remove_at(pos)
        assert buf.text == "hello"
        assert buf.cursor == cursor


class TestLoadFrom:
    def test_replaces_contents(self) -> None:
        buf = make_buffer("old text")
        buf.load_from("new")
        assert buf.text == "new"
        assert len(buf) == 3

    def test_clamps_cursor(self) -> None:
        buf = make_buffer("a long line")
        buf.load_from("ab")
        assert buf.cursor == 2

    def test_keeps_cursor_when_it_fits(self) -> None:
        buf = make_buffer("abcdef", cursor=2)
        buf.load_from("uvwxyz")
        assert buf.cursor == 2

    def test_truncates_to_capacity(self) -> None:
        buf = EditBuffer(4)
        buf.load_from("abcdef")
        assert buf.text == "abc"


class TestCursorMovement:
    def test_move_left_stops_at_zero(self) -> None:
        buf = make_buffer("ab", cursor=1)
        assert buf.move_left() is True
        assert buf.move_left() is False
        assert buf.cursor == 0

    def test_move_right_stops_at_end(self) -> None:
        buf = make_buffer("ab", cursor=1)
        assert buf.move_right() is True
        assert buf.move_right() is False
        assert buf.cursor == 2

    def test_cursor_setter_clamps(self) -> None:
        buf = make_buffer("abc")
        buf.cursor = 10
        assert buf.cursor == 3
        buf.cursor = -4
        assert buf.cursor == 0


def test_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        EditBuffer(0)
