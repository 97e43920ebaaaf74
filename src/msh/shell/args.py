"""Command-line tokenizer with single and double quotes."""

from __future__ import annotations

_QUOTES = ("'", '"')


def parse_arguments(line: str) -> list[str]:
    """Split *line* into words.

    Whitespace outside quotes separates words. A quote character opens a
    quoted run that only the same character closes. Quote characters are
    never part of a word, including a quote of the other kind inside a
    quoted run. An unclosed quote runs to the end of the line.
    """
    words: list[str] = []
    current: list[str] = []
    open_quote: str | None = None

    for ch in line:
        if open_quote is None and ch.isspace():
            if current:
                words.append("".join(current))
                current = []
            continue
        if ch in _QUOTES:
            if open_quote is None:
                open_quote = ch
            elif open_quote == ch:
                open_quote = None
            continue
        current.append(ch)

    if current:
        words.append("".join(current))
    return words
