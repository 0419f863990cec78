"""Single-word parser: a RAW / SINGLE / DOUBLE / ESCAPE state machine."""

from __future__ import annotations

import enum

from ._errors import (
    UnterminatedDoubleQuoteError,
    UnterminatedEscapeError,
    UnterminatedSingleQuoteError,
)
from ._types import SplitOptions, default_options


class _State(enum.Enum):
    RAW = enum.auto()
    SINGLE = enum.auto()
    DOUBLE = enum.auto()
    ESCAPE = enum.auto()


def scan_word(text: str, pos: int, opts: SplitOptions) -> tuple[str, int]:
    """Parse one word of ``text`` starting at index ``pos``.

    Returns (word, end) where ``end`` is the index just past the word and
    the separator that ended it, if any. ``opts`` must already be resolved.

    Literal runs are copied as slices of the input; only quote delimiters
    and consumed escape characters are dropped.
    """
    split_chars = opts.split_chars
    single = opts.single_char
    double = opts.double_char
    escape = opts.escape_char
    double_escapes = opts.double_escape_chars

    n = len(text)
    parts: list[str] = []
    state = _State.RAW
    opened = pos  # index of the quote or escape that entered the current state

    while True:
        if state is _State.RAW:
            start = pos
            while pos < n:
                c = text[pos]
                # Quotes and escapes win over separators sharing a code point.
                if c == single:
                    state = _State.SINGLE
                elif c == double:
                    state = _State.DOUBLE
                elif c == escape:
                    state = _State.ESCAPE
                elif c in split_chars:
                    parts.append(text[start:pos])
                    return "".join(parts), pos + 1
                else:
                    pos += 1
                    continue
                parts.append(text[start:pos])
                opened = pos
                pos += 1
                break
            else:
                parts.append(text[start:])
                return "".join(parts), n

        elif state is _State.ESCAPE:
            if pos >= n:
                raise UnterminatedEscapeError(opened)
            c = text[pos]
            # backslash-newline is a line continuation and vanishes
            if c != "\n":
                parts.append(c)
            pos += 1
            state = _State.RAW

        elif state is _State.SINGLE:
            end = text.find(single, pos)
            if end == -1:
                raise UnterminatedSingleQuoteError(opened)
            parts.append(text[pos:end])
            pos = end + 1
            state = _State.RAW

        else:
            start = pos
            while pos < n:
                c = text[pos]
                pos += 1
                if c == double:
                    parts.append(text[start:pos - 1])
                    state = _State.RAW
                    break
                if c == escape and pos < n:
                    # Only a few escapes mean anything inside double quotes;
                    # any other backslash pair stays in the literal run.
                    c2 = text[pos]
                    pos += 1
                    if c2 in double_escapes:
                        parts.append(text[start:pos - 2])
                        if c2 != "\n":
                            parts.append(c2)
                        start = pos
            else:
                raise UnterminatedDoubleQuoteError(opened)


def parse_word(
    text: str, options: SplitOptions | None = None
) -> tuple[str, str]:
    """Parse the first word of ``text``.

    ``text`` must start at the word itself; leading separators are not
    skipped. Returns (word, remainder), the separator ending the word
    being consumed.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    opts = (options or default_options()).resolved()
    word, end = scan_word(text, 0, opts)
    return word, text[end:]
