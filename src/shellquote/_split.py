"""Word splitting driver and public entry points."""

from __future__ import annotations

import logging

from ._errors import UnterminatedEscapeError, _UnterminatedError
from ._types import SplitOptions, default_options
from ._word import scan_word

logger = logging.getLogger(__name__)

# The tail of a limited split is trimmed with ASCII whitespace rather than
# split_chars. The limit=1 path trims with split_chars.
_ASCII_WHITESPACE = " \t\n\r\f\v"


def split_with_options(
    text: str, options: SplitOptions | None = None
) -> list[str]:
    """Split ``text`` according to /bin/sh word-splitting rules.

    Supports backslash-escapes, single quotes and double quotes. No
    expansion of any kind is performed (parameters, braces, globs,
    arithmetic, ``$'...'`` quoting).

    Args:
        text: The string to split.
        options: Split configuration. None means the defaults.

    Returns:
        The list of words after quote removal.

    Raises:
        UnterminatedSingleQuoteError: A single-quoted span is never closed.
        UnterminatedDoubleQuoteError: A double-quoted span is never closed.
        UnterminatedEscapeError: The input ends with an escape character.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    opts = (options or default_options()).resolved()
    split_chars = opts.split_chars
    limit = opts.limit

    if limit == 0:
        return []
    if limit == 1:
        text = text.strip(split_chars)
        return [text] if text else []

    try:
        return _split_words(text, opts)
    except _UnterminatedError as exc:
        logger.debug("split failed on %r: %s", text, exc)
        raise


def _split_words(text: str, opts: SplitOptions) -> list[str]:
    split_chars = opts.split_chars
    escapes = opts.escapes_enabled
    escape = opts.escape_char
    limit = opts.limit
    n = len(text)
    pos = 0
    words: list[str] = []

    while pos < n:
        c = text[pos]
        if c in split_chars:
            pos += 1
            continue
        if escapes and c == escape:
            if pos + 1 >= n:
                raise UnterminatedEscapeError(pos)
            # backslash-newline between words separates like whitespace
            if text[pos + 1] == "\n":
                pos += 2
                continue

        word, pos = scan_word(text, pos, opts)
        words.append(word)
        if limit == len(words) + 1:
            tail = text[pos:].strip(_ASCII_WHITESPACE)
            if tail:
                words.append(tail)
            return words

    return words


def split(text: str) -> list[str]:
    """Split ``text`` with the default options and no word limit."""
    return split_with_options(text, default_options())


def split_n(text: str, n: int) -> list[str]:
    """Split ``text`` into at most ``n`` words (-1 for no limit).

    With n > 0 the last word is the rest of the input, left unparsed.
    """
    return split_with_options(text, SplitOptions(limit=n))
