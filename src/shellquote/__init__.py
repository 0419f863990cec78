"""Shellquote: /bin/sh-style word splitting with quote removal."""

from __future__ import annotations

from ._errors import (
    InvalidOptionsError,
    ShellQuoteError,
    UnterminatedDoubleQuoteError,
    UnterminatedEscapeError,
    UnterminatedSingleQuoteError,
)
from ._split import split, split_n, split_with_options
from ._types import (
    DEFAULT_DOUBLE_CHAR,
    DEFAULT_DOUBLE_ESCAPE_CHARS,
    DEFAULT_ESCAPE_CHAR,
    DEFAULT_SINGLE_CHAR,
    DEFAULT_SPLIT_CHARS,
    UNLIMITED,
    SplitOptions,
    default_options,
    no_escape_options,
)
from ._word import parse_word

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DEFAULT_DOUBLE_CHAR",
    "DEFAULT_DOUBLE_ESCAPE_CHARS",
    "DEFAULT_ESCAPE_CHAR",
    "DEFAULT_SINGLE_CHAR",
    "DEFAULT_SPLIT_CHARS",
    "InvalidOptionsError",
    "ShellQuoteError",
    "SplitOptions",
    "UNLIMITED",
    "UnterminatedDoubleQuoteError",
    "UnterminatedEscapeError",
    "UnterminatedSingleQuoteError",
    "default_options",
    "no_escape_options",
    "parse_word",
    "split",
    "split_n",
    "split_with_options",
]
