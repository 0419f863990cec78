"""Split configuration and its defaults."""

from __future__ import annotations

from dataclasses import dataclass, replace

from ._errors import InvalidOptionsError

DEFAULT_SPLIT_CHARS: str = " \n\t"
DEFAULT_SINGLE_CHAR: str = "'"
DEFAULT_DOUBLE_CHAR: str = '"'
DEFAULT_ESCAPE_CHAR: str = "\\"
DEFAULT_DOUBLE_ESCAPE_CHARS: str = "$`\"\n\\"

UNLIMITED: int = -1

# Accepted spellings of "escapes disabled"; normalised to None.
_DISABLED_ESCAPES = ("", "\0")


def _check_char(name: str, value: object) -> None:
    if not isinstance(value, str) or len(value) != 1:
        raise InvalidOptionsError(
            f"{name} must be a single character, got {value!r}"
        )


@dataclass(slots=True, frozen=True)
class SplitOptions:
    """How a string is split into words.

    Character sets are plain strings; every code point in the string is a
    member. ``escape_char=None`` disables backslash handling entirely.
    ``limit`` caps the number of words: -1 is unlimited, 0 yields nothing,
    N > 0 yields at most N words, the last one being the unsplit tail.
    """

    split_chars: str = DEFAULT_SPLIT_CHARS
    single_char: str = DEFAULT_SINGLE_CHAR
    double_char: str = DEFAULT_DOUBLE_CHAR
    escape_char: str | None = DEFAULT_ESCAPE_CHAR
    double_escape_chars: str = DEFAULT_DOUBLE_ESCAPE_CHARS
    limit: int = UNLIMITED

    def __post_init__(self) -> None:
        if not isinstance(self.split_chars, str):
            raise InvalidOptionsError(
                f"split_chars must be a string, got {self.split_chars!r}"
            )
        if not isinstance(self.double_escape_chars, str):
            raise InvalidOptionsError(
                "double_escape_chars must be a string, "
                f"got {self.double_escape_chars!r}"
            )
        _check_char("single_char", self.single_char)
        _check_char("double_char", self.double_char)
        if self.escape_char in _DISABLED_ESCAPES:
            object.__setattr__(self, "escape_char", None)
        elif self.escape_char is not None:
            _check_char("escape_char", self.escape_char)
        if isinstance(self.limit, bool) or not isinstance(self.limit, int):
            raise InvalidOptionsError(f"limit must be an int, got {self.limit!r}")

    @property
    def escapes_enabled(self) -> bool:
        return self.escape_char is not None

    def resolved(self) -> SplitOptions:
        """Return a copy with an empty split_chars replaced by the default."""
        if self.split_chars:
            return self
        return replace(self, split_chars=DEFAULT_SPLIT_CHARS)


def default_options() -> SplitOptions:
    """Options matching /bin/sh word splitting, with no word limit."""
    return SplitOptions()


def no_escape_options() -> SplitOptions:
    """Default options with backslash-escapes disabled."""
    return SplitOptions(escape_char=None)
