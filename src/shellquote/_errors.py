"""Shellquote error types."""

from __future__ import annotations


class ShellQuoteError(ValueError):
    """Base error for all shellquote failures."""


class InvalidOptionsError(ShellQuoteError):
    """A SplitOptions field has an unusable value."""


class _UnterminatedError(ShellQuoteError):
    message = "Unterminated construct"

    def __init__(self, position: int | None = None) -> None:
        self.position = position
        if position is None:
            super().__init__(self.message)
        else:
            super().__init__(f"{self.message} (opened at index {position})")


class UnterminatedSingleQuoteError(_UnterminatedError):
    """A single-quoted span has no closing quote."""

    message = "Unterminated single-quoted string"


class UnterminatedDoubleQuoteError(_UnterminatedError):
    """Input ended inside a double-quoted span."""

    message = "Unterminated double-quoted string"


class UnterminatedEscapeError(_UnterminatedError):
    """Input ended right after an escape character."""

    message = "Unterminated backslash-escape"
