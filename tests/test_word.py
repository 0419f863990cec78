"""Tests for the single-word state machine."""

import pytest

from shellquote import (
    SplitOptions,
    UnterminatedDoubleQuoteError,
    UnterminatedEscapeError,
    UnterminatedSingleQuoteError,
    parse_word,
)
from shellquote._word import scan_word


def test_word_up_to_separator():
    assert parse_word("foo bar baz") == ("foo", "bar baz")


def test_word_at_end_of_input():
    assert parse_word("foo") == ("foo", "")


def test_only_first_separator_consumed():
    assert parse_word("foo   bar") == ("foo", "  bar")


def test_empty_input():
    assert parse_word("") == ("", "")


def test_quotes_join_into_one_word():
    assert parse_word("a'b c'\"d e\"f g") == ("ab cd ef", "g")


def test_escape_consumes_one_char():
    assert parse_word("a\\ b c") == ("a b", "c")


def test_escape_newline_elided():
    assert parse_word("a\\\nb") == ("ab", "")


def test_single_quote_ignores_escapes():
    assert parse_word("'a\\'") == ("a\\", "")


def test_double_quote_elides_escape_of_listed_chars():
    assert parse_word('"\\$\\`\\"\\\\"') == ("$`\"\\", "")


def test_double_quote_keeps_other_escapes():
    assert parse_word('"\\a\\ b"') == ("\\a\\ b", "")


def test_escape_in_double_quote_skips_next_char():
    """An escape hides the following char from the quote scan even when the
    pair is kept verbatim."""
    opts = SplitOptions(double_escape_chars="$")
    assert parse_word('"a\\"b" c', opts) == ('a\\"b', "c")


def test_scan_word_from_offset():
    opts = SplitOptions()
    assert scan_word("xx 'y z' w", 3, opts) == ("y z", 9)


@pytest.mark.parametrize(
    ("text", "error"),
    [
        ("'abc", UnterminatedSingleQuoteError),
        ("ab'", UnterminatedSingleQuoteError),
        ('"abc', UnterminatedDoubleQuoteError),
        ('"abc\\"', UnterminatedDoubleQuoteError),
        ("abc\\", UnterminatedEscapeError),
        ("'a'\\", UnterminatedEscapeError),
    ],
)
def test_unterminated(text, error):
    with pytest.raises(error):
        parse_word(text)


def test_unterminated_position_points_at_opener():
    with pytest.raises(UnterminatedDoubleQuoteError) as info:
        parse_word('ab"cd')
    assert info.value.position == 2
