import pytest

from megashell.textutil import split
from megashell.tokenize import string_split


@pytest.mark.parametrize(
    "text",
    ["", "   ", "ls", "ls -l /tmp", "  a  b   c  ", "< in cat | wc > out"],
)
def test_matches_plain_split_without_quotes(text):
    assert string_split(text, " ") == split(text, " ")


def test_quoted_text_stays_whole():
    assert string_split('echo "hello world"', " ") == ["echo", "hello world"]


def test_text_after_closing_quote_starts_new_word():
    assert string_split('"ab"cd', " ") == ["ab", "cd"]


def test_empty_quotes_give_empty_word():
    assert string_split('a "" b', " ") == ["a", "", "b"]


def test_unterminated_quote_runs_to_end():
    assert string_split('x "abc def', " ") == ["x", "abc def"]


def test_quote_inside_word_is_literal():
    assert string_split('a"b c"', " ") == ['a"b', 'c"']


def test_other_separator():
    assert string_split('a:"b:c":d', ":") == ["a", "b:c", "d"]


def test_no_separator_in_output_outside_quotes():
    tokens = string_split('one two  "three four" five', " ")
    unquoted = [t for t in tokens if t != "three four"]
    assert all(" " not in t for t in unquoted)
    assert len(tokens) == 4


@pytest.mark.parametrize("sep", ["", "ab"])
def test_bad_separator_raises(sep):
    with pytest.raises(ValueError):
        string_split("a b", sep)