"""Unit tests for core/utils/text.py"""

import pytest

from ddiff.core.utils.text import is_binary, normalize_whitespace, split_lines


@pytest.mark.parametrize("text,expected", [
    ("", []),
    ("\n", [""]),
    ("one", ["one"]),
    ("one\ntwo\n", ["one", "two"]),
    ("one\ntwo", ["one", "two"]),
    ("one\r\ntwo\r\n", ["one", "two"]),
    ("a\n\nb\n", ["a", "", "b"]),
    ("tab\there\n", ["tab\there"]),
])
def test_split_lines(text, expected):
    """split_lines drops only the empty tail after a final newline."""
    assert split_lines(text) == expected


def test_is_binary_detects_nul():
    assert is_binary(["hello", "wor\x00ld", "test"])


def test_is_binary_plain_text():
    assert not is_binary(["hello", "world", "test"])
    assert not is_binary([])


@pytest.mark.parametrize("line,expected", [
    ("a  b", "a b"),
    ("a\tb", "a b"),
    ("a b   ", "a b"),
    ("  indented", " indented"),
    ("", ""),
])
def test_normalize_whitespace(line, expected):
    """Whitespace runs collapse to one space; trailing whitespace is dropped."""
    assert normalize_whitespace(line) == expected
