"""
Tests for primkit/extensions/text.py
"""

import pytest

from primkit.extensions.text import (
    camelize,
    digits_only,
    downcasing_first,
    first_character,
    is_present,
    is_valid_email,
    last_character,
    missing,
    remove_characters,
    removing_all_whitespace,
    sanitized,
    trimmed,
    uppercasing_first,
    utf8_data,
)
from primkit.utils.errors import InvalidArgumentError


def test_digits_only_phone_number():
    """Test punctuation and spaces are dropped from a phone number."""
    assert digits_only("(123) 210-1981") == "1232101981"


def test_digits_only_unicode_and_empty():
    """Test non-ASCII decimal digits are kept and empty input stays empty."""
    assert digits_only("a٣b7") == "٣7"
    assert digits_only("") == ""
    assert digits_only("no digits") == ""


def test_trimmed_strips_whitespace_and_newlines():
    """Test both ends are stripped, inner whitespace kept."""
    assert trimmed("  hello world \n\t") == "hello world"
    assert trimmed(" wide ") == "wide"


def test_remove_characters_from_string_set():
    """Test every listed character is removed, order preserved."""
    assert remove_characters("h-e-l_l.o", "-_.") == "hello"


def test_remove_characters_from_iterable():
    """Test a set of characters works the same as a string."""
    assert remove_characters("banana", {"a"}) == "bnn"
    assert remove_characters("banana", []) == "banana"


def test_camelize_punctuation_runs():
    """Test separators vanish, first segment lowered, later ones capitalized."""
    result = camelize("Moder/nistik: .@2@01.6")
    assert result == "moderNistik2016"
    assert not any(ch in result for ch in "/: .@")


def test_camelize_simple_words():
    """Test words separated by spaces, dashes and underscores."""
    assert camelize("hello world") == "helloWorld"
    assert camelize("user_id") == "userId"
    assert camelize("Content-Type") == "contentType"


def test_camelize_edge_cases():
    """Test empty input, consecutive separators and leading separators."""
    assert camelize("") == ""
    assert camelize("a--b") == "aB"
    assert camelize("trailing...") == "trailing"
    assert camelize("/path to") == "PathTo"


def test_camelize_keeps_rest_of_segment():
    """Test only the first letter of each segment changes case."""
    assert camelize("XML http REQUEST") == "xML" + "Http" + "REQUEST"


def test_case_first_character():
    """Test only the first character changes case."""
    assert downcasing_first("Hello World") == "hello World"
    assert uppercasing_first("hello World") == "Hello World"
    assert downcasing_first("") == ""
    assert uppercasing_first("") == ""


def test_sanitized():
    """Test blank strings sanitize to None, others are trimmed."""
    assert sanitized("   ") is None
    assert sanitized(" x ") == "x"


@pytest.mark.parametrize("email", ["a@b.co", "first.last+tag@example.org", "X_Y%z@sub.domain.io"])
def test_is_valid_email_accepts(email):
    """Test well-formed addresses are accepted."""
    assert is_valid_email(email)


@pytest.mark.parametrize("email", ["", "plain", "a@b", "a@b.c", "a b@c.com", "a@b.com extra"])
def test_is_valid_email_rejects(email):
    """Test malformed addresses are rejected."""
    assert not is_valid_email(email)


def test_first_and_last_character():
    """Test first/last characters and the empty-string error."""
    assert first_character("abc") == "a"
    assert last_character("abc") == "c"
    with pytest.raises(InvalidArgumentError):
        first_character("")
    with pytest.raises(InvalidArgumentError):
        last_character("")


def test_is_present_and_missing():
    """Test the small string predicates."""
    assert is_present(" ")
    assert not is_present("")
    assert missing("hello", "z")
    assert not missing("hello", "ell")


def test_removing_all_whitespace():
    """Test whitespace anywhere in the string is removed."""
    assert removing_all_whitespace(" a b\tc\nd ") == "abcd"


def test_utf8_data():
    """Test strings encode as UTF-8 bytes."""
    assert utf8_data("é") == b"\xc3\xa9"
