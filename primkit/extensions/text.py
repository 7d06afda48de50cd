"""
String sanitization and case helpers.

Trimming, digit extraction, character removal, camel-casing and a handful
of small predicates. All functions are Unicode-aware: whitespace and digit
classification follow Python's str methods, not ASCII tables.
"""

import re
from typing import Iterable, Optional, Union

from primkit.extensions.optional import presence
from primkit.utils.errors import InvalidArgumentError

_EMAIL_PATTERN = re.compile(r"[A-Z0-9a-z._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

# Runs of anything that is not a letter or digit (underscore counts as a separator)
_NON_ALPHANUMERIC_RUN = re.compile(r"[\W_]+")


def digits_only(text: str) -> str:
    """
    Keep only decimal digits, in their original order.

    >>> digits_only("(123) 210-1981")
    '1232101981'

    Any Unicode decimal digit counts (e.g. Arabic-Indic "٣").
    """
    return "".join(ch for ch in text if ch.isdecimal())


def trimmed(text: str) -> str:
    """Strip leading and trailing whitespace and newlines."""
    return text.strip()


def remove_characters(text: str, characters: Union[str, Iterable[str]]) -> str:
    """
    Remove every occurrence of the given characters, preserving order.

    Args:
        text: Source string.
        characters: A string or any iterable of single characters to drop.

    Returns:
        text without the forbidden characters.
    """
    forbidden = set(characters)
    return "".join(ch for ch in text if ch not in forbidden)


def downcasing_first(text: str) -> str:
    """Lowercase only the first character."""
    return text[:1].lower() + text[1:]


def uppercasing_first(text: str) -> str:
    """Uppercase only the first character."""
    return text[:1].upper() + text[1:]


def camelize(text: str) -> str:
    """
    Join separator-delimited words into one camelCase token.

    **Functionally**:
    - Split on every run of non-alphanumeric characters.
    - First segment: lowercase its first letter.
    - Every later segment: uppercase its first letter.
    - The rest of each segment is left untouched.
    - Empty segments (leading or trailing separators) contribute nothing.

    >>> camelize("hello world-wide")
    'helloWorldWide'
    >>> camelize("Moder/nistik: .@2@01.6")
    'moderNistik2016'

    Note a leading separator leaves an empty first segment, so the first real
    word is capitalized: camelize("/path to") == "PathTo".
    """
    if not text:
        return ""
    first, *rest = _NON_ALPHANUMERIC_RUN.split(text)
    return downcasing_first(first) + "".join(uppercasing_first(part) for part in rest)


def sanitized(text: str) -> Optional[str]:
    """Trimmed text, or None when nothing but whitespace remains."""
    return presence(text)


def is_valid_email(text: str) -> bool:
    """Loose syntactic email check: local@domain.tld with a 2+ letter TLD."""
    return _EMAIL_PATTERN.fullmatch(text) is not None


def is_present(text: str) -> bool:
    """True if text has at least one character (whitespace counts)."""
    return len(text) > 0


def missing(text: str, other: str) -> bool:
    """True if other (a character or substring) does not occur in text."""
    return other not in text


def first_character(text: str) -> str:
    """
    First character of text.

    Raises:
        InvalidArgumentError: If text is empty.
    """
    if not text:
        raise InvalidArgumentError("first_character of an empty string")
    return text[0]


def last_character(text: str) -> str:
    """
    Last character of text.

    Raises:
        InvalidArgumentError: If text is empty.
    """
    if not text:
        raise InvalidArgumentError("last_character of an empty string")
    return text[-1]


def removing_all_whitespace(text: str) -> str:
    """Drop every whitespace and newline character, wherever it appears."""
    return "".join(ch for ch in text if not ch.isspace())


def utf8_data(text: str) -> bytes:
    """Encode text as UTF-8 bytes."""
    return text.encode("utf-8")
