"""Small string helpers working on ASCII text."""

from __future__ import annotations

import string
from typing import List

_WHITESPACE = " \n\r\t"
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def split(s: str, delimiter: str = " ") -> List[str]:
    """Split ``s`` on ``delimiter``, dropping empty tokens."""
    return [token for token in s.split(delimiter) if token]


def starts_with(s: str, keyword: str) -> bool:
    return s.startswith(keyword)


def contains(s: str, keyword: str) -> bool:
    return keyword in s


def replace(s: str, keyword: str, newword: str) -> str:
    """Replace every occurrence of ``keyword`` in ``s``, scanning left to right."""
    if not keyword:
        raise ValueError("keyword must not be empty")
    return s.replace(keyword, newword)


def strip(s: str) -> str:
    """Remove leading and trailing spaces, tabs, carriage returns and newlines."""
    return s.strip(_WHITESPACE)


def to_upper(s: str) -> str:
    """Upper-case ASCII letters only."""
    return s.translate(_TO_UPPER)


def to_lower(s: str) -> str:
    """Lower-case ASCII letters only."""
    return s.translate(_TO_LOWER)