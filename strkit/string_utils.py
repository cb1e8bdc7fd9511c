"""String utility functions for strkit.

This module provides the small text helpers: capitalizing the first
letter, pulling digits out of free text, and truncating with an ellipsis.
All of them are pure and operate on raw character indexes.
"""

import logging
from typing import Optional

from strkit.constants import ASCII_DIGITS, DEFAULT_MAX_TEXT_LENGTH, ELLIPSIS
from strkit.errors import EmptyInputError, InvalidInputError, TypeMismatchError


logger = logging.getLogger(__name__)


def capitalize_first(text: str) -> str:
    """Uppercase the first character of a trimmed string.

    Leading and trailing whitespace is removed before the first character
    is uppercased; the rest of the string is returned unchanged.

    Args:
        text: The string to capitalize.

    Returns:
        Trimmed string with its first character uppercased.

    Raises:
        TypeMismatchError: If text is not a string.
        EmptyInputError: If text is empty after trimming.
    """
    if not isinstance(text, str):
        raise TypeMismatchError("Not a string")

    stripped = text.strip()
    if not stripped:
        raise EmptyInputError("String not provided")

    return stripped[0].upper() + stripped[1:]


def extract_digits(text: str) -> str:
    """Return only the ASCII digits found in a string.

    Every other character, decimal points included, is dropped, so
    "12.34" gives "1234". A string with no digits gives "".

    Args:
        text: The string to scan.

    Returns:
        The digits of the trimmed string in their original order.

    Raises:
        TypeMismatchError: If text is not a string.
        EmptyInputError: If text is empty after trimming.
    """
    if not isinstance(text, str):
        raise TypeMismatchError("Not a string")

    stripped = text.strip()
    if not stripped:
        raise EmptyInputError("String not provided")

    return "".join(char for char in stripped if char in ASCII_DIGITS)


def truncate_with_ellipsis(text: str, limit: Optional[int] = DEFAULT_MAX_TEXT_LENGTH) -> str:
    """Truncate a string to a maximum length and append an ellipsis.

    Unlike a suffix-inclusive truncate, the limit counts only characters
    kept from the input: the result of a truncation is limit + 3 long.

    Args:
        text: The string to truncate.
        limit: Number of characters to keep. None uses the default.

    Returns:
        The text unchanged if it fits, else its first limit characters
        followed by "...".

    Raises:
        InvalidInputError: If text is not a non-blank string, or limit
            is not a non-negative integer.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidInputError("Invalid or No string provided")

    if limit is None:
        limit = DEFAULT_MAX_TEXT_LENGTH
    if isinstance(limit, bool) or not isinstance(limit, int) or limit < 0:
        raise InvalidInputError("Limit should be a non-negative integer")

    if len(text) <= limit:
        return text

    logger.debug(f"Truncating {len(text)} characters to {limit}")
    return text[:limit] + ELLIPSIS
