"""Digit grouping for Indian and International numbering.

Grouping is purely textual: the input is never converted to a number, so
leading zeros survive and are grouped like any other digit.

    >>> group_digits("123456789")
    '12,34,56,789'
    >>> group_digits("123456789", "international")
    '123,456,789'
"""

from enum import Enum
from typing import List, Union

from strkit.constants import ASCII_DIGITS
from strkit.errors import (
    EmptyInputError,
    InvalidInputError,
    NonDigitCharacterError,
    TypeMismatchError,
)


class DigitFormat(Enum):
    """Supported grouping styles.

    Values:
        INDIAN: Last group of 3, then groups of 2 (lakh/crore).
        INTERNATIONAL: Groups of 3 throughout (thousands).
    """
    INDIAN = "indian"
    INTERNATIONAL = "international"


def resolve_format(fmt: Union[DigitFormat, str, None]) -> DigitFormat:
    """Map a DigitFormat, its name or None (the Indian default) to a member.

    Raises:
        InvalidInputError: If fmt names no known format.
    """
    if fmt is None:
        return DigitFormat.INDIAN
    if isinstance(fmt, DigitFormat):
        return fmt
    if isinstance(fmt, str):
        try:
            return DigitFormat(fmt.strip().lower())
        except ValueError:
            pass
    raise InvalidInputError(f"Unknown digit format: {fmt!r}")


def _split_groups(digits: str, head: int, size: int) -> List[str]:
    """Split digits into groups from the right.

    The rightmost group holds head digits and every group to its left holds
    size digits; the leftmost group may be shorter.
    """
    if len(digits) <= head:
        return [digits]

    groups = [digits[-head:]]
    rest = digits[:-head]
    while rest:
        groups.append(rest[-size:])
        rest = rest[:-size]

    groups.reverse()
    return groups


def group_digits(
    digits: str,
    fmt: Union[DigitFormat, str, None] = DigitFormat.INDIAN,
    separator: str = ",",
) -> str:
    """Insert separators into a digit-only string.

    Args:
        digits: String made only of the characters 0-9.
        fmt: DigitFormat member or its name ("indian", "international").
            None selects the Indian default.
        separator: Text placed between groups.

    Returns:
        The grouped digits.

    Raises:
        EmptyInputError: If digits is None or empty.
        TypeMismatchError: If digits is not a string.
        NonDigitCharacterError: If any character is not an ASCII digit.
        InvalidInputError: If fmt is not a known format, or separator
            is not a string.
    """
    if digits is None or digits == "":
        raise EmptyInputError("No digits provided")
    if not isinstance(digits, str):
        raise TypeMismatchError("Not a string")

    for position, char in enumerate(digits):
        if char not in ASCII_DIGITS:
            raise NonDigitCharacterError(
                "Not all characters are digits",
                character=char,
                position=position,
            )

    style = resolve_format(fmt)
    if not isinstance(separator, str):
        raise InvalidInputError(f"Separator should be a string, got {separator!r}")

    if style is DigitFormat.INDIAN:
        groups = _split_groups(digits, head=3, size=2)
    else:
        groups = _split_groups(digits, head=3, size=3)

    return separator.join(groups)
