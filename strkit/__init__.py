"""Small string helpers: capitalization, digits, expiry and truncation."""

from strkit.card_expiry import (
    ExpiryError,
    ExpiryResult,
    validate_card_expiry,
)
from strkit.constants import DEFAULT_MAX_TEXT_LENGTH
from strkit.digit_grouping import DigitFormat, group_digits
from strkit.errors import (
    EmptyInputError,
    InvalidInputError,
    NonDigitCharacterError,
    StringHelperError,
    TypeMismatchError,
)
from strkit.string_utils import (
    capitalize_first,
    extract_digits,
    truncate_with_ellipsis,
)

__version__ = '0.1.0'

__all__ = [
    'capitalize_first',
    'extract_digits',
    'truncate_with_ellipsis',
    'group_digits',
    'validate_card_expiry',
    'DigitFormat',
    'ExpiryError',
    'ExpiryResult',
    'DEFAULT_MAX_TEXT_LENGTH',
    'StringHelperError',
    'TypeMismatchError',
    'EmptyInputError',
    'InvalidInputError',
    'NonDigitCharacterError',
]
