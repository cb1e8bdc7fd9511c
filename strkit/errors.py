"""Exceptions raised by the strkit helpers."""

from typing import Optional


class StringHelperError(Exception):
    """Base exception for all strkit helper failures."""
    pass


class TypeMismatchError(StringHelperError, TypeError):
    """Exception raised when the input is not a string."""
    pass


class EmptyInputError(StringHelperError, ValueError):
    """Exception raised when the input is empty or only whitespace."""
    pass


class InvalidInputError(StringHelperError, ValueError):
    """Exception raised when an argument is unusable for the operation."""
    pass


class NonDigitCharacterError(StringHelperError, ValueError):
    """Exception raised when a digit-only operation sees another character."""

    def __init__(
        self,
        message: str,
        character: Optional[str] = None,
        position: Optional[int] = None,
    ):
        """Initialize the error.

        Args:
            message: Error description.
            character: The first offending character, if known.
            position: Index of the offending character in the input.
        """
        self.character = character
        self.position = position
        super().__init__(message)


__all__ = [
    'StringHelperError',
    'TypeMismatchError',
    'EmptyInputError',
    'InvalidInputError',
    'NonDigitCharacterError',
]
