"""Shared constants for the strkit helpers."""

DEFAULT_MAX_TEXT_LENGTH = 10

ELLIPSIS = "..."

ASCII_DIGITS = frozenset("0123456789")

# Fixed non-leap table; February never gets a 29th day
DAYS_PER_MONTH = {
    1: 31,
    2: 28,
    3: 31,
    4: 30,
    5: 31,
    6: 30,
    7: 31,
    8: 31,
    9: 30,
    10: 31,
    11: 30,
    12: 31,
}
