"""Card expiry validation.

Checks an "MM/YY" string and reports whether the card is still usable.
Problems with the input are returned as a negative ExpiryResult rather than
raised, so callers can show the reason directly to a user.

A card is valid through the whole last day of its expiry month. The last
day comes from a fixed non-leap table, so 29 February is never covered.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Dict, Optional

from strkit.constants import DAYS_PER_MONTH


logger = logging.getLogger(__name__)

EXPIRY_PATTERN = re.compile(r"(0[1-9]|1[0-2])/([0-9]{2})")


class ExpiryError(Enum):
    """Reasons an expiry string is rejected.

    Values:
        NOT_PROVIDED: Input was None or empty.
        NOT_A_STRING: Input was some other type.
        INVALID_LENGTH: Trimmed input is not exactly 5 characters.
        INVALID_FORMAT: Input does not look like MM/YY with a real month.
        EXPIRED: Input is well formed but already in the past.
    """
    NOT_PROVIDED = "Input not provided"
    NOT_A_STRING = "Expiry should be strings"
    INVALID_LENGTH = "Expiry should be exactly 5 characters length"
    INVALID_FORMAT = 'Invalid format. Should be like "01/26" or "11/30" in "MM/YY"'
    EXPIRED = "Already Expired"


@dataclass
class ExpiryResult:
    """Outcome of an expiry check.

    Attributes:
        status: True when the expiry is well formed and not yet passed.
        error: Reason for a negative status, None when status is True.
    """
    status: bool
    error: Optional[str] = None

    @classmethod
    def valid(cls) -> 'ExpiryResult':
        """Build a positive result."""
        return cls(status=True, error=None)

    @classmethod
    def invalid(cls, reason: ExpiryError) -> 'ExpiryResult':
        """Build a negative result carrying the reason text."""
        return cls(status=False, error=reason.value)

    def __bool__(self) -> bool:
        """Truthiness follows status."""
        return self.status

    def to_dict(self) -> Dict[str, Any]:
        """Return the result as a plain status/error mapping."""
        return {'status': self.status, 'error': self.error}


def expiry_deadline(month: int, year: int) -> datetime:
    """Return the first instant at which a card expiring month/year is invalid.

    Args:
        month: Expiry month, 1-12.
        year: Two-digit expiry year, taken as 2000 + year.

    Returns:
        Local midnight of the day after the month's last day.
    """
    last_day = DAYS_PER_MONTH[month]
    return datetime(2000 + year, month, last_day) + timedelta(days=1)


def validate_card_expiry(expiry: str, now: Optional[datetime] = None) -> ExpiryResult:
    """Validate a card expiry string in MM/YY form.

    Args:
        expiry: Expiry string such as "01/26", surrounding whitespace allowed.
        now: Moment to compare against. Defaults to the current local time.
            An aware datetime is converted to naive local time first.

    Returns:
        ExpiryResult with status True, or status False and the reason.
    """
    # None, empty strings, 0 and False all count as missing
    if expiry is None or (isinstance(expiry, (str, int, float)) and not expiry):
        return ExpiryResult.invalid(ExpiryError.NOT_PROVIDED)
    if not isinstance(expiry, str):
        return ExpiryResult.invalid(ExpiryError.NOT_A_STRING)

    expiry = expiry.strip()
    if len(expiry) != 5:
        return ExpiryResult.invalid(ExpiryError.INVALID_LENGTH)

    match = EXPIRY_PATTERN.fullmatch(expiry)
    if not match:
        return ExpiryResult.invalid(ExpiryError.INVALID_FORMAT)

    month = int(match.group(1))
    year = int(match.group(2))
    deadline = expiry_deadline(month, year)

    if now is None:
        now = datetime.now()
    elif now.tzinfo is not None:
        now = now.astimezone().replace(tzinfo=None)

    if deadline > now:
        return ExpiryResult.valid()

    logger.debug(f"Expiry {expiry} passed at {deadline:%Y-%m-%d %H:%M}")
    return ExpiryResult.invalid(ExpiryError.EXPIRED)
