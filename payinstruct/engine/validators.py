"""Field validators for parsed instructions.

All checks are ASCII-only: digits mean 0-9 and letters mean A-Z/a-z, so
other Unicode digits or letters are rejected.
"""

from datetime import date, datetime, timedelta, timezone
from string import ascii_letters, digits
from typing import Optional

from payinstruct.models.constants import (
    ACCOUNT_ID_SPECIAL_CHARS,
    DATE_FORMAT_LENGTH,
    DATE_SEPARATOR_POSITIONS,
    MAX_DAY,
    MAX_MONTH,
    MAX_YEAR,
    MIN_DAY,
    MIN_MONTH,
    MIN_YEAR,
    SUPPORTED_CURRENCIES,
)

_ASCII_DIGITS = frozenset(digits)
_ACCOUNT_ID_CHARS = frozenset(ascii_letters) | _ASCII_DIGITS | ACCOUNT_ID_SPECIAL_CHARS


def _is_ascii_digits(value: str) -> bool:
    return all(char in _ASCII_DIGITS for char in value)


def validate_amount(amount: Optional[str]) -> Optional[int]:
    """Validate an amount token and return its integer value.

    The token must be non-empty, carry no sign or decimal point, consist only
    of ASCII digits and be greater than zero. Leading zeros are accepted.

    Returns:
        The amount as an int, or None if invalid
    """
    if not isinstance(amount, str) or not amount:
        return None
    if "-" in amount or "." in amount:
        return None
    if not _is_ascii_digits(amount):
        return None

    value = int(amount)
    if value <= 0:
        return None
    return value


def is_valid_account_id(account_id: Optional[str]) -> bool:
    """Account ids may only contain letters, digits, '-', '.' and '@'."""
    if not isinstance(account_id, str) or not account_id:
        return False
    return all(char in _ACCOUNT_ID_CHARS for char in account_id)


def is_valid_date_format(date_str: Optional[str]) -> bool:
    """Check a YYYY-MM-DD date for syntactic plausibility.

    Ranges are checked independently (year 1900-9999, month 1-12, day 1-31).
    There is deliberately no days-in-month or leap-year check, so
    "2025-02-30" passes.
    """
    if not isinstance(date_str, str) or len(date_str) != DATE_FORMAT_LENGTH:
        return False
    if any(date_str[pos] != "-" for pos in DATE_SEPARATOR_POSITIONS):
        return False

    year_str, month_str, day_str = date_str[0:4], date_str[5:7], date_str[8:10]
    if not (_is_ascii_digits(year_str) and _is_ascii_digits(month_str) and _is_ascii_digits(day_str)):
        return False

    year, month, day = int(year_str), int(month_str), int(day_str)
    if year < MIN_YEAR or year > MAX_YEAR:
        return False
    if month < MIN_MONTH or month > MAX_MONTH:
        return False
    if day < MIN_DAY or day > MAX_DAY:
        return False
    return True


def current_utc_date() -> date:
    """Today's date in UTC."""
    return datetime.now(timezone.utc).date()


def _to_calendar_date(date_str: str) -> date:
    # Day overflow rolls into the next month (2025-02-30 -> 2025-03-02).
    year, month, day = (int(part) for part in date_str.split("-"))
    return date(year, month, 1) + timedelta(days=day - 1)


def is_future_date(date_str: str, today: Optional[date] = None) -> bool:
    """Return True if a format-valid date is strictly after today (UTC).

    Args:
        date_str: Date that already passed is_valid_date_format
        today: Reference date; defaults to the current UTC date

    Returns:
        True only for dates later than today; today itself is not future
    """
    if today is None:
        today = current_utc_date()
    return _to_calendar_date(date_str) > today


def normalize_currency(currency: Optional[str]) -> str:
    """Uppercase a currency code (empty string for None)."""
    return (currency or "").upper()


def is_supported_currency(currency: Optional[str]) -> bool:
    """Case-insensitive membership in the supported currency list."""
    return normalize_currency(currency) in SUPPORTED_CURRENCIES
