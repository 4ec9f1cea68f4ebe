"""Application status codes reported in every result."""

from enum import Enum


class StatusCode(str, Enum):
    """Fixed status code table."""

    # Amount
    INVALID_AMOUNT = "AM01"

    # Currency
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"

    # Account
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    INVALID_ACCOUNT_ID = "AC04"

    # Date
    INVALID_DATE = "DT01"

    # Syntax (SY01/SY02 are reserved; the relaxed grammar only reports SY03)
    MISSING_KEYWORD = "SY01"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED = "SY03"

    # Success
    SUCCESS = "AP00"
    PENDING = "AP02"
