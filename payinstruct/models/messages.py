"""Human-readable status reasons.

One fixed message per status code. Messages never include request data.
"""

from types import MappingProxyType

from payinstruct.models.status import StatusCode


STATUS_REASONS = MappingProxyType({
    StatusCode.INVALID_AMOUNT: "Amount must be a positive integer",
    StatusCode.CURRENCY_MISMATCH: "Account currency mismatch",
    StatusCode.UNSUPPORTED_CURRENCY: "Unsupported currency. Only NGN, USD, GBP, and GHS are supported",
    StatusCode.INSUFFICIENT_FUNDS: "Insufficient funds in debit account",
    StatusCode.SAME_ACCOUNT: "Debit and credit accounts cannot be the same",
    StatusCode.ACCOUNT_NOT_FOUND: "Account not found",
    StatusCode.INVALID_ACCOUNT_ID: "Invalid account ID format",
    StatusCode.INVALID_DATE: "Invalid date format. Expected YYYY-MM-DD",
    StatusCode.MISSING_KEYWORD: "Missing required keyword",
    StatusCode.INVALID_KEYWORD_ORDER: "Invalid keyword order",
    StatusCode.MALFORMED: "Malformed instruction: unable to parse keywords",
    StatusCode.SUCCESS: "Transaction executed successfully",
    StatusCode.PENDING: "Transaction scheduled for future execution",
})


def status_reason(code: StatusCode) -> str:
    """Return the fixed reason text for a status code."""
    return STATUS_REASONS[StatusCode(code)]
