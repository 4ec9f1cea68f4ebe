"""Payment instruction processing pipeline.

normalize -> DEBIT grammar, else CREDIT grammar -> field validation ->
account resolution -> ordered business rules -> timing -> balances.

Rules are checked in a fixed order and only the first failure is reported.
Unparseable text yields a MALFORMED result directly; every later failure is
raised as PaymentInstructionError inside the pipeline and converted into a
failed PaymentResult by process_payment_instruction, so callers always get
one result shape.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, List, Optional, Union

from payinstruct.engine.accounts import build_account_snapshots, find_account_by_id
from payinstruct.engine.grammar import parse_instruction
from payinstruct.engine.response_builder import (
    build_failure_result,
    build_malformed_result,
    build_success_result,
    parsed_fields,
)
from payinstruct.engine.validators import (
    current_utc_date,
    is_future_date,
    is_supported_currency,
    is_valid_account_id,
    is_valid_date_format,
    normalize_currency,
    validate_amount,
)
from payinstruct.models.account import Account, AccountSnapshot
from payinstruct.models.instruction import ParsedInstruction
from payinstruct.models.messages import status_reason
from payinstruct.models.result import PaymentResult
from payinstruct.models.status import StatusCode

logger = logging.getLogger(__name__)


class PaymentInstructionError(ValueError):
    """A parsed instruction that broke a business rule.

    Carries everything needed to render a failed PaymentResult.
    """

    def __init__(
        self,
        code: StatusCode,
        *,
        parsed: Optional[dict] = None,
        accounts: Optional[List[AccountSnapshot]] = None,
        message: Optional[str] = None,
    ):
        super().__init__(message or status_reason(code))
        self.status_code = code
        self.parsed = parsed or {}
        self.accounts = accounts or []

    def to_result(self) -> PaymentResult:
        return build_failure_result(self.status_code, str(self), self.parsed, self.accounts)


def _as_account(account: Union[Account, dict]) -> Account:
    if isinstance(account, Account):
        return account
    return Account.model_validate(account)


def _validate_and_settle(
    parsed: ParsedInstruction,
    accounts: List[Account],
    today: date,
) -> PaymentResult:
    """Apply the business rules in order and build the successful/pending result."""
    currency = normalize_currency(parsed.currency)

    amount = validate_amount(parsed.amount)
    if amount is None:
        raise PaymentInstructionError(
            StatusCode.INVALID_AMOUNT, parsed=parsed_fields(parsed, currency=currency)
        )

    fields = parsed_fields(parsed, amount=amount, currency=currency)

    if not is_valid_account_id(parsed.debit_account_id):
        raise PaymentInstructionError(StatusCode.INVALID_ACCOUNT_ID, parsed=fields)
    if not is_valid_account_id(parsed.credit_account_id):
        raise PaymentInstructionError(StatusCode.INVALID_ACCOUNT_ID, parsed=fields)

    if parsed.debit_account_id == parsed.credit_account_id:
        raise PaymentInstructionError(StatusCode.SAME_ACCOUNT, parsed=fields)

    debit_account = find_account_by_id(accounts, parsed.debit_account_id)
    if debit_account is None:
        raise PaymentInstructionError(StatusCode.ACCOUNT_NOT_FOUND, parsed=fields)
    credit_account = find_account_by_id(accounts, parsed.credit_account_id)
    if credit_account is None:
        raise PaymentInstructionError(StatusCode.ACCOUNT_NOT_FOUND, parsed=fields)

    # From here on, failures carry the account snapshots
    snapshots = build_account_snapshots(
        accounts, parsed.debit_account_id, parsed.credit_account_id
    )

    if not is_supported_currency(currency):
        raise PaymentInstructionError(
            StatusCode.UNSUPPORTED_CURRENCY, parsed=fields, accounts=snapshots
        )

    debit_currency = normalize_currency(debit_account.currency)
    credit_currency = normalize_currency(credit_account.currency)
    if debit_currency != credit_currency:
        raise PaymentInstructionError(
            StatusCode.CURRENCY_MISMATCH, parsed=fields, accounts=snapshots
        )
    if debit_currency != currency:
        raise PaymentInstructionError(
            StatusCode.CURRENCY_MISMATCH, parsed=fields, accounts=snapshots
        )

    execute_now = True
    if parsed.execute_by:
        if not is_valid_date_format(parsed.execute_by):
            raise PaymentInstructionError(
                StatusCode.INVALID_DATE, parsed=fields, accounts=snapshots
            )
        execute_now = not is_future_date(parsed.execute_by, today)

    if execute_now and debit_account.balance < amount:
        raise PaymentInstructionError(
            StatusCode.INSUFFICIENT_FUNDS, parsed=fields, accounts=snapshots
        )

    return build_success_result(fields, snapshots, execute_now=execute_now)


def process_payment_instruction(
    accounts: Iterable[Union[Account, dict]],
    instruction: str,
    *,
    today: Optional[date] = None,
) -> PaymentResult:
    """Parse, validate and settle a payment instruction.

    Args:
        accounts: Caller-supplied accounts (Account models or plain dicts)
        instruction: Free-text instruction in the DEBIT/CREDIT DSL
        today: Reference UTC date for execute-by comparisons; sampled once
            from the clock when omitted

    Returns:
        PaymentResult with status successful, pending or failed
    """
    if today is None:
        today = current_utc_date()
    account_list = [_as_account(account) for account in accounts]

    parsed = parse_instruction(instruction)
    if parsed is None:
        logger.info(f"Instruction rejected: {StatusCode.MALFORMED.value}")
        return build_malformed_result()

    try:
        result = _validate_and_settle(parsed, account_list, today)
    except PaymentInstructionError as e:
        logger.info(f"{parsed.type.value} instruction rejected: {e.status_code.value} ({e})")
        return e.to_result()

    logger.info(
        f"{parsed.type.value} instruction {result.status}: {result.status_code} "
        f"({parsed.debit_account_id} -> {parsed.credit_account_id})"
    )
    return result
