"""Assembly of PaymentResult objects."""

from typing import List, Optional

from payinstruct.models.account import AccountSnapshot
from payinstruct.models.instruction import ParsedInstruction
from payinstruct.models.messages import status_reason
from payinstruct.models.result import PaymentResult, PaymentStatus
from payinstruct.models.status import StatusCode


def parsed_fields(
    parsed: ParsedInstruction,
    *,
    amount: Optional[int] = None,
    currency: Optional[str] = None,
) -> dict:
    """Best-effort instruction fields for a result.

    amount is only reported once it has been validated; currency is reported
    uppercased.
    """
    return {
        "type": parsed.type,
        "amount": amount,
        "currency": currency if currency is not None else parsed.currency.upper(),
        "debit_account": parsed.debit_account_id,
        "credit_account": parsed.credit_account_id,
        "execute_by": parsed.execute_by,
    }


def apply_transfer(
    snapshots: List[AccountSnapshot],
    debit_account_id: str,
    credit_account_id: str,
    amount: int,
) -> List[AccountSnapshot]:
    """Return new snapshots with amount moved from debit to credit.

    balance_before is left untouched.
    """
    updated: List[AccountSnapshot] = []
    for snapshot in snapshots:
        if snapshot.id == debit_account_id:
            snapshot = snapshot.model_copy(update={"balance": snapshot.balance - amount})
        elif snapshot.id == credit_account_id:
            snapshot = snapshot.model_copy(update={"balance": snapshot.balance + amount})
        updated.append(snapshot)
    return updated


def build_malformed_result() -> PaymentResult:
    """Result for text that fits neither grammar."""
    return PaymentResult(
        status=PaymentStatus.FAILED,
        status_reason=status_reason(StatusCode.MALFORMED),
        status_code=StatusCode.MALFORMED,
        accounts=[],
    )


def build_failure_result(
    code: StatusCode,
    reason: str,
    fields: Optional[dict] = None,
    accounts: Optional[List[AccountSnapshot]] = None,
) -> PaymentResult:
    return PaymentResult(
        **(fields or {}),
        status=PaymentStatus.FAILED,
        status_reason=reason,
        status_code=code,
        accounts=accounts or [],
    )


def build_success_result(
    fields: dict,
    snapshots: List[AccountSnapshot],
    *,
    execute_now: bool,
) -> PaymentResult:
    """Result for an instruction that passed every check.

    Immediate execution reports post-transfer balances with AP00; deferred
    execution reports the original balances with AP02.
    """
    if execute_now:
        accounts = apply_transfer(
            snapshots, fields["debit_account"], fields["credit_account"], fields["amount"]
        )
        status, code = PaymentStatus.SUCCESSFUL, StatusCode.SUCCESS
    else:
        accounts = snapshots
        status, code = PaymentStatus.PENDING, StatusCode.PENDING

    return PaymentResult(
        **fields,
        status=status,
        status_reason=status_reason(code),
        status_code=code,
        accounts=accounts,
    )
