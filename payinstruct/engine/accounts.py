"""Account resolution against the caller-supplied account list."""

from typing import List, Optional, Sequence, Set

from payinstruct.engine.validators import normalize_currency
from payinstruct.models.account import Account, AccountSnapshot


def find_account_by_id(accounts: Sequence[Account], account_id: str) -> Optional[Account]:
    """Return the first account whose id matches exactly (case-sensitive)."""
    for account in accounts:
        if account.id == account_id:
            return account
    return None


def build_account_snapshots(
    accounts: Sequence[Account],
    debit_account_id: str,
    credit_account_id: str,
) -> List[AccountSnapshot]:
    """Build snapshots for the two referenced accounts.

    Snapshots keep the relative order of the input list. If an id appears more
    than once, only its first occurrence (the one the resolver returns) is used.
    Balances start equal to balance_before.
    """
    wanted = {debit_account_id, credit_account_id}
    seen: Set[str] = set()
    snapshots: List[AccountSnapshot] = []
    for account in accounts:
        if account.id in wanted and account.id not in seen:
            seen.add(account.id)
            snapshots.append(
                AccountSnapshot(
                    id=account.id,
                    balance=account.balance,
                    balance_before=account.balance,
                    currency=normalize_currency(account.currency),
                )
            )
    return snapshots
