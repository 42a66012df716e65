"""Assembly of the final TransactionResult"""

from typing import Dict, List, Optional, Sequence

from payment_instructions.domain.messages import reason_for, status_for
from payment_instructions.domain.models import (
    Account,
    AccountView,
    LedgerEntry,
    ParsedInstruction,
    TransactionResult,
)


def build_account_views(
    accounts: Sequence[Account],
    debit_id: Optional[str],
    credit_id: Optional[str],
    ledger: Optional[Dict[str, LedgerEntry]] = None,
) -> List[AccountView]:
    """Views for the snapshot records matching the debit or credit id, in snapshot order"""
    ledger = ledger or {}
    wanted = {account_id for account_id in (debit_id, credit_id) if account_id is not None}

    views = []
    for account in accounts:
        if account.id not in wanted:
            continue
        entry = ledger.get(account.id)
        views.append(
            AccountView(
                id=account.id,
                balance=entry.balance if entry else account.balance,
                balance_before=entry.balance_before if entry else account.balance,
                currency=account.currency.upper(),
            )
        )
    return views


def build_result(
    parsed: ParsedInstruction,
    code: str,
    accounts: Sequence[Account],
    ledger: Optional[Dict[str, LedgerEntry]] = None,
) -> TransactionResult:
    return TransactionResult(
        type=parsed.type,
        amount=parsed.amount,
        currency=parsed.currency,
        debit_account=parsed.debit_account,
        credit_account=parsed.credit_account,
        execute_by=parsed.execute_by,
        status=status_for(code),
        status_reason=reason_for(code),
        status_code=code,
        accounts=build_account_views(accounts, parsed.debit_account, parsed.credit_account, ledger),
    )
