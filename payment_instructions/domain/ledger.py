"""Balance transfer between two snapshot accounts"""

from typing import Dict
from payment_instructions.domain.models import Account, LedgerEntry


def execute_transfer(debit: Account, credit: Account, amount: int) -> Dict[str, LedgerEntry]:
    """
    Move amount from debit to credit.

    The snapshot records are left untouched; the new balances are returned
    keyed by account id so callers can apply them if they need to.

    Example:
        A1 500 -> 400, A2 50 -> 150 for amount 100
    """
    return {
        debit.id: LedgerEntry(balance_before=debit.balance, balance=debit.balance - amount),
        credit.id: LedgerEntry(balance_before=credit.balance, balance=credit.balance + amount),
    }
