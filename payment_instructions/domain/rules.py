"""Business rules evaluated against the account snapshot, in fixed precedence"""

from dataclasses import dataclass
from datetime import date
from typing import Callable, List, Optional, Sequence

from payment_instructions.domain import messages
from payment_instructions.domain.models import Account, ParsedInstruction
from payment_instructions.utils.date_utils import compare_to_day


@dataclass(frozen=True)
class RuleContext:
    parsed: ParsedInstruction
    debit: Optional[Account]
    credit: Optional[Account]
    today: date


@dataclass(frozen=True)
class RuleOutcome:
    """
    Result of the rule cascade.

    code is a failure code, TRANSACTION_PENDING for a future-dated
    instruction, or TRANSACTION_SUCCESSFUL when the transfer may run now.
    """

    code: str
    debit: Optional[Account]
    credit: Optional[Account]

    @property
    def cleared(self) -> bool:
        return self.code == messages.TRANSACTION_SUCCESSFUL


def find_account(accounts: Sequence[Account], account_id: Optional[str]) -> Optional[Account]:
    """First snapshot record with a matching id"""
    if account_id is None:
        return None
    return next((account for account in accounts if account.id == account_id), None)


def check_accounts_exist(ctx: RuleContext) -> Optional[str]:
    if ctx.debit is None or ctx.credit is None:
        return messages.ACCOUNT_NOT_FOUND
    return None


def check_currency_agreement(ctx: RuleContext) -> Optional[str]:
    debit_currency = ctx.debit.currency.upper()
    if debit_currency != ctx.credit.currency.upper() or debit_currency != ctx.parsed.currency:
        return messages.ACCOUNT_CURRENCY_MISMATCH
    return None


def check_distinct_accounts(ctx: RuleContext) -> Optional[str]:
    if ctx.parsed.debit_account == ctx.parsed.credit_account:
        return messages.SAME_ACCOUNT_ERROR
    return None


def check_schedule(ctx: RuleContext) -> Optional[str]:
    # Same day or past dates execute immediately
    if ctx.parsed.execute_by is not None and compare_to_day(ctx.parsed.execute_by, ctx.today) > 0:
        return messages.TRANSACTION_PENDING
    return None


def check_sufficient_funds(ctx: RuleContext) -> Optional[str]:
    if ctx.parsed.amount > ctx.debit.balance:
        return messages.INSUFFICIENT_FUNDS
    return None


RULES: List[Callable[[RuleContext], Optional[str]]] = [
    check_accounts_exist,
    check_currency_agreement,
    check_distinct_accounts,
    check_schedule,
    check_sufficient_funds,
]


def evaluate_business_rules(
    parsed: ParsedInstruction,
    accounts: Sequence[Account],
    today: date,
) -> RuleOutcome:
    """
    Run the rule cascade over a fully parsed instruction.

    Order: existence -> currency agreement -> distinct accounts ->
    scheduling -> funds. The first rule that returns a code decides.
    """
    ctx = RuleContext(
        parsed=parsed,
        debit=find_account(accounts, parsed.debit_account),
        credit=find_account(accounts, parsed.credit_account),
        today=today,
    )

    for rule in RULES:
        code = rule(ctx)
        if code is not None:
            return RuleOutcome(code=code, debit=ctx.debit, credit=ctx.credit)

    return RuleOutcome(code=messages.TRANSACTION_SUCCESSFUL, debit=ctx.debit, credit=ctx.credit)
