"""
Keyword-positional grammar for payment instructions.

Two shapes are recognized:

    DEBIT <amount> <currency> ... FROM ACCOUNT <debit_id> ... FOR CREDIT TO ACCOUNT <credit_id>
    CREDIT <amount> <currency> ... TO ACCOUNT <credit_id> ... FOR DEBIT FROM ACCOUNT <debit_id>

The matcher walks one state per token role and stops at the first failure,
keeping whatever fields were already extracted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from payment_instructions.domain import messages
from payment_instructions.domain.models import ParsedInstruction
from payment_instructions.domain.validators import (
    is_positive_integer,
    is_supported_currency,
    is_valid_account_id,
)

ACCOUNT_KEYWORD = "ACCOUNT"
FOR_KEYWORD = "FOR"


class State(Enum):
    VERB = "verb"
    AMOUNT = "amount"
    CURRENCY = "currency"
    SEPARATORS = "separators"
    FIRST_ACCOUNT_KEYWORD = "first_account_keyword"
    FIRST_ID = "first_id"
    COUNTERPARTY_BLOCK = "counterparty_block"
    SECOND_ID = "second_id"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class VerbGrammar:
    """Keyword layout for one leading verb"""

    verb: str
    separator: str  # keyword introducing the first account
    first_role: str  # ParsedInstruction attribute for the first account
    counterparty_block: Tuple[str, ...]  # fixed tokens after FOR
    second_role: str


GRAMMARS: Dict[str, VerbGrammar] = {
    "DEBIT": VerbGrammar(
        verb="DEBIT",
        separator="FROM",
        first_role="debit_account",
        counterparty_block=("CREDIT", "TO", ACCOUNT_KEYWORD),
        second_role="credit_account",
    ),
    "CREDIT": VerbGrammar(
        verb="CREDIT",
        separator="TO",
        first_role="credit_account",
        counterparty_block=("DEBIT", "FROM", ACCOUNT_KEYWORD),
        second_role="debit_account",
    ),
}


@dataclass
class MatchResult:
    """Parsed fields plus the failure code, if matching stopped early"""

    instruction: ParsedInstruction
    failure: Optional[str] = None

    @property
    def matched(self) -> bool:
        return self.failure is None


class GrammarMatcher:
    """State machine over the uppercased and original-case token streams"""

    def __init__(self, tokens: List[str], raw_tokens: List[str], execute_by: Optional[str] = None):
        self.tokens = tokens
        self.raw_tokens = raw_tokens
        self.execute_by = execute_by
        self.parsed = ParsedInstruction()
        self.failure: Optional[str] = None

        self.grammar: Optional[VerbGrammar] = None
        self.separator_idx = -1
        self.for_idx = -1

        self._handlers: Dict[State, Callable[[], State]] = {
            State.VERB: self._match_verb,
            State.AMOUNT: self._match_amount,
            State.CURRENCY: self._match_currency,
            State.SEPARATORS: self._locate_separators,
            State.FIRST_ACCOUNT_KEYWORD: self._match_first_account_keyword,
            State.FIRST_ID: self._match_first_id,
            State.COUNTERPARTY_BLOCK: self._match_counterparty_block,
            State.SECOND_ID: self._match_second_id,
        }

    def match(self) -> MatchResult:
        state = State.VERB
        while state not in (State.DONE, State.FAILED):
            state = self._handlers[state]()
        return MatchResult(instruction=self.parsed, failure=self.failure)

    def _fail(self, code: str) -> State:
        self.failure = code
        return State.FAILED

    def _token(self, idx: int) -> Optional[str]:
        return self.tokens[idx] if 0 <= idx < len(self.tokens) else None

    def _raw_token(self, idx: int) -> Optional[str]:
        return self.raw_tokens[idx] if 0 <= idx < len(self.raw_tokens) else None

    def _index_of(self, keyword: str) -> int:
        try:
            return self.tokens.index(keyword)
        except ValueError:
            return -1

    # States

    def _match_verb(self) -> State:
        if not self.tokens:
            return self._fail(messages.MALFORMED_INSTRUCTION)

        self.grammar = GRAMMARS.get(self.tokens[0])
        if self.grammar is None:
            return self._fail(messages.MALFORMED_INSTRUCTION)

        self.parsed.type = self.grammar.verb
        self.parsed.execute_by = self.execute_by

        if len(self.tokens) < 3:
            return self._fail(messages.MISSING_KEYWORD)
        return State.AMOUNT

    def _match_amount(self) -> State:
        amount_token = self._raw_token(1)
        if not is_positive_integer(amount_token):
            return self._fail(messages.INVALID_AMOUNT)
        self.parsed.amount = int(amount_token)
        return State.CURRENCY

    def _match_currency(self) -> State:
        self.parsed.currency = self._raw_token(2).upper()
        if not is_supported_currency(self.parsed.currency):
            return self._fail(messages.UNSUPPORTED_CURRENCY)
        return State.SEPARATORS

    def _locate_separators(self) -> State:
        self.separator_idx = self._index_of(self.grammar.separator)
        self.for_idx = self._index_of(FOR_KEYWORD)

        if (
            self.separator_idx == -1
            or self.for_idx == -1
            or self.separator_idx <= 2
            or self.for_idx <= self.separator_idx
        ):
            return self._fail(messages.MISSING_KEYWORD)
        return State.FIRST_ACCOUNT_KEYWORD

    def _match_first_account_keyword(self) -> State:
        if self._token(self.separator_idx + 1) != ACCOUNT_KEYWORD:
            return self._fail(messages.INVALID_KEYWORD_ORDER)
        return State.FIRST_ID

    def _match_first_id(self) -> State:
        account_id = self._raw_token(self.separator_idx + 2)
        if not is_valid_account_id(account_id):
            return self._fail(messages.INVALID_ACCOUNT_ID)
        setattr(self.parsed, self.grammar.first_role, account_id)
        return State.COUNTERPARTY_BLOCK

    def _match_counterparty_block(self) -> State:
        for offset, keyword in enumerate(self.grammar.counterparty_block, start=1):
            if self._token(self.for_idx + offset) != keyword:
                return self._fail(messages.INVALID_KEYWORD_ORDER)
        return State.SECOND_ID

    def _match_second_id(self) -> State:
        id_idx = self.for_idx + len(self.grammar.counterparty_block) + 1
        account_id = self._raw_token(id_idx)
        if not is_valid_account_id(account_id):
            return self._fail(messages.INVALID_ACCOUNT_ID)
        setattr(self.parsed, self.grammar.second_role, account_id)
        return State.DONE


def match_instruction(tokens: List[str], raw_tokens: List[str], execute_by: Optional[str] = None) -> MatchResult:
    """Run the grammar over a tokenized main clause"""
    return GrammarMatcher(tokens, raw_tokens, execute_by).match()
