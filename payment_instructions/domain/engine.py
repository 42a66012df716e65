"""Payment instruction engine - parse, validate and execute in one pass"""

import logging
from datetime import date
from typing import Sequence

from payment_instructions.domain import messages
from payment_instructions.domain.grammar import match_instruction
from payment_instructions.domain.ledger import execute_transfer
from payment_instructions.domain.models import Account, ParsedInstruction, TransactionResult
from payment_instructions.domain.normalizer import normalize_whitespace, split_date_clause, tokenize
from payment_instructions.domain.responses import build_result
from payment_instructions.domain.rules import evaluate_business_rules
from payment_instructions.domain.validators import is_valid_date
from payment_instructions.utils.date_utils import utc_today


def _process(accounts: Sequence[Account], instruction: str, today: date) -> TransactionResult:
    normalized = normalize_whitespace(instruction)
    main_clause, execute_by = split_date_clause(normalized)
    tokens, raw_tokens = tokenize(main_clause)

    match = match_instruction(tokens, raw_tokens, execute_by)
    parsed = match.instruction
    if not match.matched:
        return build_result(parsed, match.failure, accounts)

    if parsed.execute_by is not None and not is_valid_date(parsed.execute_by):
        return build_result(parsed, messages.INVALID_DATE_FORMAT, accounts)

    outcome = evaluate_business_rules(parsed, accounts, today)
    if not outcome.cleared:
        return build_result(parsed, outcome.code, accounts)

    ledger = execute_transfer(outcome.debit, outcome.credit, parsed.amount)
    return build_result(parsed, messages.TRANSACTION_SUCCESSFUL, accounts, ledger)


def process_instruction(
    accounts: Sequence[Account],
    instruction: str,
    today: date | None = None,
) -> TransactionResult:
    """
    Main entry point: turn a free-text instruction into a TransactionResult.

    Flow:
    1. Normalize whitespace and split off the "ON <date>" clause
    2. Match the DEBIT/CREDIT grammar and validate fields
    3. Validate the execution date, if any
    4. Apply business rules against the snapshot
    5. Execute the transfer, or report pending/failed

    Recognized failures come back as results with a status code. Anything
    unexpected is logged and reported as a malformed instruction.

    Args:
        accounts: Caller's account snapshot (never mutated)
        instruction: Raw instruction text
        today: Reference date for scheduling (default: current UTC date)
    """
    try:
        return _process(accounts, instruction, today or utc_today())
    except Exception as e:
        logging.error(f"Unexpected error while processing instruction: {e}", exc_info=True)
        return build_result(ParsedInstruction(), messages.MALFORMED_INSTRUCTION, [])
