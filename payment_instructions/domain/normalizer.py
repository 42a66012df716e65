"""Instruction normalization, date clause splitting and tokenization"""

from typing import List, Optional, Tuple

DATE_MARKER = " ON "


def normalize_whitespace(raw: str) -> str:
    """Collapse runs of whitespace (tabs, newlines included) into single spaces and trim"""
    return " ".join(raw.split())


def split_date_clause(normalized: str) -> Tuple[str, Optional[str]]:
    """
    Separate an optional trailing "ON <date>" clause from the main clause.

    The first case-insensitive " ON " wins. Only the token right after it is
    taken as the date candidate; it is not validated here.

    Returns:
        (main_clause, execute_by or None)
    """
    idx = normalized.upper().find(DATE_MARKER)
    if idx == -1:
        return normalized, None

    date_part = normalized[idx + len(DATE_MARKER):].strip()
    execute_by = date_part.split(" ")[0]
    return normalized[:idx].strip(), execute_by


def tokenize(clause: str) -> Tuple[List[str], List[str]]:
    """
    Split a clause on spaces, dropping empty tokens.

    Returns:
        (uppercased tokens for keyword matching, original-case tokens)
    """
    raw_tokens = [token for token in clause.split(" ") if token]
    return [token.upper() for token in raw_tokens], raw_tokens
