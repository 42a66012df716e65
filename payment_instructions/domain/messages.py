"""Status codes and human-readable reasons returned with every result"""

# Syntax / parsing
MISSING_KEYWORD = "SY01"
INVALID_KEYWORD_ORDER = "SY02"
MALFORMED_INSTRUCTION = "SY03"

# Amount
INVALID_AMOUNT = "AM01"

# Currency
ACCOUNT_CURRENCY_MISMATCH = "CU01"
UNSUPPORTED_CURRENCY = "CU02"

# Accounts
INSUFFICIENT_FUNDS = "AC01"
SAME_ACCOUNT_ERROR = "AC02"
ACCOUNT_NOT_FOUND = "AC03"
INVALID_ACCOUNT_ID = "AC04"

# Date
INVALID_DATE_FORMAT = "DT01"

# Execution
TRANSACTION_SUCCESSFUL = "AP00"
TRANSACTION_PENDING = "AP02"

STATUS_SUCCESSFUL = "successful"
STATUS_PENDING = "pending"
STATUS_FAILED = "failed"

REASONS = {
    MISSING_KEYWORD: "Missing required keyword(s) in instruction",
    INVALID_KEYWORD_ORDER: "Invalid keyword order in instruction",
    MALFORMED_INSTRUCTION: "Malformed instruction: unable to parse keywords",
    INVALID_AMOUNT: "Amount must be a positive integer",
    ACCOUNT_CURRENCY_MISMATCH: "Account currency mismatch",
    UNSUPPORTED_CURRENCY: "Unsupported currency. Only NGN, USD, GBP, and GHS are supported",
    INSUFFICIENT_FUNDS: "Insufficient funds in debit account",
    SAME_ACCOUNT_ERROR: "Debit and credit accounts cannot be the same",
    ACCOUNT_NOT_FOUND: "Account not found",
    INVALID_ACCOUNT_ID: "Invalid account ID format",
    INVALID_DATE_FORMAT: "Invalid date format. Expect YYYY-MM-DD",
    TRANSACTION_SUCCESSFUL: "Transaction executed successfully",
    TRANSACTION_PENDING: "Transaction scheduled for future execution",
}


def reason_for(code: str) -> str:
    """Human-readable reason for a status code"""
    return REASONS[code]


def status_for(code: str) -> str:
    """Map a status code to successful | pending | failed"""
    if code == TRANSACTION_SUCCESSFUL:
        return STATUS_SUCCESSFUL
    if code == TRANSACTION_PENDING:
        return STATUS_PENDING
    return STATUS_FAILED
