"""Domain models - pure Python dataclasses representing payment entities"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Account:
    """Candidate account from the caller's snapshot"""

    id: str
    balance: Number
    currency: str


@dataclass
class ParsedInstruction:
    """Fields extracted from the instruction, filled in as parsing advances"""

    type: Optional[str] = None  # "DEBIT" or "CREDIT"
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None


@dataclass(frozen=True)
class LedgerEntry:
    """Balance of one account before and after a transfer"""

    balance_before: Number
    balance: Number


@dataclass(frozen=True)
class AccountView:
    """Account as echoed back in the result"""

    id: str
    balance: Number
    balance_before: Number
    currency: str


@dataclass(frozen=True)
class TransactionResult:
    """Terminal output of instruction processing"""

    type: Optional[str]
    amount: Optional[int]
    currency: Optional[str]
    debit_account: Optional[str]
    credit_account: Optional[str]
    execute_by: Optional[str]
    status: str  # "successful" | "pending" | "failed"
    status_reason: str
    status_code: str
    accounts: List[AccountView] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
