"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field, StrictInt, field_validator
from typing import Annotated, List, Optional, Union

# JSON numbers only: no numeric strings, booleans, NaN or Infinity
Balance = Union[StrictInt, Annotated[float, Field(strict=True, allow_inf_nan=False)]]


class AccountSchema(BaseModel):
    """Candidate account supplied with the instruction"""

    id: str = Field(..., description="Account identifier")
    balance: Balance = Field(..., description="Current balance")
    currency: str = Field(..., min_length=3, max_length=3, description="ISO currency code")

    @field_validator("id", mode="before")
    @classmethod
    def strip_id(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("currency", mode="before")
    @classmethod
    def normalize_currency(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


class PaymentInstructionRequest(BaseModel):
    """Request body for POST /payment-instructions"""

    accounts: List[AccountSchema]
    instruction: str = Field(..., description="Free-text payment instruction")

    @field_validator("instruction", mode="before")
    @classmethod
    def strip_instruction(cls, value):
        return value.strip() if isinstance(value, str) else value


class AccountViewSchema(BaseModel):
    """Account balances before and after the instruction"""

    id: str
    balance: Union[int, float]
    balance_before: Union[int, float]
    currency: str


class TransactionResultSchema(BaseModel):
    """Outcome of an instruction"""

    type: Optional[str] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: str
    status_reason: str
    status_code: str
    accounts: List[AccountViewSchema]


class PaymentInstructionResponse(BaseModel):
    """Response envelope for POST /payment-instructions"""

    message: str
    data: TransactionResultSchema
