"""POST /payment-instructions - parse and execute a payment instruction"""

import time
from fastapi import APIRouter, Request, Response

from payment_instructions.api.v1.schemas import PaymentInstructionRequest, PaymentInstructionResponse
from payment_instructions.api.dependencies import get_request_id
from payment_instructions.domain.engine import process_instruction
from payment_instructions.domain.messages import STATUS_FAILED
from payment_instructions.domain.models import Account
from payment_instructions.infrastructure.observability.metrics import record_instruction
from payment_instructions.infrastructure.observability.logging import log_instruction_outcome

router = APIRouter()


@router.post(
    "/payment-instructions",
    response_model=PaymentInstructionResponse,
    responses={400: {"model": PaymentInstructionResponse}},
)
def create_payment_instruction(request_body: PaymentInstructionRequest, request: Request, response: Response):
    """
    Parse, validate and execute a payment instruction.

    Flow:
    1. Convert the validated snapshot into domain accounts
    2. Run the instruction engine
    3. Record metrics and logs
    4. Return 200 for successful/pending, 400 for failed
    """
    start_time = time.time()
    request_id = get_request_id(request)

    accounts = [
        Account(id=account.id, balance=account.balance, currency=account.currency)
        for account in request_body.accounts
    ]
    result = process_instruction(accounts, request_body.instruction)

    duration_ms = (time.time() - start_time) * 1000
    record_instruction(result.status, result.status_code, result.amount, result.currency)
    log_instruction_outcome(
        request_id,
        result.status,
        result.status_code,
        result.type,
        result.amount,
        result.currency,
        duration_ms,
    )

    if result.status == STATUS_FAILED:
        response.status_code = 400

    return PaymentInstructionResponse(message=result.status_reason, data=result.to_dict())
