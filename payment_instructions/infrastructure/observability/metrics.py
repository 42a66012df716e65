"""Prometheus metrics for monitoring instruction outcomes and transferred volume"""

from typing import Optional
from prometheus_client import Counter, Histogram

# Instruction metrics
instruction_counter = Counter(
    "payment_instruction_total",
    "Total payment instructions processed",
    ["status", "status_code"],  # successful | pending | failed, AP00 | SY01 | ...
)

transfer_amount_counter = Counter(
    "payment_transfer_amount_total",
    "Sum of amounts moved by executed instructions",
    ["currency"],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_instruction(status: str, status_code: str, amount: Optional[int], currency: Optional[str]) -> None:
    """Record outcome counts, and transferred volume for executed instructions"""
    instruction_counter.labels(status=status, status_code=status_code).inc()

    if status == "successful" and amount is not None and currency is not None:
        transfer_amount_counter.labels(currency=currency).inc(amount)
