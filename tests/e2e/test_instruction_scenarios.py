"""
E2E scenarios through the HTTP surface.

Scenarios:
- debit and credit transfers between same-currency accounts
- scheduled instructions left pending
- the validation cascade surfacing exactly one status code
"""

import pytest
from fastapi.testclient import TestClient

ACCOUNTS = [
    {"id": "acc-001", "balance": 230, "currency": "NGN"},
    {"id": "acc-002", "balance": 300, "currency": "NGN"},
    {"id": "usd.wallet@bank", "balance": 1000, "currency": "USD"},
    {"id": "usd.savings@bank", "balance": 0, "currency": "USD"},
]


def post(client: TestClient, instruction: str):
    response = client.post(
        "/payment-instructions",
        json={"accounts": ACCOUNTS, "instruction": instruction},
    )
    return response.status_code, response.json()["data"]


def test_debit_with_messy_whitespace(client: TestClient):
    """
    Multi-line instruction with tabs
    Expected: executes and moves 30 NGN
    """
    status, data = post(
        client,
        "debit   30 ngn\nfrom account acc-001\tfor credit to account acc-002",
    )

    assert status == 200
    assert data["status_code"] == "AP00"
    assert data["currency"] == "NGN"
    assert data["accounts"][0] == {"id": "acc-001", "balance": 200, "balance_before": 230, "currency": "NGN"}
    assert data["accounts"][1] == {"id": "acc-002", "balance": 330, "balance_before": 300, "currency": "NGN"}


def test_credit_with_past_date(client: TestClient):
    """
    Past execution date
    Expected: executes immediately
    """
    status, data = post(
        client,
        "CREDIT 1000 USD TO ACCOUNT usd.savings@bank FOR DEBIT FROM ACCOUNT usd.wallet@bank ON 2020-01-15",
    )

    assert status == 200
    assert data["status"] == "successful"
    assert data["debit_account"] == "usd.wallet@bank"
    assert data["credit_account"] == "usd.savings@bank"
    assert data["execute_by"] == "2020-01-15"


def test_scheduled_transfer_ignores_funds(client: TestClient):
    """
    Future date with amount above balance
    Expected: pending, funds checked only at execution time
    """
    status, data = post(
        client,
        "DEBIT 5000 NGN FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002 ON 2099-12-31",
    )

    assert status == 200
    assert data["status_code"] == "AP02"
    assert [a["balance"] for a in data["accounts"]] == [230, 300]


@pytest.mark.parametrize(
    "instruction, expected_code",
    [
        ("", "SY03"),
        ("SEND 10 NGN FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002", "SY03"),
        ("DEBIT 10", "SY01"),
        ("DEBIT -10 NGN FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002", "AM01"),
        ("DEBIT 10 EUR FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002", "CU02"),
        ("DEBIT 10 NGN ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002", "SY01"),
        ("DEBIT 10 NGN FROM acc-001 FOR CREDIT TO ACCOUNT acc-002", "SY02"),
        ("DEBIT 10 NGN FROM ACCOUNT acc#001 FOR CREDIT TO ACCOUNT acc-002", "AC04"),
        ("DEBIT 10 NGN FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002 ON 2025-13-01", "DT01"),
        ("DEBIT 10 NGN FROM ACCOUNT acc-009 FOR CREDIT TO ACCOUNT acc-002", "AC03"),
        ("DEBIT 10 NGN FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT usd.savings@bank", "CU01"),
        ("DEBIT 10 USD FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002", "CU01"),
        ("DEBIT 10 NGN FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-001", "AC02"),
        ("DEBIT 231 NGN FROM ACCOUNT acc-001 FOR CREDIT TO ACCOUNT acc-002", "AC01"),
    ],
)
def test_failure_codes(client: TestClient, instruction: str, expected_code: str):
    """Each malformed or invalid instruction surfaces one specific code"""
    status, data = post(client, instruction)

    assert status == 400
    assert data["status"] == "failed"
    assert data["status_code"] == expected_code
