"""Pytest fixtures for testing"""

import pytest
from datetime import date
from typing import List
from fastapi.testclient import TestClient
from payment_instructions.api.main import create_app
from payment_instructions.domain.models import Account


@pytest.fixture
def client() -> TestClient:
    """Create FastAPI test client"""
    app = create_app()
    return TestClient(app)


@pytest.fixture
def today() -> date:
    """Fixed reference date for scheduling decisions"""
    return date(2025, 6, 15)


@pytest.fixture
def usd_accounts() -> List[Account]:
    """Two USD accounts: A1 funded, A2 nearly empty"""
    return [
        Account(id="A1", balance=500, currency="USD"),
        Account(id="A2", balance=50, currency="USD"),
    ]


@pytest.fixture
def mixed_accounts() -> List[Account]:
    """Snapshot with accounts in several currencies"""
    return [
        Account(id="N1", balance=10000, currency="NGN"),
        Account(id="N2", balance=0, currency="ngn"),
        Account(id="G1", balance=300, currency="GBP"),
        Account(id="U1", balance=1000, currency="USD"),
    ]


@pytest.fixture
def usd_payload() -> dict:
    """Request body accounts matching usd_accounts"""
    return {
        "accounts": [
            {"id": "A1", "balance": 500, "currency": "USD"},
            {"id": "A2", "balance": 50, "currency": "USD"},
        ],
    }
