"""Unit tests for field validators"""

import pytest
from payment_instructions.domain.validators import (
    is_positive_integer,
    is_supported_currency,
    is_valid_account_id,
    is_valid_date,
)


@pytest.mark.parametrize("token", ["1", "100", "0042", "999999999999"])
def test_is_positive_integer_accepts_digits(token):
    assert is_positive_integer(token)


@pytest.mark.parametrize("token", ["0", "000", "-5", "+5", "10.5", "1e3", "abc", "", None, "１２"])
def test_is_positive_integer_rejects(token):
    """Test signs, decimals, zero and non-ASCII digits are rejected"""
    assert not is_positive_integer(token)


@pytest.mark.parametrize("token", ["NGN", "USD", "GBP", "GHS", "usd", "Ghs"])
def test_is_supported_currency(token):
    assert is_supported_currency(token)


@pytest.mark.parametrize("token", ["EUR", "XYZ", "US", "", None])
def test_is_supported_currency_rejects(token):
    assert not is_supported_currency(token)


@pytest.mark.parametrize("token", ["A1", "acc-001", "john.doe@bank", "X"])
def test_is_valid_account_id(token):
    assert is_valid_account_id(token)


@pytest.mark.parametrize("token", ["A_1", "A#1", "acc/1", "é1", "", None])
def test_is_valid_account_id_rejects(token):
    assert not is_valid_account_id(token)


@pytest.mark.parametrize("value", ["2025-01-01", "2024-02-29", "2000-02-29", "1999-12-31"])
def test_is_valid_date(value):
    assert is_valid_date(value)


@pytest.mark.parametrize(
    "value",
    [
        "2023-02-29",  # not a leap year
        "1900-02-29",  # century rule
        "2025-13-01",
        "2025-00-10",
        "2025-04-31",
        "2025-01-00",
        "2025-1-01",
        "25-01-01",
        "2025/01/01",
        "2025-01-01-01",
        "abcd-ef-gh",
        "",
        None,
    ],
)
def test_is_valid_date_rejects(value):
    assert not is_valid_date(value)
