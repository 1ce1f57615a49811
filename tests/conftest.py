"""Pytest configuration for test isolation.

The CLI loads ``.env`` from the working directory and configures the package
logger once per process. Both would leak between tests, so every test runs in
its own temporary working directory with the package environment variables
cleared and logging reset afterwards.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from transaction_ledger.config import DATA_PATH_ENV_VAR, LOG_LEVEL_ENV_VAR
from transaction_ledger.logging_setup import reset_logging

SAMPLE_TRANSACTIONS: tuple[dict[str, Any], ...] = (
    {
        "transaction_id": "1",
        "transaction_date": "2019-01-01",
        "transaction_amount": "100.00",
        "transaction_type": "debit",
        "transaction_description": "Payment for groceries",
        "merchant_name": "SuperMart",
        "card_type": "Visa",
    },
    {
        "transaction_id": "2",
        "transaction_date": "2019-01-02",
        "transaction_amount": "50.00",
        "transaction_type": "credit",
        "transaction_description": "Refund for returned item",
        "merchant_name": "OnlineShop",
        "card_type": "MasterCard",
    },
    {
        "transaction_id": "3",
        "transaction_date": "2019-01-14",
        "transaction_amount": "100.00",
        "transaction_type": "debit",
        "transaction_description": "Dinner with friends",
        "merchant_name": "Bistro",
        "card_type": "Visa",
    },
    {
        "transaction_id": "4",
        "transaction_date": "2019-02-14",
        "transaction_amount": "200.00",
        "transaction_type": "debit",
        "transaction_description": "Flowers",
        "merchant_name": "SuperMart",
        "card_type": "Visa",
    },
    {
        "transaction_id": "5",
        "transaction_date": "2019-02-20",
        "transaction_amount": "75.50",
        "transaction_type": "credit",
        "transaction_description": "Salary bonus",
        "merchant_name": "Employer",
        "card_type": "MasterCard",
    },
    {
        "transaction_id": "6",
        "transaction_date": "2019-03-05",
        "transaction_amount": "20.00",
        "transaction_type": "debit",
        "transaction_description": "Coffee",
        "merchant_name": "CafeCentral",
        "card_type": "Amex",
    },
)


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Run each test in a fresh cwd with package env vars unset."""

    monkeypatch.chdir(tmp_path)
    for name in (DATA_PATH_ENV_VAR, LOG_LEVEL_ENV_VAR):
        # setenv first so teardown also removes values a test's .env injected.
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    yield
    reset_logging()


@pytest.fixture
def sample_transactions() -> list[dict[str, Any]]:
    return [dict(t) for t in SAMPLE_TRANSACTIONS]


@pytest.fixture
def transactions_file(tmp_path: Path, sample_transactions: list[dict[str, Any]]) -> Path:
    path = tmp_path / "data" / "transactions.json"
    path.parent.mkdir()
    path.write_text(json.dumps(sample_transactions, indent=2), encoding="utf-8")
    return path
