"""Pytest fixtures and configuration for payinstruct tests."""

import pytest
from datetime import date
from fastapi.testclient import TestClient


@pytest.fixture
def today():
    """Fixed reference UTC date so execute-by comparisons are deterministic."""
    return date(2026, 1, 15)


@pytest.fixture
def sample_accounts():
    """Two USD accounts; the first one written in lower case."""
    return [
        {"id": "A", "balance": 100, "currency": "usd"},
        {"id": "B", "balance": 0, "currency": "USD"},
    ]


@pytest.fixture
def mixed_accounts():
    """Accounts with unreferenced and mismatched-currency entries."""
    return [
        {"id": "X", "balance": 5, "currency": "USD"},
        {"id": "B", "balance": 200, "currency": "USD"},
        {"id": "Y", "balance": 7, "currency": "USD"},
        {"id": "A", "balance": 10, "currency": "USD"},
        {"id": "C", "balance": 500, "currency": "GBP"},
    ]


@pytest.fixture
def test_client():
    """Create a FastAPI test client."""
    from payinstruct.api.app import app

    with TestClient(app) as client:
        yield client
