"""Integration tests for API endpoints.

These tests verify the HTTP status mapping and that every outcome shares one
response shape.
"""

from datetime import datetime, timedelta, timezone

RESULT_KEYS = {
    "type",
    "amount",
    "currency",
    "debit_account",
    "credit_account",
    "execute_by",
    "status",
    "status_reason",
    "status_code",
    "accounts",
}


def _post(test_client, accounts, instruction):
    return test_client.post(
        "/payment-instructions",
        json={"accounts": accounts, "instruction": instruction},
    )


class TestHealthEndpoint:

    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestPaymentInstructionEndpoint:
    """Test POST /payment-instructions."""

    def test_successful_instruction(self, test_client, sample_accounts):
        response = _post(test_client, sample_accounts, "DEBIT 50 USD FROM ACCOUNT A FOR CREDIT TO ACCOUNT B")

        assert response.status_code == 200
        data = response.json()
        assert set(data) == RESULT_KEYS
        assert data["type"] == "DEBIT"
        assert data["amount"] == 50
        assert data["currency"] == "USD"
        assert data["execute_by"] is None
        assert data["status"] == "successful"
        assert data["status_code"] == "AP00"
        assert data["accounts"] == [
            {"id": "A", "balance": 50, "balance_before": 100, "currency": "USD"},
            {"id": "B", "balance": 50, "balance_before": 0, "currency": "USD"},
        ]

    def test_pending_instruction(self, test_client, sample_accounts):
        future = (datetime.now(timezone.utc).date() + timedelta(days=30)).isoformat()
        response = _post(
            test_client,
            sample_accounts,
            f"CREDIT 500 USD TO ACCOUNT B FOR DEBIT FROM ACCOUNT A ON {future}",
        )

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "pending"
        assert data["status_code"] == "AP02"
        assert data["execute_by"] == future
        assert [a["balance"] for a in data["accounts"]] == [100, 0]

    def test_business_rule_failure_returns_400(self, test_client, sample_accounts):
        response = _post(test_client, sample_accounts, "DEBIT 150 USD FROM ACCOUNT A FOR CREDIT TO ACCOUNT B")

        assert response.status_code == 400
        data = response.json()
        assert set(data) == RESULT_KEYS
        assert data["status"] == "failed"
        assert data["status_code"] == "AC01"
        assert data["amount"] == 150
        assert all(a["balance"] == a["balance_before"] for a in data["accounts"])

    def test_malformed_instruction_returns_400(self, test_client, sample_accounts):
        response = _post(test_client, sample_accounts, "transfer fifty dollars please")

        assert response.status_code == 400
        data = response.json()
        assert set(data) == RESULT_KEYS
        assert data["status_code"] == "SY03"
        assert data["type"] is None
        assert data["accounts"] == []

    def test_unsupported_currency_returns_400(self, test_client, sample_accounts):
        response = _post(test_client, sample_accounts, "DEBIT 50 XYZ FROM ACCOUNT A FOR CREDIT TO ACCOUNT B")

        assert response.status_code == 400
        assert response.json()["status_code"] == "CU02"

    def test_missing_instruction_is_rejected(self, test_client, sample_accounts):
        response = test_client.post("/payment-instructions", json={"accounts": sample_accounts})

        assert response.status_code == 422

    def test_invalid_account_shape_is_rejected(self, test_client):
        response = _post(
            test_client,
            [{"id": "A", "currency": "USD"}],
            "DEBIT 50 USD FROM ACCOUNT A FOR CREDIT TO ACCOUNT B",
        )

        assert response.status_code == 422
