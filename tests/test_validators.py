"""Tests for field validators."""

import pytest
from datetime import date

from payinstruct.engine.validators import (
    current_utc_date,
    is_future_date,
    is_supported_currency,
    is_valid_account_id,
    is_valid_date_format,
    normalize_currency,
    validate_amount,
)


class TestValidateAmount:
    """Amounts are unsigned, all-digit, non-zero integers."""

    @pytest.mark.parametrize("raw,expected", [("50", 50), ("1", 1), ("007", 7), ("123456789", 123456789)])
    def test_accepts_positive_integers(self, raw, expected):
        assert validate_amount(raw) == expected

    @pytest.mark.parametrize("raw", ["0", "000", "-5", "+5", "5.0", "5.", "", "1e3", "12a", " 5", "５"])
    def test_rejects_invalid(self, raw):
        assert validate_amount(raw) is None

    def test_rejects_non_string(self):
        assert validate_amount(None) is None
        assert validate_amount(50) is None


class TestAccountIdFormat:
    """Account ids allow letters, digits, '-', '.' and '@'."""

    @pytest.mark.parametrize("account_id", ["A", "acc-1", "user.name@bank", "12345", "a.b-c@d"])
    def test_valid(self, account_id):
        assert is_valid_account_id(account_id) is True

    @pytest.mark.parametrize("account_id", ["", "acc_1", "acc#1", "A!", "ça", "acc 1"])
    def test_invalid(self, account_id):
        assert is_valid_account_id(account_id) is False

    def test_non_string(self):
        assert is_valid_account_id(None) is False


class TestDateFormat:
    """YYYY-MM-DD with range checks only."""

    def test_no_days_in_month_check(self):
        assert is_valid_date_format("2025-02-30") is True
        assert is_valid_date_format("2025-04-31") is True
        assert is_valid_date_format("2023-02-29") is True

    @pytest.mark.parametrize("value", ["1900-01-01", "9999-12-31", "2026-06-15"])
    def test_valid_bounds(self, value):
        assert is_valid_date_format(value) is True

    @pytest.mark.parametrize(
        "value",
        [
            "1899-12-31",
            "2025-13-01",
            "2025-00-10",
            "2025-01-32",
            "2025-01-00",
            "2025-2-30",
            "2025/01/01",
            "20250101xx",
            "2025-01-1a",
            "tomorrow",
            "",
        ],
    )
    def test_invalid(self, value):
        assert is_valid_date_format(value) is False

    def test_non_string(self):
        assert is_valid_date_format(None) is False


class TestFutureDate:
    """Only dates strictly after today (UTC) are future."""

    def test_today_is_not_future(self):
        assert is_future_date("2026-01-15", today=date(2026, 1, 15)) is False

    def test_tomorrow_is_future(self):
        assert is_future_date("2026-01-16", today=date(2026, 1, 15)) is True

    def test_past_is_not_future(self):
        assert is_future_date("2025-12-31", today=date(2026, 1, 15)) is False

    def test_day_overflow_rolls_into_next_month(self):
        # 2026-02-30 is treated as 2026-03-02
        assert is_future_date("2026-02-30", today=date(2026, 3, 1)) is True
        assert is_future_date("2026-02-30", today=date(2026, 3, 2)) is False

    def test_defaults_to_current_utc_date(self):
        assert is_future_date(current_utc_date().isoformat()) is False


class TestCurrency:
    """Supported currencies: NGN, USD, GBP, GHS (any case)."""

    @pytest.mark.parametrize("currency", ["NGN", "usd", "Gbp", "ghs"])
    def test_supported(self, currency):
        assert is_supported_currency(currency) is True

    @pytest.mark.parametrize("currency", ["XYZ", "EUR", "", None, "US"])
    def test_unsupported(self, currency):
        assert is_supported_currency(currency) is False

    def test_normalize_always_uppercases(self):
        assert normalize_currency("ngn") == "NGN"
        assert normalize_currency("xyz") == "XYZ"
        assert normalize_currency(None) == ""
