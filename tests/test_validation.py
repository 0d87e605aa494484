"""Tests for single-entry validation."""

from datetime import date
from decimal import Decimal

import pytest

from tradejournal.schemas.trade_entry import RawTradeEntry
from tradejournal.services.errors import ErrorKind
from tradejournal.services.validation import parse_number, validate_entry

from conftest import TODAY, row

ACCOUNTS = {"A1", "A2", "7"}
ASSETS = {"X", "Y"}


def _validate(raw, index=0):
    return validate_entry(raw, ACCOUNTS, ASSETS, index=index, today=TODAY)


# ---------------------------------------------------------------------------
# 1. Valid rows
# ---------------------------------------------------------------------------

def test_valid_row_is_normalized():
    result = _validate(row(notes="  breakout\nday  "))
    assert result.is_valid is True
    assert result.errors == []
    entry = result.entry
    assert entry.account_id == "A1"
    assert entry.start_balance == Decimal("1000")
    assert entry.daily_profit == Decimal("50")
    assert entry.lot_size == Decimal("0.1")
    assert entry.end_balance == Decimal("1050")
    assert entry.notes == "breakout day"
    assert entry.trade_date == TODAY


def test_negative_profit_is_valid():
    result = _validate(row(profit="-125.5"))
    assert result.is_valid
    assert result.entry.end_balance == Decimal("874.5")


def test_zero_lot_size_is_valid():
    assert _validate(row(lot=0)).is_valid


def test_numeric_values_and_snake_case_keys():
    raw = {
        "account_id": 7,
        "asset_id": "Y",
        "start_balance": 250,
        "daily_profit": 12.25,
        "lot_size": 1,
        "trade_date": "2025-01-31",
    }
    result = _validate(raw)
    assert result.is_valid
    assert result.entry.account_id == "7"
    assert result.entry.daily_profit == Decimal("12.25")
    assert result.entry.trade_date == date(2025, 1, 31)


def test_accepts_raw_trade_entry_model():
    raw = RawTradeEntry.model_validate(row(tradeDate=date(2025, 2, 1)))
    result = _validate(raw)
    assert result.is_valid
    assert result.entry.trade_date == date(2025, 2, 1)


# ---------------------------------------------------------------------------
# 2. Structural failures
# ---------------------------------------------------------------------------

def test_missing_start_balance_is_reported():
    result = _validate(row(start=""), index=1)
    assert result.is_valid is False
    assert result.index == 1
    assert result.kind == ErrorKind.VALIDATION_FAILED
    assert result.errors == ["startBalance is required"]
    assert result.entry is None


def test_missing_fields_reported_in_field_order():
    result = _validate({"dailyProfit": "1", "assetId": "  "})
    assert result.errors == [
        "accountId is required",
        "assetId is required",
        "startBalance is required",
        "lotSize is required",
    ]


@pytest.mark.parametrize("value", ["abc", "NaN", "inf", "-Infinity", True, [1], {"v": 1}])
def test_non_finite_or_non_numeric_rejected(value):
    result = _validate(row(profit=value))
    assert not result.is_valid
    assert "dailyProfit must be a finite number" in result.errors


def test_negative_lot_size_rejected():
    result = _validate(row(lot="-0.5"))
    assert result.errors == ["lotSize must be greater than or equal to 0"]


@pytest.mark.parametrize("value", ["1e400", "-1e400", "1000000000000", 1e13, "999999999999.999999999"])
def test_amount_beyond_column_range_rejected(value):
    result = _validate(row(profit=value))
    assert result.kind == ErrorKind.VALIDATION_FAILED
    assert result.errors == ["dailyProfit exceeds 12 integer digits"]


def test_amounts_rounded_to_stored_scale():
    result = _validate(row(start="123456789012.123456785", profit="0.000000001", lot="0.123456789"))
    assert result.is_valid
    entry = result.entry
    assert entry.start_balance == Decimal("123456789012.12345678")
    assert entry.daily_profit == 0
    assert entry.lot_size == Decimal("0.12345679")
    assert entry.end_balance == Decimal("123456789012.12345678")


@pytest.mark.parametrize("value", ["31/01/2025", "2025-1-5", "2025-02-30", 20250101])
def test_malformed_trade_date_rejected(value):
    result = _validate(row(tradeDate=value))
    assert result.errors == ["tradeDate must be in YYYY-MM-DD format"]


@pytest.mark.parametrize("raw", [None, 42, "accountId=A1", ["A1", "X"]])
def test_non_mapping_row_never_raises(raw):
    result = _validate(raw, index=3)
    assert result.is_valid is False
    assert result.index == 3
    assert result.kind == ErrorKind.VALIDATION_FAILED
    assert result.errors


# ---------------------------------------------------------------------------
# 3. Referential checks
# ---------------------------------------------------------------------------

def test_unknown_account_is_reference_not_found():
    result = _validate(row(account_id="A9"))
    assert result.kind == ErrorKind.REFERENCE_NOT_FOUND
    assert result.errors == ["Unknown accountId: A9"]


def test_unknown_asset_and_account_both_listed():
    result = _validate(row(account_id="A9", asset_id="Z"))
    assert result.errors == ["Unknown accountId: A9", "Unknown assetId: Z"]


def test_structural_error_outranks_reference_error():
    result = _validate(row(account_id="A9", lot="-1"))
    assert result.kind == ErrorKind.VALIDATION_FAILED
    assert result.errors == [
        "lotSize must be greater than or equal to 0",
        "Unknown accountId: A9",
    ]


def test_message_joins_errors():
    result = _validate(row(start="", lot=""))
    assert result.message == "startBalance is required; lotSize is required"


def test_parse_number_keeps_decimal_text_exact():
    assert parse_number(" 0.1 ") == Decimal("0.1")
    assert parse_number(0.1) == Decimal("0.1")
    assert parse_number(None) is None
