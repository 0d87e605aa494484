"""Tests for the two balance derivation policies."""

from datetime import date, datetime
from decimal import Decimal
from types import SimpleNamespace

from tradejournal.services.balance import current_balance, latest_entry, total_profit_balance

ACCOUNT = SimpleNamespace(id="A1", initial_capital=Decimal("1000"))


def _entry(start, profit, trade_date, ts=datetime(2025, 1, 1, 12, 0), account_id="A1", tag=None):
    return SimpleNamespace(
        account_id=account_id,
        start_balance=Decimal(start),
        daily_profit=Decimal(profit),
        trade_date=trade_date,
        timestamp=ts,
        tag=tag,
    )


def test_empty_history_returns_initial_capital():
    assert current_balance(ACCOUNT, []) == Decimal("1000")
    assert total_profit_balance(ACCOUNT, []) == Decimal("1000")


def test_latest_trade_date_wins_regardless_of_position():
    entries = [
        _entry("1100", "20", date(2025, 1, 3)),
        _entry("1000", "100", date(2025, 1, 2)),
    ]
    assert current_balance(ACCOUNT, entries) == Decimal("1120")


def test_same_trade_date_breaks_tie_on_timestamp():
    entries = [
        _entry("1000", "5", date(2025, 1, 2), ts=datetime(2025, 1, 2, 18, 0)),
        _entry("2000", "5", date(2025, 1, 2), ts=datetime(2025, 1, 2, 9, 0)),
    ]
    assert current_balance(ACCOUNT, entries) == Decimal("1005")


def test_full_tie_breaks_on_insertion_order():
    entries = [
        _entry("1000", "1", date(2025, 1, 2), tag="first"),
        _entry("1000", "2", date(2025, 1, 2), tag="second"),
    ]
    assert latest_entry(entries).tag == "second"
    assert current_balance(ACCOUNT, entries) == Decimal("1002")


def test_additive_policy_sums_profit():
    entries = [
        _entry("1000", "50", date(2025, 1, 1)),
        _entry("1050", "-20", date(2025, 1, 2)),
        _entry("1030", "0", date(2025, 1, 3)),
    ]
    assert total_profit_balance(ACCOUNT, entries) == Decimal("1030")
    assert current_balance(ACCOUNT, entries) == Decimal("1030")


def test_policies_diverge_when_history_does_not_chain():
    # Start balances entered by hand (deposit between days)
    entries = [
        _entry("1000", "50", date(2025, 1, 1)),
        _entry("3000", "10", date(2025, 1, 2)),
    ]
    assert current_balance(ACCOUNT, entries) == Decimal("3010")
    assert total_profit_balance(ACCOUNT, entries) == Decimal("1060")


def test_other_accounts_are_ignored():
    entries = [
        _entry("1000", "50", date(2025, 1, 1)),
        _entry("9000", "900", date(2025, 6, 1), account_id="A2"),
    ]
    assert current_balance(ACCOUNT, entries) == Decimal("1050")
    assert total_profit_balance(ACCOUNT, entries) == Decimal("1050")


def test_latest_entry_of_nothing_is_none():
    assert latest_entry([]) is None
