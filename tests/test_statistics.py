"""Tests for statistics aggregation and popularity ranking."""

from decimal import Decimal
from types import SimpleNamespace

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from tradejournal.services.statistics import TradeStatistics, aggregate, top_by_trade_count


def _entry(profit, lot="1", account_id="A1", asset_id="X"):
    return SimpleNamespace(
        daily_profit=Decimal(str(profit)),
        lot_size=Decimal(str(lot)),
        account_id=account_id,
        asset_id=asset_id,
    )


# ---------------------------------------------------------------------------
# 1. Single aggregate
# ---------------------------------------------------------------------------

def test_profit_loss_and_flat_day():
    stats = aggregate([_entry(10), _entry(-5), _entry(0)])
    assert stats.total_trades == 3
    assert stats.profitable_trades == 1
    assert stats.loss_trades == 1
    assert stats.break_even_trades == 1
    assert stats.total_profit == Decimal("5")
    assert float(stats.win_rate) == pytest.approx(33.33, abs=0.01)
    assert float(stats.average_profit) == pytest.approx(1.67, abs=0.01)


def test_lot_size_totals_and_extremes():
    stats = aggregate([_entry(30, "0.1"), _entry(-12, "0.2"), _entry(7, "0.3"), _entry(-40, "0.4")])
    assert stats.total_lot_size == Decimal("1.0")
    assert stats.average_lot_size == Decimal("0.25")
    assert stats.largest_win == Decimal("30")
    assert stats.largest_loss == Decimal("-40")
    assert stats.win_rate == Decimal("50")


def test_empty_input_leaves_defaults():
    stats = aggregate([])
    assert stats == TradeStatistics()
    assert stats.win_rate == 0
    assert stats.average_profit == 0


# ---------------------------------------------------------------------------
# 2. Grouping
# ---------------------------------------------------------------------------

def test_group_by_asset_keeps_first_seen_order():
    entries = [_entry(1, asset_id="Y"), _entry(2, asset_id="X"), _entry(3, asset_id="Y")]
    groups = aggregate(entries, group_by="asset")
    assert list(groups) == ["Y", "X"]
    assert groups["Y"].total_trades == 2
    assert groups["Y"].total_profit == Decimal("4")
    assert groups["X"].key == "X"


def test_missing_group_key_is_bucketed_as_unknown():
    entries = [_entry(1, account_id=None), _entry(2, account_id=""), _entry(3, account_id="A1")]
    groups = aggregate(entries, group_by="account")
    assert list(groups) == ["unknown", "A1"]
    assert groups["unknown"].total_trades == 2


def test_invalid_group_by_rejected():
    with pytest.raises(ValueError):
        aggregate([_entry(1)], group_by="owner")


def test_top_by_trade_count_ties_keep_first_seen():
    entries = [
        _entry(1, asset_id="A"),
        _entry(1, asset_id="B"),
        _entry(1, asset_id="C"),
        _entry(1, asset_id="C"),
        _entry(1, asset_id="B"),
        _entry(1, asset_id="D"),
    ]
    groups = aggregate(entries, group_by="asset")
    top = top_by_trade_count(groups, 3)
    assert [s.key for s in top] == ["B", "C", "A"]
    assert top_by_trade_count(groups, 0) == []
    assert len(top_by_trade_count(groups, 10)) == 4


# ---------------------------------------------------------------------------
# 3. Properties
# ---------------------------------------------------------------------------

profits = st.decimals(
    min_value=Decimal("-100000"), max_value=Decimal("100000"), places=2,
    allow_nan=False, allow_infinity=False,
)


@given(data=st.data(), values=st.lists(profits, min_size=1, max_size=40))
@settings(max_examples=50)
def test_aggregate_is_order_independent(data, values):
    entries = [_entry(v) for v in values]
    shuffled = data.draw(st.permutations(entries))
    a, b = aggregate(entries), aggregate(shuffled)
    assert a.total_trades == b.total_trades
    assert a.total_profit == b.total_profit
    assert a.win_rate == b.win_rate
    assert a.average_profit == b.average_profit


@given(values=st.lists(profits, max_size=40))
@settings(max_examples=50)
def test_counters_partition_total(values):
    stats = aggregate([_entry(v) for v in values])
    assert stats.profitable_trades + stats.loss_trades + stats.break_even_trades == stats.total_trades
    assert 0 <= stats.win_rate <= 100
