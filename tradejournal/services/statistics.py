"""Folding trade entries into performance statistics.

Stateless: entries go in, ``TradeStatistics`` come out. Nothing is cached or
persisted; callers recompute after every write.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from decimal import Decimal

from tradejournal.utils.constants import (
    GROUP_BY_ACCOUNT,
    GROUP_BY_ASSET,
    UNKNOWN_GROUP_KEY,
    VALID_GROUP_BY,
)

ZERO = Decimal("0")


@dataclass
class TradeStatistics:
    key: str | None = None
    total_trades: int = 0
    total_profit: Decimal = ZERO
    total_lot_size: Decimal = ZERO
    profitable_trades: int = 0
    loss_trades: int = 0
    break_even_trades: int = 0
    largest_win: Decimal = ZERO
    largest_loss: Decimal = ZERO
    win_rate: Decimal = ZERO  # percent
    average_profit: Decimal = ZERO
    average_lot_size: Decimal = ZERO
    current_balance: Decimal | None = None

    def add(self, entry):
        profit = Decimal(entry.daily_profit)
        self.total_trades += 1
        self.total_profit += profit
        self.total_lot_size += Decimal(entry.lot_size)
        if profit > 0:
            self.profitable_trades += 1
            self.largest_win = max(self.largest_win, profit)
        elif profit < 0:
            self.loss_trades += 1
            self.largest_loss = min(self.largest_loss, profit)
        else:
            self.break_even_trades += 1

    def finalize(self) -> "TradeStatistics":
        if self.total_trades > 0:
            self.win_rate = Decimal(self.profitable_trades) / self.total_trades * 100
            self.average_profit = self.total_profit / self.total_trades
            self.average_lot_size = self.total_lot_size / self.total_trades
        return self


def _group_key(entry, group_by: str) -> str:
    value = getattr(entry, "account_id" if group_by == GROUP_BY_ACCOUNT else "asset_id", None)
    if value is None:
        return UNKNOWN_GROUP_KEY
    text = str(value).strip()
    return text or UNKNOWN_GROUP_KEY


def aggregate(entries: Iterable, group_by: str | None = None):
    """Fold entries into one TradeStatistics, or a dict of them keyed by group.

    Grouped output keeps keys in first-seen order; entries without a key land
    under ``"unknown"``.
    """
    if group_by is None:
        stats = TradeStatistics()
        for entry in entries:
            stats.add(entry)
        return stats.finalize()

    if group_by not in VALID_GROUP_BY:
        raise ValueError(f"group_by must be one of: {', '.join(VALID_GROUP_BY)}")

    groups: dict[str, TradeStatistics] = {}
    for entry in entries:
        key = _group_key(entry, group_by)
        stats = groups.get(key)
        if stats is None:
            stats = groups[key] = TradeStatistics(key=key)
        stats.add(entry)
    for stats in groups.values():
        stats.finalize()
    return groups


def top_by_trade_count(stats_by_key: Mapping[str, TradeStatistics], limit: int) -> list[TradeStatistics]:
    """Most traded groups first; ties keep first-seen order (sorted is stable)."""
    if limit <= 0:
        return []
    ranked = sorted(stats_by_key.values(), key=lambda stats: stats.total_trades, reverse=True)
    return ranked[:limit]


__all__ = ["TradeStatistics", "aggregate", "top_by_trade_count", "GROUP_BY_ACCOUNT", "GROUP_BY_ASSET"]
