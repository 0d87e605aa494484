"""Pydantic schemas for statistics responses."""

from pydantic import BaseModel

from tradejournal.config import settings


def _round(value, places: int | None = None) -> float:
    return round(float(value), settings.decimal_places if places is None else places)


class StatisticsRead(BaseModel):
    total_trades: int = 0
    total_profit: float = 0.0
    total_lot_size: float = 0.0
    profitable_trades: int = 0
    loss_trades: int = 0
    break_even_trades: int = 0
    win_rate: float = 0.0
    average_profit: float = 0.0
    average_lot_size: float = 0.0
    largest_win: float = 0.0
    largest_loss: float = 0.0
    current_balance: float | None = None

    @classmethod
    def from_stats(cls, stats) -> "StatisticsRead":
        return cls(
            total_trades=stats.total_trades,
            total_profit=_round(stats.total_profit),
            total_lot_size=_round(stats.total_lot_size, 8),
            profitable_trades=stats.profitable_trades,
            loss_trades=stats.loss_trades,
            break_even_trades=stats.break_even_trades,
            win_rate=_round(stats.win_rate),
            average_profit=_round(stats.average_profit),
            average_lot_size=_round(stats.average_lot_size, 8),
            largest_win=_round(stats.largest_win),
            largest_loss=_round(stats.largest_loss),
            current_balance=(
                _round(stats.current_balance) if stats.current_balance is not None else None
            ),
        )


class AccountStatisticsRead(StatisticsRead):
    account_id: str
    account_name: str | None = None


class AssetStatisticsRead(StatisticsRead):
    asset_id: str
    asset_name: str | None = None
    asset_type: str | None = None


class GroupStatisticsRead(StatisticsRead):
    key: str


class GlobalSummaryRead(StatisticsRead):
    total_accounts: int = 0
    total_assets: int = 0
