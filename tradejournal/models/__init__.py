"""Database models."""

from tradejournal.models.account import Account
from tradejournal.models.asset import Asset
from tradejournal.models.trade_entry import TradeEntry

__all__ = [
    "Account",
    "Asset",
    "TradeEntry",
]
