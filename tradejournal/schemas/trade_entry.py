"""Pydantic schemas for trade entries: raw transport rows, validated drafts, reads."""

from datetime import date, datetime
from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, Field, field_validator

from tradejournal.utils.constants import MONEY_INTEGER_DIGITS
from tradejournal.utils.money import quantize_money


def _alias(camel: str, snake: str) -> AliasChoices:
    return AliasChoices(camel, snake)


class RawTradeEntry(BaseModel):
    """An untyped row as received from a caller.

    Every field accepts anything (or nothing); building one from a mapping never
    fails. Keys may be camelCase (``accountId``) or snake_case (``account_id``).
    """

    account_id: Any = Field(default=None, validation_alias=_alias("accountId", "account_id"))
    asset_id: Any = Field(default=None, validation_alias=_alias("assetId", "asset_id"))
    start_balance: Any = Field(default=None, validation_alias=_alias("startBalance", "start_balance"))
    daily_profit: Any = Field(default=None, validation_alias=_alias("dailyProfit", "daily_profit"))
    lot_size: Any = Field(default=None, validation_alias=_alias("lotSize", "lot_size"))
    notes: Any = None
    trade_date: Any = Field(default=None, validation_alias=_alias("tradeDate", "trade_date"))

    model_config = {"extra": "ignore", "frozen": True}

    def get(self, field_label: str) -> Any:
        """Look up a value by its wire name (``startBalance``)."""
        return getattr(self, RAW_FIELD_ATTRS[field_label])


# wire name -> attribute
RAW_FIELD_ATTRS = {
    "accountId": "account_id",
    "assetId": "asset_id",
    "startBalance": "start_balance",
    "dailyProfit": "daily_profit",
    "lotSize": "lot_size",
    "notes": "notes",
    "tradeDate": "trade_date",
}


class TradeEntryDraft(BaseModel):
    """A validated entry that has not been committed (no transaction id yet)."""

    account_id: str = Field(min_length=1)
    asset_id: str = Field(min_length=1)
    start_balance: Decimal
    daily_profit: Decimal
    lot_size: Decimal = Field(ge=0)
    notes: str = ""
    trade_date: date

    model_config = {"frozen": True}

    @property
    def end_balance(self) -> Decimal:
        return self.start_balance + self.daily_profit


class TradeEntryRead(BaseModel):
    transaction_id: str
    timestamp: datetime
    account_id: str
    asset_id: str
    start_balance: float
    daily_profit: float
    end_balance: float
    lot_size: float
    notes: str
    trade_date: date

    model_config = {"from_attributes": True}


class TradeEntryUpdate(BaseModel):
    """Administrative correction of a committed entry."""

    asset_id: str | None = Field(default=None, min_length=1, max_length=64)
    start_balance: Decimal | None = None
    daily_profit: Decimal | None = None
    lot_size: Decimal | None = Field(default=None, ge=0)
    notes: str | None = None
    trade_date: date | None = None

    @field_validator("start_balance", "daily_profit", "lot_size")
    @classmethod
    def _money(cls, value: Decimal | None) -> Decimal | None:
        if value is None:
            return None
        if not value.is_finite():
            raise ValueError("must be a finite number")
        money = quantize_money(value)
        if money is None:
            raise ValueError(f"exceeds {MONEY_INTEGER_DIGITS} integer digits")
        return money
