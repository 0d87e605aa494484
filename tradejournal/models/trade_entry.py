"""TradeEntry model: one recorded trading day for an account/asset pair.

Rows are appended by batch submission and only mutated by administrative
correction. ``end_balance`` is not a column: it is always recomputed from
``start_balance + daily_profit``.
"""

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlmodel import SQLModel, Field

from tradejournal.utils.constants import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS


class TradeEntry(SQLModel, table=True):
    __tablename__ = "trade_entry"

    id: int | None = Field(default=None, primary_key=True)  # insertion order
    transaction_id: str = Field(unique=True, index=True, max_length=36)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    account_id: str = Field(foreign_key="account.id", index=True)
    asset_id: str = Field(foreign_key="asset.id", index=True)
    start_balance: Decimal = Field(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    daily_profit: Decimal = Field(max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES)
    lot_size: Decimal = Field(
        default=Decimal("0"), max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    notes: str = ""
    trade_date: date = Field(index=True)

    @property
    def end_balance(self) -> Decimal:
        return self.start_balance + self.daily_profit
