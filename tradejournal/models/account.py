"""Account model: a trading account with its starting capital."""

from datetime import datetime, timezone
from decimal import Decimal

from sqlmodel import SQLModel, Field

from tradejournal.utils.constants import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS


class Account(SQLModel, table=True):
    __tablename__ = "account"

    id: str = Field(primary_key=True, max_length=64)  # accountId
    name: str
    owner_id: str = Field(index=True)
    initial_capital: Decimal = Field(
        default=Decimal("0"), max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
