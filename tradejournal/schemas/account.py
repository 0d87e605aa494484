"""Pydantic schemas for Account API."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from tradejournal.schemas.statistics import StatisticsRead
from tradejournal.utils.constants import MONEY_DECIMAL_PLACES, MONEY_MAX_DIGITS


class AccountCreate(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=120)
    owner_id: str = Field(min_length=1, max_length=120)
    initial_capital: Decimal = Field(
        default=Decimal("0"), ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )

    @field_validator("id", "name", "owner_id")
    @classmethod
    def _trim_required_text(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("must not be empty")
        return text


class AccountUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    owner_id: str | None = Field(default=None, min_length=1, max_length=120)
    initial_capital: Decimal | None = Field(
        default=None, ge=0, max_digits=MONEY_MAX_DIGITS, decimal_places=MONEY_DECIMAL_PLACES
    )

    @field_validator("name", "owner_id")
    @classmethod
    def _trim_optional_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        text = value.strip()
        if not text:
            raise ValueError("must not be empty")
        return text


class AccountRead(BaseModel):
    id: str
    name: str
    owner_id: str
    initial_capital: float
    created_at: datetime

    model_config = {"from_attributes": True}


class AccountSummaryRead(BaseModel):
    """Per-account summary; ``current_balance`` is the latest entry's end balance."""

    account: AccountRead
    current_balance: float
    statistics: StatisticsRead


class AccountOverviewRead(AccountRead):
    """Legacy overview row; ``balance`` is initial capital plus total profit."""

    balance: float
    statistics: StatisticsRead
