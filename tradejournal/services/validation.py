"""Validation of a single proposed trade entry.

``validate_entry`` is total: malformed input of any shape comes back as an
invalid ``ValidationResult`` carrying readable reasons, never as an exception.
"""

from collections.abc import Container, Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any
from zoneinfo import ZoneInfo

from tradejournal.config import Settings, settings as default_settings
from tradejournal.schemas.trade_entry import RawTradeEntry, TradeEntryDraft
from tradejournal.services.errors import ErrorKind
from tradejournal.utils.constants import (
    NUMERIC_ENTRY_FIELDS,
    REQUIRED_ENTRY_FIELDS,
    TRADE_DATE_FORMAT,
)
from tradejournal.utils.money import quantize_money, too_large_message


@dataclass
class ValidationResult:
    index: int
    is_valid: bool
    entry: TradeEntryDraft | None = None
    errors: list[str] = field(default_factory=list)
    kind: ErrorKind | None = None

    @property
    def message(self) -> str:
        return "; ".join(self.errors)


def validate_entry(
    raw: Any,
    known_accounts: Container[str],
    known_assets: Container[str],
    index: int = 0,
    settings: Settings | None = None,
    today: date | None = None,
) -> ValidationResult:
    """Validate one raw row against the structural rules and the directories.

    Amounts are rounded half-even to 8 decimal places, the scale they are stored at.
    """
    settings = settings or default_settings

    row = _coerce_row(raw)
    if row is None:
        return _invalid(index, ["Entry must be an object of named fields"], ErrorKind.VALIDATION_FAILED)

    errors: list[str] = []
    missing = [name for name in REQUIRED_ENTRY_FIELDS if _is_empty(row.get(name))]
    errors.extend(f"{name} is required" for name in missing)

    numbers: dict[str, Decimal] = {}
    for name in NUMERIC_ENTRY_FIELDS:
        if name in missing:
            continue
        number = parse_number(row.get(name))
        if number is None:
            errors.append(f"{name} must be a finite number")
            continue
        money = quantize_money(number)
        if money is None:
            errors.append(too_large_message(name))
        else:
            numbers[name] = money

    if "lotSize" in numbers and numbers["lotSize"] < 0:
        errors.append("lotSize must be greater than or equal to 0")

    trade_date = parse_trade_date(row.trade_date, settings, today)
    if trade_date is None:
        errors.append("tradeDate must be in YYYY-MM-DD format")

    account_id = None if "accountId" in missing else normalize_id(row.account_id)
    asset_id = None if "assetId" in missing else normalize_id(row.asset_id)

    reference_errors = []
    if account_id is not None and account_id not in known_accounts:
        reference_errors.append(f"Unknown accountId: {account_id}")
    if asset_id is not None and asset_id not in known_assets:
        reference_errors.append(f"Unknown assetId: {asset_id}")

    if errors or reference_errors:
        kind = ErrorKind.VALIDATION_FAILED if errors else ErrorKind.REFERENCE_NOT_FOUND
        return _invalid(index, errors + reference_errors, kind)

    draft = TradeEntryDraft(
        account_id=account_id,
        asset_id=asset_id,
        start_balance=numbers["startBalance"],
        daily_profit=numbers["dailyProfit"],
        lot_size=numbers["lotSize"],
        notes=sanitize_notes(row.notes),
        trade_date=trade_date,
    )
    return ValidationResult(index=index, is_valid=True, entry=draft)


def _invalid(index: int, errors: list[str], kind: ErrorKind) -> ValidationResult:
    return ValidationResult(index=index, is_valid=False, errors=errors, kind=kind)


def _coerce_row(raw: Any) -> RawTradeEntry | None:
    if isinstance(raw, RawTradeEntry):
        return raw
    if not isinstance(raw, Mapping):
        return None
    # Any-typed fields: validation cannot fail for a string-keyed mapping
    return RawTradeEntry.model_validate({str(k): v for k, v in raw.items()})


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def parse_number(value: Any) -> Decimal | None:
    """Parse a finite decimal from a str/int/float/Decimal; None when impossible."""
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        number = value
    elif isinstance(value, (int, float)):
        number = Decimal(str(value))
    elif isinstance(value, str):
        try:
            number = Decimal(value.strip())
        except InvalidOperation:
            return None
    else:
        return None
    return number if number.is_finite() else None


def normalize_id(value: Any) -> str:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def parse_trade_date(value: Any, settings: Settings, today: date | None = None) -> date | None:
    """Resolve a row's trade date; an omitted date means today in the journal timezone."""
    if _is_empty(value):
        return today or datetime.now(ZoneInfo(settings.timezone)).date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) != 10:
            return None
        try:
            return datetime.strptime(text, TRADE_DATE_FORMAT).date()
        except ValueError:
            return None
    return None


def sanitize_notes(value: Any) -> str:
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(value)
    return text.strip().replace("\r", " ").replace("\n", " ").replace("\t", " ")
