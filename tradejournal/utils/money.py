"""Money values sized to the Numeric(20, 8) columns."""

from decimal import ROUND_HALF_EVEN, Decimal

from tradejournal.utils.constants import MONEY_DECIMAL_PLACES, MONEY_INTEGER_DIGITS

MONEY_QUANTUM = Decimal(1).scaleb(-MONEY_DECIMAL_PLACES)
MONEY_LIMIT = Decimal(10) ** MONEY_INTEGER_DIGITS


def quantize_money(value: Decimal) -> Decimal | None:
    """Round to 8 decimal places; None when the integer part does not fit the column."""
    if abs(value) >= MONEY_LIMIT:
        return None
    quantized = value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_EVEN)
    if abs(quantized) >= MONEY_LIMIT:
        return None
    return quantized


def too_large_message(field_label: str) -> str:
    return f"{field_label} exceeds {MONEY_INTEGER_DIGITS} integer digits"
