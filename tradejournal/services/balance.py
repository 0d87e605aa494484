"""Account balance derivation from entry history.

Two policies are exposed:

- ``current_balance``: end balance of the chronologically latest entry, or the
  initial capital when the account has no entries (per-account summary path).
- ``total_profit_balance``: initial capital plus the sum of daily profits
  (accounts overview path).

They agree only when every entry's start balance chains from the previous
entry's end balance. All functions are pure.
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Protocol


class _AccountLike(Protocol):
    id: str
    initial_capital: Decimal


def _own_entries(account: _AccountLike, entries: Iterable) -> list:
    return [entry for entry in entries if entry.account_id == account.id]


def latest_entry(entries: Iterable):
    """Latest by trade date, then timestamp, then position in the input."""
    ranked = list(enumerate(entries))
    if not ranked:
        return None
    _, entry = max(ranked, key=lambda item: (item[1].trade_date, item[1].timestamp, item[0]))
    return entry


def current_balance(account: _AccountLike, entries: Iterable) -> Decimal:
    latest = latest_entry(_own_entries(account, entries))
    if latest is None:
        return Decimal(account.initial_capital)
    return latest.start_balance + latest.daily_profit


def total_profit_balance(account: _AccountLike, entries: Iterable) -> Decimal:
    profit = sum((entry.daily_profit for entry in _own_entries(account, entries)), Decimal("0"))
    return Decimal(account.initial_capital) + profit
