"""Ledger store: persistent table of trade entries.

The batch core needs ``read_all``, ``append`` and ``update_by_key``. The rest
serves reporting and administrative correction. Every write commits on its own,
so a failed row never takes earlier rows with it.
"""

import logging
from collections.abc import Sequence
from contextlib import contextmanager
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from tradejournal.config import Settings, settings as default_settings
from tradejournal.models.trade_entry import TradeEntry
from tradejournal.services.errors import (
    JournalError,
    LedgerReadError,
    LedgerWriteError,
    RecordNotFoundError,
)

logger = logging.getLogger(__name__)

# Columns an administrative correction may touch
PATCHABLE_FIELDS = {"asset_id", "start_balance", "daily_profit", "lot_size", "notes", "trade_date"}


class LedgerStore:
    def __init__(self, session: Session, settings: Settings | None = None):
        self.session = session
        self.settings = settings or default_settings

    # ==================== Reads ====================

    def read_all(self) -> Sequence[TradeEntry]:
        """All entries in insertion order."""
        return self.session.exec(select(TradeEntry).order_by(TradeEntry.id)).all()

    def find_by_key(self, transaction_id: str) -> TradeEntry | None:
        stmt = select(TradeEntry).where(TradeEntry.transaction_id == transaction_id)
        return self.session.exec(stmt).first()

    def entries_for_account(self, account_id: str) -> Sequence[TradeEntry]:
        stmt = (
            select(TradeEntry)
            .where(TradeEntry.account_id == account_id)
            .order_by(TradeEntry.id)
        )
        return self.session.exec(stmt).all()

    def entries_for_asset(self, asset_id: str) -> Sequence[TradeEntry]:
        stmt = (
            select(TradeEntry)
            .where(TradeEntry.asset_id == asset_id)
            .order_by(TradeEntry.id)
        )
        return self.session.exec(stmt).all()

    def has_entry_on(self, account_id: str, trade_date: date) -> bool:
        stmt = select(TradeEntry.id).where(
            TradeEntry.account_id == account_id,
            TradeEntry.trade_date == trade_date,
        )
        with self._guard("duplicate-date lookup", LedgerReadError):
            return self.session.exec(stmt).first() is not None

    def query(
        self,
        account_id: str | None = None,
        asset_id: str | None = None,
        start_date: date | None = None,
        end_date: date | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[TradeEntry]:
        """Filtered entries, newest timestamp first."""
        stmt = select(TradeEntry).order_by(TradeEntry.timestamp.desc(), TradeEntry.id.desc())
        if account_id is not None:
            stmt = stmt.where(TradeEntry.account_id == account_id)
        if asset_id is not None:
            stmt = stmt.where(TradeEntry.asset_id == asset_id)
        if start_date is not None:
            stmt = stmt.where(TradeEntry.trade_date >= start_date)
        if end_date is not None:
            stmt = stmt.where(TradeEntry.trade_date <= end_date)
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return self.session.exec(stmt).all()

    # ==================== Writes ====================

    def append(self, entry: TradeEntry) -> TradeEntry:
        """Persist one entry and reload it as stored.

        Raises LedgerWriteError and leaves nothing behind when the commit fails.
        Raises LedgerReadError when the entry was committed but could not be reloaded.
        """
        transaction_id = entry.transaction_id
        self.session.add(entry)
        self._commit(f"append {transaction_id}")
        with self._guard(f"reload {transaction_id}", LedgerReadError):
            self.session.refresh(entry)
        return entry

    def update_by_key(self, transaction_id: str, patch: dict) -> TradeEntry:
        entry = self.find_by_key(transaction_id)
        if entry is None:
            raise RecordNotFoundError(f"Trade entry {transaction_id} not found")
        unknown = set(patch) - PATCHABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot patch fields: {', '.join(sorted(unknown))}")
        for key, value in patch.items():
            setattr(entry, key, value)
        self.session.add(entry)
        self._commit(f"update {transaction_id}")
        self.session.refresh(entry)
        logger.info(f"Corrected trade entry {transaction_id}: {sorted(patch)}")
        return entry

    def delete_by_key(self, transaction_id: str):
        entry = self.find_by_key(transaction_id)
        if entry is None:
            raise RecordNotFoundError(f"Trade entry {transaction_id} not found")
        self.session.delete(entry)
        self._commit(f"delete {transaction_id}")
        logger.info(f"Deleted trade entry {transaction_id}")

    def _commit(self, action: str):
        with self._guard(action):
            self.session.commit()

    @contextmanager
    def _guard(self, action: str, error: type[JournalError] = LedgerWriteError):
        """Turn SQLAlchemy failures into journal errors, rolling the session back."""
        try:
            yield
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Ledger {action} failed: {e}")
            raise error(str(getattr(e, "orig", None) or e)) from e
