"""Account and asset directories backed by the database.

These are thin lookup/CRUD wrappers; the ledger core only needs ``find_by_id``
and ``all``.
"""

import logging
from collections.abc import Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from tradejournal.config import Settings, settings as default_settings
from tradejournal.models.account import Account
from tradejournal.models.asset import Asset
from tradejournal.models.trade_entry import TradeEntry
from tradejournal.services.errors import (
    DuplicateRecordError,
    LedgerReadError,
    LedgerWriteError,
    RecordInUseError,
    RecordNotFoundError,
)

logger = logging.getLogger(__name__)


class _Directory:
    model: type = None
    entry_column = None
    label = "record"

    def __init__(self, session: Session, settings: Settings | None = None):
        self.session = session
        self.settings = settings or default_settings

    def find_by_id(self, record_id: str):
        if record_id is None:
            return None
        return self.session.get(self.model, str(record_id))

    def all(self) -> Sequence:
        return self.session.exec(select(self.model).order_by(self.model.id)).all()

    def ids(self) -> set[str]:
        """Snapshot of every known id; raises LedgerReadError if the table cannot be read."""
        try:
            rows = self.session.exec(select(self.model.id)).all()
        except SQLAlchemyError as e:
            self.session.rollback()
            logger.error(f"Could not read {self.label} ids: {e}")
            raise LedgerReadError(str(getattr(e, "orig", None) or e)) from e
        return {str(record_id) for record_id in rows}

    def create(self, data: dict):
        if self.find_by_id(data["id"]) is not None:
            raise DuplicateRecordError(f"{self.label} {data['id']} already exists")
        record = self.model(**data)
        self._commit(record)
        logger.info(f"Created {self.label} {record.id}")
        return record

    def update(self, record_id: str, changes: dict):
        record = self.find_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(f"{self.label} {record_id} not found")
        for key, value in changes.items():
            setattr(record, key, value)
        self._commit(record)
        logger.info(f"Updated {self.label} {record_id}: {sorted(changes)}")
        return record

    def delete(self, record_id: str):
        record = self.find_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(f"{self.label} {record_id} not found")
        in_use = self.session.exec(
            select(TradeEntry.id).where(type(self).entry_column == record.id)
        ).first()
        if in_use is not None:
            raise RecordInUseError(f"{self.label} {record_id} has trade entries")
        self.session.delete(record)
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise LedgerWriteError(str(e)) from e
        logger.info(f"Deleted {self.label} {record_id}")

    def _commit(self, record):
        self.session.add(record)
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise LedgerWriteError(str(e)) from e
        self.session.refresh(record)


class AccountDirectory(_Directory):
    model = Account
    entry_column = TradeEntry.account_id
    label = "Account"

    def find_by_owner(self, owner_id: str) -> Sequence[Account]:
        stmt = select(Account).where(Account.owner_id == owner_id).order_by(Account.id)
        return self.session.exec(stmt).all()


class AssetDirectory(_Directory):
    model = Asset
    entry_column = TradeEntry.asset_id
    label = "Asset"

    def find_by_type(self, asset_type: str) -> list[Asset]:
        wanted = asset_type.strip().lower()
        return [asset for asset in self.all() if asset.type.lower() == wanted]
