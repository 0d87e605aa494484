"""Batch submission of trade entries with per-row outcomes.

Rows are validated and committed one at a time, in input order. A row that
fails (validation or write) is reported and skipped; rows before and after it
are unaffected. There is no batch-wide rollback.
"""

import logging
import uuid
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any

from tradejournal.config import Settings, settings as default_settings
from tradejournal.models.trade_entry import TradeEntry
from tradejournal.schemas.trade_entry import TradeEntryDraft
from tradejournal.services.directories import AccountDirectory, AssetDirectory
from tradejournal.services.errors import (
    EmptyBatchError,
    ErrorKind,
    JournalError,
    LedgerReadError,
    LedgerWriteError,
)
from tradejournal.services.ledger_store import LedgerStore
from tradejournal.services.validation import validate_entry
from tradejournal.utils.constants import (
    ROW_FAILED,
    ROW_SUCCESS,
    STATUS_FAILURE,
    STATUS_PARTIAL,
    STATUS_SUCCESS,
)

logger = logging.getLogger(__name__)


@dataclass
class RowResult:
    index: int
    status: str
    transaction_id: str | None = None
    end_balance: Decimal | None = None
    error: str | None = None
    error_kind: ErrorKind | None = None
    warning: str | None = None
    duplicate_date: bool = False

    @property
    def succeeded(self) -> bool:
        return self.status == ROW_SUCCESS


@dataclass
class BatchResult:
    overall_status: str
    row_results: list[RowResult] = field(default_factory=list)

    @property
    def success_count(self) -> int:
        return sum(1 for row in self.row_results if row.succeeded)

    @property
    def failure_count(self) -> int:
        return len(self.row_results) - self.success_count

    @property
    def duplicate_dates(self) -> int:
        return sum(1 for row in self.row_results if row.succeeded and row.duplicate_date)

    @property
    def message(self) -> str:
        if self.overall_status == STATUS_SUCCESS:
            return f"Saved all {self.success_count} entries"
        if self.overall_status == STATUS_FAILURE:
            return f"No entries saved, {self.failure_count} failed"
        return f"Saved {self.success_count} entries, {self.failure_count} failed"


def overall_status(row_results: Sequence[RowResult]) -> str:
    succeeded = sum(1 for row in row_results if row.succeeded)
    if succeeded == len(row_results):
        return STATUS_SUCCESS
    if succeeded == 0:
        return STATUS_FAILURE
    return STATUS_PARTIAL


class BatchSubmissionCoordinator:
    """Validates and commits a batch of raw entries against the ledger."""

    def __init__(
        self,
        ledger: LedgerStore,
        accounts: AccountDirectory,
        assets: AssetDirectory,
        settings: Settings | None = None,
    ):
        self.ledger = ledger
        self.accounts = accounts
        self.assets = assets
        self.settings = settings or default_settings

    def submit_batch(self, raw_entries: Sequence[Any], today: date | None = None) -> BatchResult:
        if not raw_entries:
            raise EmptyBatchError()

        try:
            known_accounts = self.accounts.ids()
            known_assets = self.assets.ids()
        except LedgerReadError as e:
            row_results = [self._not_saved(index, e) for index in range(len(raw_entries))]
            return BatchResult(overall_status=STATUS_FAILURE, row_results=row_results)

        row_results = []
        for index, raw in enumerate(raw_entries):
            validation = validate_entry(
                raw, known_accounts, known_assets,
                index=index, settings=self.settings, today=today,
            )
            if not validation.is_valid:
                logger.info(f"[batch] Row {index} rejected: {validation.message}")
                row_results.append(RowResult(
                    index=index,
                    status=ROW_FAILED,
                    error=validation.message,
                    error_kind=validation.kind,
                ))
                continue
            row_results.append(self._commit_row(index, validation.entry))

        result = BatchResult(overall_status=overall_status(row_results), row_results=row_results)
        logger.info(
            f"[batch] Completed: {result.success_count}/{len(row_results)} saved "
            f"(status={result.overall_status})"
        )
        return result

    def _commit_row(self, index: int, draft: TradeEntryDraft) -> RowResult:
        try:
            warning = self._duplicate_date_warning(index, draft)
        except LedgerReadError as e:
            return self._not_saved(index, e)

        transaction_id = str(uuid.uuid4())
        entry = TradeEntry(
            transaction_id=transaction_id,
            timestamp=datetime.now(timezone.utc),
            **draft.model_dump(),
        )
        try:
            saved = self.ledger.append(entry)
        except LedgerWriteError as e:
            return self._not_saved(index, e)
        except LedgerReadError as e:
            # Committed; only the reload failed
            note = f"Saved, but the stored entry could not be re-read: {e}"
            logger.warning(f"[batch] Row {index}: {note}")
            return RowResult(
                index=index,
                status=ROW_SUCCESS,
                transaction_id=transaction_id,
                end_balance=draft.end_balance,
                warning=f"{warning}; {note}" if warning else note,
                duplicate_date=warning is not None,
            )

        return RowResult(
            index=index,
            status=ROW_SUCCESS,
            transaction_id=saved.transaction_id,
            end_balance=saved.end_balance,
            warning=warning,
            duplicate_date=warning is not None,
        )

    def _duplicate_date_warning(self, index: int, draft: TradeEntryDraft) -> str | None:
        if not self.settings.warn_duplicate_trade_dates:
            return None
        if not self.ledger.has_entry_on(draft.account_id, draft.trade_date):
            return None
        warning = (
            f"Trade date {draft.trade_date.isoformat()} already exists for account "
            f"{draft.account_id}; added anyway"
        )
        logger.warning(f"[batch] Row {index}: {warning}")
        return warning

    def _not_saved(self, index: int, error: JournalError) -> RowResult:
        logger.error(f"[batch] Row {index} not saved: {error}")
        return RowResult(
            index=index,
            status=ROW_FAILED,
            error=f"Could not save entry: {error}",
            error_kind=ErrorKind.PERSISTENCE_FAILED,
        )
