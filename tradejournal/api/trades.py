"""Trade entry API: submission, history and correction."""

import logging
from datetime import date
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from fastapi.responses import JSONResponse

from tradejournal.api.deps import get_asset_directory, get_coordinator, get_ledger, get_reports
from tradejournal.schemas.batch import batch_result_payload
from tradejournal.schemas.trade_entry import TradeEntryRead, TradeEntryUpdate
from tradejournal.services.batch_submission import BatchSubmissionCoordinator
from tradejournal.services.directories import AssetDirectory
from tradejournal.services.errors import EmptyBatchError, LedgerWriteError, RecordNotFoundError
from tradejournal.services.ledger_store import LedgerStore
from tradejournal.services.reporting import JournalReports
from tradejournal.utils.constants import STATUS_FAILURE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/trades", tags=["trades"])


@router.post("/batch")
def submit_batch(
    entries: list[Any] = Body(...),
    coordinator: BatchSubmissionCoordinator = Depends(get_coordinator),
):
    """Validate and save each row independently; the response reports every row."""
    try:
        result = coordinator.submit_batch(entries)
    except EmptyBatchError as e:
        return JSONResponse(
            status_code=400,
            content={"status": STATUS_FAILURE, "message": str(e), "errorKind": e.kind.value, "results": []},
        )
    return batch_result_payload(result)


@router.post("", response_model=TradeEntryRead, status_code=201)
def add_trade(
    entry: dict[str, Any] = Body(...),
    coordinator: BatchSubmissionCoordinator = Depends(get_coordinator),
    ledger: LedgerStore = Depends(get_ledger),
):
    """Save a single entry (a one-row batch)."""
    row = coordinator.submit_batch([entry]).row_results[0]
    if not row.succeeded:
        raise HTTPException(
            status_code=422,
            detail={"errorKind": row.error_kind.value, "error": row.error},
        )
    return ledger.find_by_key(row.transaction_id)


@router.get("", response_model=list[TradeEntryRead])
def list_trades(
    account_id: str | None = None,
    asset_id: str | None = None,
    start_date: date | None = None,
    end_date: date | None = None,
    limit: int = 50,
    offset: int = 0,
    ledger: LedgerStore = Depends(get_ledger),
):
    return ledger.query(
        account_id=account_id,
        asset_id=asset_id,
        start_date=start_date,
        end_date=end_date,
        limit=limit,
        offset=offset,
    )


@router.get("/recent", response_model=list[TradeEntryRead])
def recent_trades(
    limit: int | None = None,
    account_id: str | None = None,
    reports: JournalReports = Depends(get_reports),
):
    return reports.recent_trades(limit=limit, account_id=account_id)


@router.get("/{transaction_id}", response_model=TradeEntryRead)
def get_trade(transaction_id: str, ledger: LedgerStore = Depends(get_ledger)):
    entry = ledger.find_by_key(transaction_id)
    if not entry:
        raise HTTPException(status_code=404, detail="Trade entry not found")
    return entry


@router.patch("/{transaction_id}", response_model=TradeEntryRead)
def correct_trade(
    transaction_id: str,
    data: TradeEntryUpdate,
    ledger: LedgerStore = Depends(get_ledger),
    assets: AssetDirectory = Depends(get_asset_directory),
):
    """Administrative correction; the end balance follows the new values."""
    patch = data.model_dump(exclude_unset=True)
    if patch.get("asset_id") is not None and assets.find_by_id(patch["asset_id"]) is None:
        raise HTTPException(status_code=422, detail=f"Unknown assetId: {patch['asset_id']}")
    patch = {key: value for key, value in patch.items() if value is not None}
    try:
        return ledger.update_by_key(transaction_id, patch)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Trade entry not found")
    except LedgerWriteError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.delete("/{transaction_id}", status_code=204)
def delete_trade(transaction_id: str, ledger: LedgerStore = Depends(get_ledger)):
    try:
        ledger.delete_by_key(transaction_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Trade entry not found")
    except LedgerWriteError as e:
        raise HTTPException(status_code=409, detail=str(e))
