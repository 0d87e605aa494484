"""CRUD API for accounts, plus balance summaries and trade history."""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException

from tradejournal.api.deps import get_account_directory, get_reports
from tradejournal.schemas.account import (
    AccountCreate,
    AccountOverviewRead,
    AccountRead,
    AccountSummaryRead,
    AccountUpdate,
)
from tradejournal.schemas.trade_entry import TradeEntryRead
from tradejournal.services.directories import AccountDirectory
from tradejournal.services.errors import DuplicateRecordError, RecordInUseError, RecordNotFoundError
from tradejournal.services.reporting import JournalReports

router = APIRouter(prefix="/api/accounts", tags=["accounts"])


@router.get("", response_model=list[AccountRead])
def list_accounts(
    owner_id: str | None = None,
    accounts: AccountDirectory = Depends(get_account_directory),
):
    if owner_id is not None:
        return accounts.find_by_owner(owner_id)
    return accounts.all()


@router.post("", response_model=AccountRead, status_code=201)
def create_account(data: AccountCreate, accounts: AccountDirectory = Depends(get_account_directory)):
    try:
        return accounts.create(data.model_dump())
    except DuplicateRecordError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/overview", response_model=list[AccountOverviewRead])
def accounts_overview(reports: JournalReports = Depends(get_reports)):
    """All accounts with statistics; balance = initial capital + total profit."""
    return reports.accounts_overview()


@router.get("/{account_id}", response_model=AccountRead)
def get_account(account_id: str, accounts: AccountDirectory = Depends(get_account_directory)):
    account = accounts.find_by_id(account_id)
    if not account:
        raise HTTPException(status_code=404, detail="Account not found")
    return account


@router.put("/{account_id}", response_model=AccountRead)
def update_account(
    account_id: str,
    data: AccountUpdate,
    accounts: AccountDirectory = Depends(get_account_directory),
):
    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    try:
        return accounts.update(account_id, changes)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Account not found")


@router.delete("/{account_id}", status_code=204)
def delete_account(account_id: str, accounts: AccountDirectory = Depends(get_account_directory)):
    try:
        accounts.delete(account_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Account not found")
    except RecordInUseError:
        raise HTTPException(
            status_code=409,
            detail="Cannot delete account with trade entries. Delete them first.",
        )


@router.get("/{account_id}/summary", response_model=AccountSummaryRead)
def account_summary(account_id: str, reports: JournalReports = Depends(get_reports)):
    """Statistics plus current balance (end balance of the latest entry)."""
    try:
        return reports.account_summary(account_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Account not found")


@router.get("/{account_id}/history", response_model=list[TradeEntryRead])
def account_history(
    account_id: str,
    start_date: date | None = None,
    end_date: date | None = None,
    reports: JournalReports = Depends(get_reports),
):
    try:
        if start_date is not None or end_date is not None:
            return reports.trades_in_range(
                account_id,
                start_date or date.min,
                end_date or date.max,
            )
        return reports.trading_history(account_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Account not found")
