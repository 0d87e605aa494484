"""Shared API dependencies: per-request store, directories and services."""

from fastapi import Depends
from sqlmodel import Session

from tradejournal.config import settings
from tradejournal.database import get_session
from tradejournal.services.batch_submission import BatchSubmissionCoordinator
from tradejournal.services.directories import AccountDirectory, AssetDirectory
from tradejournal.services.ledger_store import LedgerStore
from tradejournal.services.reporting import JournalReports


def get_ledger(session: Session = Depends(get_session)) -> LedgerStore:
    return LedgerStore(session, settings)


def get_account_directory(session: Session = Depends(get_session)) -> AccountDirectory:
    return AccountDirectory(session, settings)


def get_asset_directory(session: Session = Depends(get_session)) -> AssetDirectory:
    return AssetDirectory(session, settings)


def get_coordinator(
    ledger: LedgerStore = Depends(get_ledger),
    accounts: AccountDirectory = Depends(get_account_directory),
    assets: AssetDirectory = Depends(get_asset_directory),
) -> BatchSubmissionCoordinator:
    return BatchSubmissionCoordinator(ledger, accounts, assets, settings)


def get_reports(
    ledger: LedgerStore = Depends(get_ledger),
    accounts: AccountDirectory = Depends(get_account_directory),
    assets: AssetDirectory = Depends(get_asset_directory),
) -> JournalReports:
    return JournalReports(ledger, accounts, assets, settings)
