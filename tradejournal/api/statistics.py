"""Statistics API: per-account and per-asset rollups plus a global summary."""

from fastapi import APIRouter, Depends, HTTPException

from tradejournal.api.deps import get_reports
from tradejournal.schemas.statistics import (
    AccountStatisticsRead,
    AssetStatisticsRead,
    GlobalSummaryRead,
    GroupStatisticsRead,
)
from tradejournal.services.errors import RecordNotFoundError
from tradejournal.services.reporting import JournalReports
from tradejournal.utils.constants import VALID_GROUP_BY

router = APIRouter(prefix="/api/statistics", tags=["statistics"])


@router.get("", response_model=AccountStatisticsRead | list[AssetStatisticsRead])
def get_statistics(
    account_id: str | None = None,
    asset_id: str | None = None,
    reports: JournalReports = Depends(get_reports),
):
    """One account's statistics, or per-asset statistics when no account is given."""
    try:
        return reports.get_statistics(account_id=account_id, asset_id=asset_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Account not found")


@router.get("/summary", response_model=GlobalSummaryRead)
def statistics_summary(reports: JournalReports = Depends(get_reports)):
    """Aggregated stats across all accounts and assets."""
    return reports.global_summary()


@router.get("/popular-assets", response_model=list[AssetStatisticsRead])
def popular_assets(limit: int | None = None, reports: JournalReports = Depends(get_reports)):
    return reports.popular_assets(limit=limit)


@router.get("/grouped", response_model=list[GroupStatisticsRead])
def grouped_statistics(group_by: str, reports: JournalReports = Depends(get_reports)):
    if group_by not in VALID_GROUP_BY:
        allowed = ", ".join(VALID_GROUP_BY)
        raise HTTPException(status_code=422, detail=f"group_by must be one of: {allowed}")
    return reports.grouped_statistics(group_by)
