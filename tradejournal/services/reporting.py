"""Read-side queries: statistics, balances, summaries and trade history.

Everything is recomputed from the ledger on each call.
"""

import logging
from collections.abc import Sequence
from datetime import date

from tradejournal.config import Settings, settings as default_settings
from tradejournal.models.account import Account
from tradejournal.models.trade_entry import TradeEntry
from tradejournal.schemas.account import AccountOverviewRead, AccountRead, AccountSummaryRead
from tradejournal.schemas.statistics import (
    AccountStatisticsRead,
    AssetStatisticsRead,
    GlobalSummaryRead,
    GroupStatisticsRead,
    StatisticsRead,
)
from tradejournal.services.balance import current_balance, total_profit_balance
from tradejournal.services.directories import AccountDirectory, AssetDirectory
from tradejournal.services.errors import RecordNotFoundError
from tradejournal.services.ledger_store import LedgerStore
from tradejournal.services.statistics import (
    GROUP_BY_ASSET,
    TradeStatistics,
    aggregate,
    top_by_trade_count,
)

logger = logging.getLogger(__name__)


class JournalReports:
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

    def _account(self, account_id: str) -> Account:
        account = self.accounts.find_by_id(account_id)
        if account is None:
            raise RecordNotFoundError(f"Account {account_id} not found")
        return account

    # ==================== Statistics ====================

    def get_statistics(
        self,
        account_id: str | None = None,
        asset_id: str | None = None,
    ) -> AccountStatisticsRead | list[AssetStatisticsRead]:
        """Statistics for one account, or per-asset statistics when no account is given."""
        if account_id is not None:
            account = self._account(account_id)
            account_entries = self.ledger.entries_for_account(account.id)
            entries = account_entries
            if asset_id is not None:
                entries = [e for e in account_entries if e.asset_id == asset_id]
            stats = aggregate(entries)
            stats.current_balance = current_balance(account, account_entries)
            return AccountStatisticsRead(
                account_id=account.id,
                account_name=account.name,
                **StatisticsRead.from_stats(stats).model_dump(),
            )

        if asset_id is not None:
            entries = self.ledger.entries_for_asset(asset_id)
        else:
            entries = self.ledger.read_all()
        groups = aggregate(entries, group_by=GROUP_BY_ASSET)
        return self._asset_rows(groups.values())

    def grouped_statistics(self, group_by: str) -> list[GroupStatisticsRead]:
        groups = aggregate(self.ledger.read_all(), group_by=group_by)
        return [
            GroupStatisticsRead(key=key, **StatisticsRead.from_stats(stats).model_dump())
            for key, stats in groups.items()
        ]

    def popular_assets(self, limit: int | None = None) -> list[AssetStatisticsRead]:
        limit = self.settings.popular_assets_limit if limit is None else limit
        groups = aggregate(self.ledger.read_all(), group_by=GROUP_BY_ASSET)
        return self._asset_rows(top_by_trade_count(groups, limit))

    def global_summary(self) -> GlobalSummaryRead:
        stats = aggregate(self.ledger.read_all())
        return GlobalSummaryRead(
            total_accounts=len(self.accounts.all()),
            total_assets=len(self.assets.all()),
            **StatisticsRead.from_stats(stats).model_dump(),
        )

    def _asset_rows(self, stats_list) -> list[AssetStatisticsRead]:
        assets_by_id = {asset.id: asset for asset in self.assets.all()}
        rows = []
        for stats in stats_list:
            asset = assets_by_id.get(stats.key)
            rows.append(AssetStatisticsRead(
                asset_id=stats.key,
                asset_name=asset.name if asset else None,
                asset_type=asset.type if asset else None,
                **StatisticsRead.from_stats(stats).model_dump(),
            ))
        return rows

    # ==================== Account summaries ====================

    def account_summary(self, account_id: str) -> AccountSummaryRead:
        """Per-account summary; balance is the latest entry's end balance."""
        account = self._account(account_id)
        entries = self.ledger.entries_for_account(account.id)
        stats = aggregate(entries)
        stats.current_balance = current_balance(account, entries)
        return AccountSummaryRead(
            account=AccountRead.model_validate(account),
            current_balance=float(stats.current_balance),
            statistics=StatisticsRead.from_stats(stats),
        )

    def accounts_overview(self) -> list[AccountOverviewRead]:
        """Every account with statistics; balance is initial capital plus total profit."""
        entries = self.ledger.read_all()
        groups = aggregate(entries, group_by="account")
        rows = []
        for account in self.accounts.all():
            stats = groups.get(account.id) or TradeStatistics(key=account.id)
            balance = total_profit_balance(account, entries)
            rows.append(AccountOverviewRead(
                **AccountRead.model_validate(account).model_dump(),
                balance=float(balance),
                statistics=StatisticsRead.from_stats(stats),
            ))
        return rows

    # ==================== History ====================

    def trading_history(self, account_id: str) -> Sequence[TradeEntry]:
        account = self._account(account_id)
        return self.ledger.query(account_id=account.id)

    def recent_trades(self, limit: int | None = None, account_id: str | None = None) -> Sequence[TradeEntry]:
        limit = self.settings.recent_trades_limit if limit is None else limit
        return self.ledger.query(account_id=account_id, limit=limit)

    def trades_in_range(self, account_id: str, start_date: date, end_date: date) -> Sequence[TradeEntry]:
        account = self._account(account_id)
        return self.ledger.query(account_id=account.id, start_date=start_date, end_date=end_date)
