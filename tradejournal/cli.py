"""CLI tool for admin operations.

Usage:
    python -m tradejournal.cli init-db
    python -m tradejournal.cli import-csv <path>
    python -m tradejournal.cli stats [account_id]
"""

import csv
import sys
from pathlib import Path

from sqlmodel import Session

from tradejournal.database import engine, create_db_and_tables
from tradejournal.services.batch_submission import BatchResult, BatchSubmissionCoordinator
from tradejournal.services.directories import AccountDirectory, AssetDirectory
from tradejournal.services.errors import EmptyBatchError, RecordNotFoundError
from tradejournal.services.ledger_store import LedgerStore
from tradejournal.services.reporting import JournalReports
from tradejournal.utils.logging import setup_logging


def read_rows(path: Path) -> list[dict]:
    """Read a CSV with a header row (accountId, assetId, startBalance, ...)."""
    with open(path, newline="", encoding="utf-8-sig") as f:
        return [dict(row) for row in csv.DictReader(f)]


def import_csv(path: Path, session: Session) -> BatchResult:
    rows = read_rows(path)
    coordinator = BatchSubmissionCoordinator(
        LedgerStore(session), AccountDirectory(session), AssetDirectory(session)
    )
    return coordinator.submit_batch(rows)


def print_batch_result(result: BatchResult):
    print(f"{result.overall_status.upper()}: {result.message}")
    for row in result.row_results:
        if row.succeeded:
            line = f"  row {row.index + 1}: saved {row.transaction_id} (end balance {row.end_balance})"
            if row.warning:
                line += f" [warning: {row.warning}]"
        else:
            line = f"  row {row.index + 1}: {row.error_kind.value}: {row.error}"
        print(line)


def print_stats(session: Session, account_id: str | None):
    reports = JournalReports(LedgerStore(session), AccountDirectory(session), AssetDirectory(session))
    result = reports.get_statistics(account_id=account_id)
    rows = [result] if account_id else result
    if not rows:
        print("No trade entries.")
    for stats in rows:
        label = getattr(stats, "account_id", None) or getattr(stats, "asset_id", "")
        print(
            f"{label}: trades={stats.total_trades} profit={stats.total_profit:.2f} "
            f"win_rate={stats.win_rate:.2f}% avg={stats.average_profit:.2f}"
        )
        if stats.current_balance is not None:
            print(f"  current balance: {stats.current_balance:.2f}")


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m tradejournal.cli <command>")
        print("Commands: init-db, import-csv <path>, stats [account_id]")
        sys.exit(1)

    setup_logging()
    command = sys.argv[1]
    if command == "init-db":
        create_db_and_tables()
        print("Database initialized.")
    elif command == "import-csv":
        if len(sys.argv) < 3:
            print("Usage: python -m tradejournal.cli import-csv <path>")
            sys.exit(1)
        path = Path(sys.argv[2])
        if not path.exists():
            print(f"File not found: {path}")
            sys.exit(1)
        create_db_and_tables()
        with Session(engine) as session:
            try:
                result = import_csv(path, session)
            except EmptyBatchError as e:
                print(str(e))
                sys.exit(1)
        print_batch_result(result)
        if result.overall_status == "failure":
            sys.exit(1)
    elif command == "stats":
        account_id = sys.argv[2] if len(sys.argv) > 2 else None
        with Session(engine) as session:
            try:
                print_stats(session, account_id)
            except RecordNotFoundError as e:
                print(str(e))
                sys.exit(1)
    else:
        print(f"Unknown command: {command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
