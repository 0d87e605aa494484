"""Shared constants for ledger submission and reporting."""

# Raw entry fields that must be present and non-empty, in the order errors are reported
REQUIRED_ENTRY_FIELDS = ["accountId", "assetId", "startBalance", "dailyProfit", "lotSize"]
NUMERIC_ENTRY_FIELDS = ["startBalance", "dailyProfit", "lotSize"]

TRADE_DATE_FORMAT = "%Y-%m-%d"

# Grouping keys accepted by the statistics aggregator
GROUP_BY_ACCOUNT = "account"
GROUP_BY_ASSET = "asset"
VALID_GROUP_BY = [GROUP_BY_ACCOUNT, GROUP_BY_ASSET]
UNKNOWN_GROUP_KEY = "unknown"

# Batch / row statuses
STATUS_SUCCESS = "success"
STATUS_PARTIAL = "partial"
STATUS_FAILURE = "failure"
ROW_SUCCESS = "success"
ROW_FAILED = "failed"

# Money columns: Numeric(20, 8)
MONEY_MAX_DIGITS = 20
MONEY_DECIMAL_PLACES = 8
MONEY_INTEGER_DIGITS = MONEY_MAX_DIGITS - MONEY_DECIMAL_PLACES
