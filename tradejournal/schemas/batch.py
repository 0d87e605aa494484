"""Pydantic schemas for the batch submission wire format."""

from typing import Any

from pydantic import BaseModel, Field


class RowResultRead(BaseModel):
    index: int
    status: str  # "success" | "failed"
    transaction_id: str | None = Field(default=None, serialization_alias="transactionId")
    end_balance: float | None = Field(default=None, serialization_alias="endBalance")
    error: str | None = None
    error_kind: str | None = Field(default=None, serialization_alias="errorKind")
    warning: str | None = None


class BatchResultRead(BaseModel):
    status: str  # "success" | "partial" | "failure"
    message: str
    results: list[RowResultRead] = []
    total: int = 0
    succeeded: int = 0
    failed: int = 0
    duplicate_dates: int = Field(default=0, serialization_alias="duplicateDates")


def batch_result_payload(result) -> dict[str, Any]:
    """Serialize a BatchResult into the caller-facing JSON shape."""
    body = BatchResultRead(
        status=result.overall_status,
        message=result.message,
        results=[
            RowResultRead(
                index=row.index,
                status=row.status,
                transaction_id=row.transaction_id,
                end_balance=float(row.end_balance) if row.end_balance is not None else None,
                error=row.error,
                error_kind=row.error_kind.value if row.error_kind else None,
                warning=row.warning,
            )
            for row in result.row_results
        ],
        total=len(result.row_results),
        succeeded=result.success_count,
        failed=result.failure_count,
        duplicate_dates=result.duplicate_dates,
    )
    return body.model_dump(by_alias=True, exclude_none=True)
