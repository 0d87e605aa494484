"""Asset model: reference data for traded instruments."""

from sqlmodel import SQLModel, Field


class Asset(SQLModel, table=True):
    __tablename__ = "asset"

    id: str = Field(primary_key=True, max_length=64)  # assetId
    name: str
    type: str = Field(default="", index=True)  # "Crypto", "Forex", ...
    notes: str = ""
