"""Pydantic schemas for Asset API."""

from pydantic import BaseModel, Field, field_validator


class AssetCreate(BaseModel):
    id: str = Field(min_length=1, max_length=64)
    name: str = Field(min_length=1, max_length=120)
    type: str = Field(default="", max_length=64)
    notes: str = ""

    @field_validator("id", "name")
    @classmethod
    def _trim_required_text(cls, value: str) -> str:
        text = value.strip()
        if not text:
            raise ValueError("must not be empty")
        return text


class AssetUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=120)
    type: str | None = Field(default=None, max_length=64)
    notes: str | None = None


class AssetRead(BaseModel):
    id: str
    name: str
    type: str
    notes: str

    model_config = {"from_attributes": True}
