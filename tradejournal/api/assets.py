"""CRUD API for assets."""

from fastapi import APIRouter, Depends, HTTPException

from tradejournal.api.deps import get_asset_directory
from tradejournal.schemas.asset import AssetCreate, AssetRead, AssetUpdate
from tradejournal.services.directories import AssetDirectory
from tradejournal.services.errors import DuplicateRecordError, RecordInUseError, RecordNotFoundError

router = APIRouter(prefix="/api/assets", tags=["assets"])


@router.get("", response_model=list[AssetRead])
def list_assets(
    type: str | None = None,
    assets: AssetDirectory = Depends(get_asset_directory),
):
    if type is not None:
        return assets.find_by_type(type)
    return assets.all()


@router.post("", response_model=AssetRead, status_code=201)
def create_asset(data: AssetCreate, assets: AssetDirectory = Depends(get_asset_directory)):
    try:
        return assets.create(data.model_dump())
    except DuplicateRecordError as e:
        raise HTTPException(status_code=409, detail=str(e))


@router.get("/{asset_id}", response_model=AssetRead)
def get_asset(asset_id: str, assets: AssetDirectory = Depends(get_asset_directory)):
    asset = assets.find_by_id(asset_id)
    if not asset:
        raise HTTPException(status_code=404, detail="Asset not found")
    return asset


@router.put("/{asset_id}", response_model=AssetRead)
def update_asset(
    asset_id: str,
    data: AssetUpdate,
    assets: AssetDirectory = Depends(get_asset_directory),
):
    changes = {k: v for k, v in data.model_dump(exclude_unset=True).items() if v is not None}
    try:
        return assets.update(asset_id, changes)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Asset not found")


@router.delete("/{asset_id}", status_code=204)
def delete_asset(asset_id: str, assets: AssetDirectory = Depends(get_asset_directory)):
    try:
        assets.delete(asset_id)
    except RecordNotFoundError:
        raise HTTPException(status_code=404, detail="Asset not found")
    except RecordInUseError:
        raise HTTPException(
            status_code=409,
            detail="Cannot delete asset with trade entries. Delete them first.",
        )
