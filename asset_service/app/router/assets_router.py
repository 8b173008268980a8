# app/router/assets_router.py
from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query
from sqlalchemy.orm import Session

from shared.core.auth import get_current_actor
from shared.core.config import settings
from shared.core.database import get_asset_db as get_db
from shared.core.schemas import JsonOutResult, PageResponse
from shared.exporthelper import table_download_response
from shared.helpers.json_response_helper import error_response, success_response
from shared.utils.app_status_code import AppStatusCode
from ..schemas.asset_history_schemas import AssetHistoryOut
from ..schemas.assets_schemas import (
    AssetCreate, AssetExportRequest, AssetOut, AssetStatistics, AssetUpdate,
    BulkDeleteRequest, BulkStatusRequest)
from ..services import asset_lifecycle_service as service

router = APIRouter(
    prefix="/assets",
    tags=["assets"],
)


def asset_filters(
        service_id: Optional[str] = Query(None, alias="serviceId"),
        status: Optional[str] = Query(None),
        search: Optional[str] = Query(None)) -> dict:
    # serviceId stays text here so a malformed value is a 400 from the store
    filters = {"serviceId": service_id, "status": status, "search": search}
    return {k: v for k, v in filters.items() if v is not None}


# Static routes first, /{asset_id} last
@router.get("", response_model=JsonOutResult[List[AssetOut]])
def get_assets(
        filters: dict = Depends(asset_filters),
        db: Session = Depends(get_db)):
    return success_response(service.get_assets(db, filters))


@router.get("/paginated", response_model=JsonOutResult[PageResponse[AssetOut]])
def get_assets_paginated(
        page: int = Query(0, ge=0),
        size: int = Query(10, gt=0),
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        filters: dict = Depends(asset_filters),
        db: Session = Depends(get_db)):
    return success_response(
        service.get_assets_page(db, page, size, sort, direction, filters))


@router.get("/stats", response_model=JsonOutResult[AssetStatistics])
def get_asset_stats(db: Session = Depends(get_db)):
    return success_response(service.get_statistics(db))


@router.get("/search", response_model=JsonOutResult[List[AssetOut]])
def search_assets(q: str = Query(...), db: Session = Depends(get_db)):
    return success_response(service.search_assets(db, q))


@router.get("/service/{service_id}", response_model=JsonOutResult[List[AssetOut]])
def get_assets_by_service(service_id: int, db: Session = Depends(get_db)):
    return success_response(service.get_assets_by_service(db, service_id))


@router.post("", response_model=JsonOutResult[AssetOut])
def create_asset(
        asset: AssetCreate,
        db: Session = Depends(get_db),
        actor: str = Depends(get_current_actor)):
    return success_response(
        service.create_asset(db, asset, actor),
        message="Asset created successfully")


@router.patch("/bulk/status", response_model=JsonOutResult[List[AssetOut]])
def bulk_update_status(
        request: BulkStatusRequest,
        db: Session = Depends(get_db),
        actor: str = Depends(get_current_actor)):
    updated = service.bulk_update_status(
        db, request.asset_ids, request.status, actor)
    return success_response(updated, message=f"{len(updated)} asset(s) updated")


@router.delete("", response_model=JsonOutResult)
def bulk_delete(
        request: BulkDeleteRequest,
        db: Session = Depends(get_db),
        actor: str = Depends(get_current_actor)):
    removed = service.bulk_delete(db, request.asset_ids, actor)
    return success_response(None, message=f"{len(removed)} asset(s) deleted")


@router.post("/export")
def export_assets(
        request: Optional[AssetExportRequest] = Body(None),
        db: Session = Depends(get_db)):
    asset_ids = request.assets if request else None
    content = service.export_assets(db, asset_ids)
    return table_download_response(content, settings.EXPORT_FILENAME)


@router.get("/{asset_id}", response_model=JsonOutResult[AssetOut])
def get_asset(asset_id: int, db: Session = Depends(get_db)):
    asset = service.get_asset(db, asset_id)
    if not asset:
        return error_response(
            message="Asset not found",
            status_code=AppStatusCode.NOT_FOUND,
            http_status=404
        )
    return success_response(asset)


@router.put("/{asset_id}", response_model=JsonOutResult[AssetOut])
def update_asset(
        asset_id: int,
        asset_update: AssetUpdate,
        db: Session = Depends(get_db),
        actor: str = Depends(get_current_actor)):
    return success_response(
        service.update_asset(db, asset_id, asset_update, actor),
        message="Asset updated successfully")


@router.delete("/{asset_id}", response_model=JsonOutResult)
def delete_asset(
        asset_id: int,
        db: Session = Depends(get_db),
        actor: str = Depends(get_current_actor)):
    service.delete_asset(db, asset_id, actor)
    return success_response(None, message="Asset deleted successfully")


@router.get("/{asset_id}/history", response_model=JsonOutResult[List[AssetHistoryOut]])
def get_asset_history(asset_id: int, db: Session = Depends(get_db)):
    return success_response(service.get_history(db, asset_id))
