# app/services/asset_lifecycle_service.py
import logging
from datetime import datetime, timezone
from typing import List, Mapping, Optional
from sqlalchemy.orm import Session

from shared.core.config import settings
from shared.core.database import unit_of_work
from shared.core.schemas import PageResponse
from shared.exporthelper import export_to_table
from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ..crud import assets_crud, asset_history_crud, service_direction_crud
from ..enum.asset_enum import AssetAction, AssetStatus, parse_enum
from ..models.assets import Asset
from ..schemas.asset_history_schemas import AssetHistoryOut
from ..schemas.assets_schemas import AssetCreate, AssetOut, AssetStatistics, AssetUpdate

logger = logging.getLogger(__name__)

EXPORT_COLUMNS = {
    "id": "id",
    "name": "name",
    "reference": "reference",
    "category": "category",
    "status": "status",
    "acquisition_date": "acquisitionDate",
    "value": "value",
    "serial_number": "serialNumber",
    "location": "location",
    "service_name": "serviceName",
}


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _require_actor(actor: str) -> str:
    if actor is None or not str(actor).strip():
        return error_response(
            message="An actor identity is required for this operation",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )
    return actor


def _strict(strict_service: Optional[bool]) -> bool:
    if strict_service is None:
        return settings.STRICT_SERVICE_RESOLUTION
    return strict_service


def to_asset_out(asset: Asset) -> AssetOut:
    return AssetOut.model_validate(asset)


# ----------------------------------------------------------------------
# READS
# ----------------------------------------------------------------------

def get_assets(db: Session, filters: Optional[Mapping[str, str]] = None) -> List[AssetOut]:
    return [to_asset_out(a) for a in assets_crud.get_assets(db, filters)]


def get_assets_page(db: Session, page: int, size: int, sort: Optional[str] = None,
                    direction: Optional[str] = None,
                    filters: Optional[Mapping[str, str]] = None) -> PageResponse[AssetOut]:
    rows, total = assets_crud.get_assets_page(
        db, page, size, sort, direction, filters)
    content = [to_asset_out(a) for a in rows]
    return PageResponse[AssetOut].build(content, total, page, size)


def get_asset(db: Session, asset_id: int) -> Optional[AssetOut]:
    asset = assets_crud.get_asset_by_id(db, asset_id)
    return to_asset_out(asset) if asset else None


def search_assets(db: Session, q: str) -> List[AssetOut]:
    return [to_asset_out(a) for a in assets_crud.search_assets(db, q)]


def get_assets_by_service(db: Session, service_id: int) -> List[AssetOut]:
    return [to_asset_out(a) for a in assets_crud.get_assets_by_service(db, service_id)]


def get_history(db: Session, asset_id: int) -> List[AssetHistoryOut]:
    return [
        AssetHistoryOut.model_validate(h)
        for h in asset_history_crud.get_history(db, asset_id)
    ]


# ----------------------------------------------------------------------
# MUTATIONS
# ----------------------------------------------------------------------

def create_asset(db: Session, payload: AssetCreate, actor: str,
                 strict_service: Optional[bool] = None) -> AssetOut:
    _require_actor(actor)

    with unit_of_work(db):
        service = service_direction_crud.resolve_service(
            db, payload.service_id, _strict(strict_service))

        data = payload.model_dump(exclude={"service_id"})
        asset = Asset(**data)
        asset.service_id = service.id if service else None
        asset.created_at = _now()
        asset.created_by = actor

        asset = assets_crud.save_asset(db, asset)
        asset_history_crud.append_history(
            db, asset.id, AssetAction.CREATED, "Asset created", actor)

    logger.info("Asset %s created by %s", asset.id, actor)
    return to_asset_out(asset)


def update_asset(db: Session, asset_id: int, payload: AssetUpdate, actor: str,
                 strict_service: Optional[bool] = None) -> AssetOut:
    _require_actor(actor)

    with unit_of_work(db):
        asset = assets_crud.get_asset_by_id(db, asset_id)
        if not asset:
            return error_response(
                message="Asset not found",
                status_code=AppStatusCode.NOT_FOUND,
                http_status=404
            )

        # Absent or null fields keep the stored value
        update_data = payload.model_dump(
            exclude_none=True, exclude={"service_id"})
        for field, value in update_data.items():
            setattr(asset, field, value)

        if payload.service_id is not None:
            service = service_direction_crud.resolve_service(
                db, payload.service_id, _strict(strict_service))
            if service:
                asset.service_id = service.id

        asset.updated_at = _now()
        asset.modified_by = actor

        asset = assets_crud.save_asset(db, asset)
        asset_history_crud.append_history(
            db, asset.id, AssetAction.UPDATED, "Asset updated", actor)

    logger.info("Asset %s updated by %s", asset_id, actor)
    return to_asset_out(asset)


def delete_asset(db: Session, asset_id: int, actor: str) -> bool:
    """
    Remove one asset and record the deletion.
    Returns: True if deleted, False if it did not exist (nothing is logged)
    """
    _require_actor(actor)

    with unit_of_work(db):
        deleted = assets_crud.delete_asset(db, asset_id)
        if deleted:
            asset_history_crud.append_history(
                db, asset_id, AssetAction.DELETED, "Asset deleted", actor)

    if deleted:
        logger.info("Asset %s deleted by %s", asset_id, actor)
    return deleted


def bulk_update_status(db: Session, asset_ids: List[int], status_name: str,
                       actor: str) -> List[AssetOut]:
    _require_actor(actor)
    # Validated before any row is loaded
    status = parse_enum(AssetStatus, status_name)

    with unit_of_work(db):
        assets = assets_crud.get_assets_by_ids(db, asset_ids)
        now = _now()
        for asset in assets:
            asset.status = status
            asset.updated_at = now
            asset.modified_by = actor
        db.flush()

        for asset in assets:
            asset_history_crud.append_history(
                db, asset.id, AssetAction.STATUS_CHANGED,
                f"Status changed to {status.value}", actor)

    logger.info("Bulk status %s applied to %d of %d assets by %s",
                status.value, len(assets), len(asset_ids or []), actor)
    return [to_asset_out(a) for a in assets]


def bulk_delete(db: Session, asset_ids: List[int], actor: str) -> List[int]:
    """
    Remove the existing assets among asset_ids.

    One DELETED entry is written per asset actually removed; ids that did
    not exist are skipped without a trace.
    """
    _require_actor(actor)

    with unit_of_work(db):
        removed = assets_crud.delete_assets(db, asset_ids)
        for asset_id in removed:
            asset_history_crud.append_history(
                db, asset_id, AssetAction.DELETED, "Bulk deletion", actor)

    logger.info("Bulk delete removed %d of %d assets by %s",
                len(removed), len(asset_ids or []), actor)
    return removed


# ----------------------------------------------------------------------
# REPORTING
# ----------------------------------------------------------------------

def get_statistics(db: Session) -> AssetStatistics:
    counts = {
        status.value: assets_crud.count_by_status(db, status)
        for status in AssetStatus
    }
    return AssetStatistics(
        total_assets=assets_crud.count_assets(db),
        active_assets=counts[AssetStatus.IN_SERVICE.value],
        broken_assets=counts[AssetStatus.BROKEN.value],
        maintenance_assets=counts[AssetStatus.IN_MAINTENANCE.value],
        out_of_service_assets=counts[AssetStatus.OUT_OF_SERVICE.value],
        counts_by_status=counts,
        total_value=assets_crud.total_asset_value(db),
    )


def export_assets(db: Session, asset_ids: Optional[List[int]] = None) -> str:
    if asset_ids:
        assets = assets_crud.get_assets_by_ids(db, asset_ids)
    else:
        assets = assets_crud.get_assets(db)

    rows = [
        {key: getattr(asset, key) for key in EXPORT_COLUMNS}
        for asset in assets
    ]
    return export_to_table(rows, EXPORT_COLUMNS)
