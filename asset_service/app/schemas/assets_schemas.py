# app/schemas/assets_schemas.py
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional
from pydantic import Field

from shared.core.schemas import CamelModel
from ..enum.asset_enum import AssetCategory, AssetStatus


class AssetBase(CamelModel):
    name: str
    reference: Optional[str] = None
    description: Optional[str] = None
    category: Optional[AssetCategory] = None
    status: AssetStatus = AssetStatus.IN_SERVICE
    acquisition_date: Optional[date] = None
    value: Optional[Decimal] = Field(
        None, ge=0, max_digits=14, decimal_places=2)
    serial_number: Optional[str] = None
    location: Optional[str] = None


class AssetCreate(AssetBase):
    service_id: Optional[int] = None


class AssetUpdate(CamelModel):
    name: Optional[str] = None
    reference: Optional[str] = None
    description: Optional[str] = None
    category: Optional[AssetCategory] = None
    status: Optional[AssetStatus] = None
    acquisition_date: Optional[date] = None
    value: Optional[Decimal] = Field(
        None, ge=0, max_digits=14, decimal_places=2)
    serial_number: Optional[str] = None
    location: Optional[str] = None
    service_id: Optional[int] = None


class AssetOut(CamelModel):
    id: int
    name: str
    reference: Optional[str] = None
    description: Optional[str] = None
    category: Optional[AssetCategory] = None
    status: AssetStatus
    acquisition_date: Optional[date] = None
    value: Optional[Decimal] = None
    serial_number: Optional[str] = None
    location: Optional[str] = None
    service_id: Optional[int] = None
    service_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    created_by: Optional[str] = None
    modified_by: Optional[str] = None


class BulkStatusRequest(CamelModel):
    asset_ids: List[int]
    # kept as text so an unknown status is a 400, not a schema error
    status: str


class BulkDeleteRequest(CamelModel):
    asset_ids: List[int]


class AssetExportRequest(CamelModel):
    assets: Optional[List[int]] = None


class AssetStatistics(CamelModel):
    total_assets: int
    active_assets: int
    broken_assets: int
    maintenance_assets: int
    out_of_service_assets: int
    counts_by_status: Dict[str, int]
    total_value: Decimal
