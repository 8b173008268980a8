# app/crud/assets_crud.py
from decimal import Decimal
from typing import Iterable, List, Mapping, Optional, Tuple
from sqlalchemy import false, func, or_
from sqlalchemy.orm import Session

from shared.utils.app_status_code import AppStatusCode
from shared.helpers.json_response_helper import error_response
from ..enum.asset_enum import AssetStatus, find_enum
from ..models.assets import Asset


# ----------------------------------------------------------------------
# FILTERS / SORTING
# ----------------------------------------------------------------------

SORT_FIELDS = {
    "id": Asset.id,
    "name": Asset.name,
    "reference": Asset.reference,
    "category": Asset.category,
    "status": Asset.status,
    "acquisitionDate": Asset.acquisition_date,
    "value": Asset.value,
    "serialNumber": Asset.serial_number,
    "location": Asset.location,
    "serviceId": Asset.service_id,
    "createdAt": Asset.created_at,
    "updatedAt": Asset.updated_at,
}
# snake_case spellings are accepted too
SORT_FIELDS.update({col.key: col for col in list(SORT_FIELDS.values())})


def _blank(value) -> bool:
    return value is None or str(value).strip() == ""


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def parse_service_id(raw) -> int:
    # plain ascii digits only: no sign, no underscores
    text = str(raw).strip()
    if not (text.isascii() and text.isdigit()):
        return error_response(
            message=f"Invalid serviceId '{raw}'",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )
    return int(text)


def build_asset_filters(filters: Optional[Mapping[str, str]]):
    """
    Translate the recognized filter keys into SQL conditions.

    serviceId, status and search are ANDed; any other key is ignored.
    The same list is used by the paged and unpaged queries.
    """
    conditions = []
    if not filters:
        return conditions

    if not _blank(filters.get("serviceId")):
        conditions.append(
            Asset.service_id == parse_service_id(filters["serviceId"]))

    if not _blank(filters.get("status")):
        status = find_enum(AssetStatus, filters["status"])
        # unknown status matches nothing
        conditions.append(Asset.status == status if status else false())

    if not _blank(filters.get("search")):
        conditions.append(search_condition(filters["search"]))

    return conditions


def search_condition(q: str):
    search_term = f"%{_escape_like(q.strip())}%"
    return or_(
        Asset.name.ilike(search_term, escape="\\"),
        Asset.reference.ilike(search_term, escape="\\"),
    )


def resolve_sort(sort: Optional[str], direction: Optional[str]):
    column = SORT_FIELDS.get((sort or "id").strip() or "id")
    if column is None:
        return error_response(
            message=f"Unknown sort field '{sort}'",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )

    direction = (direction or "asc").strip().lower()
    if direction not in ("asc", "desc"):
        return error_response(
            message=f"Invalid sort direction '{direction}', expected asc or desc",
            status_code=AppStatusCode.INVALID_INPUT,
            http_status=400
        )

    ordering = [column.desc() if direction == "desc" else column.asc()]
    if column is not Asset.id:
        # stable pages when the sort column has duplicates
        ordering.append(Asset.id.asc())
    return ordering


# ----------------------------------------------------------------------
# READS
# ----------------------------------------------------------------------

def get_assets(db: Session, filters: Optional[Mapping[str, str]] = None) -> List[Asset]:
    return (
        db.query(Asset)
        .filter(*build_asset_filters(filters))
        .order_by(Asset.id.asc())
        .all()
    )


def get_assets_page(
        db: Session,
        page: int,
        size: int,
        sort: Optional[str] = None,
        direction: Optional[str] = None,
        filters: Optional[Mapping[str, str]] = None) -> Tuple[List[Asset], int]:
    ordering = resolve_sort(sort, direction)
    base_query = db.query(Asset).filter(*build_asset_filters(filters))

    total = base_query.with_entities(func.count(Asset.id)).scalar()
    results = (
        base_query
        .order_by(*ordering)
        .offset(page * size)
        .limit(size)
        .all()
    )
    return results, total


def get_asset_by_id(db: Session, asset_id: int) -> Optional[Asset]:
    return db.query(Asset).filter(Asset.id == asset_id).first()


def get_assets_by_ids(db: Session, asset_ids: Iterable[int]) -> List[Asset]:
    """Existing assets for the given ids, in request order, duplicates collapsed."""
    wanted = list(dict.fromkeys(asset_ids or []))
    if not wanted:
        return []

    found = {
        asset.id: asset
        for asset in db.query(Asset).filter(Asset.id.in_(wanted)).all()
    }
    return [found[asset_id] for asset_id in wanted if asset_id in found]


def get_assets_by_service(db: Session, service_id: int) -> List[Asset]:
    return (
        db.query(Asset)
        .filter(Asset.service_id == service_id)
        .order_by(Asset.id.asc())
        .all()
    )


def search_assets(db: Session, q: str) -> List[Asset]:
    query = db.query(Asset)
    if not _blank(q):
        query = query.filter(search_condition(q))
    return query.order_by(Asset.id.asc()).all()


def count_assets(db: Session) -> int:
    return db.query(func.count(Asset.id)).scalar() or 0


def count_by_status(db: Session, status: AssetStatus) -> int:
    return (
        db.query(func.count(Asset.id))
        .filter(Asset.status == status)
        .scalar()
    ) or 0


def total_asset_value(db: Session) -> Decimal:
    # Summed in Python: SQLite would add the values as floats
    total = Decimal("0.00")
    for (value,) in db.query(Asset.value).all():
        total += value if value is not None else Decimal("0")
    return total


# ----------------------------------------------------------------------
# WRITES (flush only, the caller commits)
# ----------------------------------------------------------------------

def save_asset(db: Session, asset: Asset) -> Asset:
    if asset.id is None:
        db.add(asset)
    else:
        asset = db.merge(asset)
    db.flush()
    return asset


def delete_assets(db: Session, asset_ids: Iterable[int]) -> List[int]:
    """
    Remove every existing asset among asset_ids.
    Returns: the ids actually removed, in request order
    """
    removed = []
    for asset in get_assets_by_ids(db, asset_ids):
        db.delete(asset)
        removed.append(asset.id)
    db.flush()
    return removed


def delete_asset(db: Session, asset_id: int) -> bool:
    return bool(delete_assets(db, [asset_id]))
