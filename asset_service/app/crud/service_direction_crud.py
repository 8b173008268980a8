# app/crud/service_direction_crud.py
import logging
from typing import List, Optional
from sqlalchemy import func
from sqlalchemy.orm import Session

from shared.core.schemas import PageResponse
from shared.helpers.json_response_helper import error_response
from shared.utils.app_status_code import AppStatusCode
from ..models.service_directions import ServiceDirection
from ..schemas.service_direction_schemas import ServiceDirectionCreate, ServiceDirectionOut, ServiceDirectionUpdate

logger = logging.getLogger(__name__)


def get_service_by_id(db: Session, service_id: int) -> Optional[ServiceDirection]:
    return db.query(ServiceDirection).filter(ServiceDirection.id == service_id).first()


def resolve_service(db: Session, service_id: Optional[int], strict: bool) -> Optional[ServiceDirection]:
    """
    Turn a serviceId from a request into a service row.

    With strict=False an unknown id resolves to None and the caller carries
    on without a relationship; with strict=True it is a 404.
    """
    if service_id is None:
        return None

    service = get_service_by_id(db, service_id)
    if service:
        return service

    if strict:
        return error_response(
            message=f"Service {service_id} not found",
            status_code=AppStatusCode.NOT_FOUND,
            http_status=404
        )

    logger.warning(
        "Service %s not found, asset will not be linked to a service", service_id)
    return None


def get_services(db: Session, active: Optional[bool] = None) -> List[ServiceDirectionOut]:
    query = db.query(ServiceDirection)
    if active:
        query = query.filter(ServiceDirection.active == True)
    services = query.order_by(ServiceDirection.id.asc()).all()
    return [ServiceDirectionOut.model_validate(s) for s in services]


def get_services_page(db: Session, page: int, size: int) -> PageResponse[ServiceDirectionOut]:
    total = db.query(func.count(ServiceDirection.id)).scalar()
    services = (
        db.query(ServiceDirection)
        .order_by(ServiceDirection.id.asc())
        .offset(page * size)
        .limit(size)
        .all()
    )
    content = [ServiceDirectionOut.model_validate(s) for s in services]
    return PageResponse[ServiceDirectionOut].build(content, total, page, size)


def search_services(db: Session, q: str) -> List[ServiceDirectionOut]:
    search_term = f"%{q}%"
    services = (
        db.query(ServiceDirection)
        .filter(ServiceDirection.name.ilike(search_term))
        .order_by(ServiceDirection.name.asc())
        .all()
    )
    return [ServiceDirectionOut.model_validate(s) for s in services]


def create_service(db: Session, service: ServiceDirectionCreate) -> ServiceDirection:
    db_service = ServiceDirection(**service.model_dump())
    db.add(db_service)
    db.commit()
    db.refresh(db_service)
    logger.info("Service %s created", db_service.id)
    return db_service


def update_service(db: Session, service_id: int, service_update: ServiceDirectionUpdate) -> ServiceDirection:
    db_service = get_service_by_id(db, service_id)
    if not db_service:
        return error_response(
            message="Service not found",
            status_code=AppStatusCode.NOT_FOUND,
            http_status=404
        )

    update_data = service_update.model_dump(exclude_none=True)
    for field, value in update_data.items():
        setattr(db_service, field, value)

    db.commit()
    db.refresh(db_service)
    return db_service


def toggle_service(db: Session, service_id: int) -> ServiceDirection:
    db_service = get_service_by_id(db, service_id)
    if not db_service:
        return error_response(
            message="Service not found",
            status_code=AppStatusCode.NOT_FOUND,
            http_status=404
        )

    db_service.active = not db_service.active
    db.commit()
    db.refresh(db_service)
    return db_service


def delete_service(db: Session, service_id: int) -> bool:
    """
    Hard delete a service.
    Assets pointing at it keep their service_id and simply lose the name.
    Returns: True if deleted, False if not found
    """
    db_service = get_service_by_id(db, service_id)
    if not db_service:
        return False

    db.delete(db_service)
    db.commit()
    logger.info("Service %s deleted", service_id)
    return True
