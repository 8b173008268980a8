# app/router/service_direction_router.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from shared.core.database import get_asset_db as get_db
from shared.core.schemas import JsonOutResult, PageResponse
from shared.helpers.json_response_helper import error_response, success_response
from shared.utils.app_status_code import AppStatusCode
from ..crud import service_direction_crud as crud
from ..schemas.service_direction_schemas import ServiceDirectionCreate, ServiceDirectionOut, ServiceDirectionUpdate

router = APIRouter(
    prefix="/services",
    tags=["services"],
)


@router.get("", response_model=JsonOutResult[List[ServiceDirectionOut]])
def get_services(active: Optional[bool] = None, db: Session = Depends(get_db)):
    return success_response(crud.get_services(db, active))


@router.get("/paginated", response_model=JsonOutResult[PageResponse[ServiceDirectionOut]])
def get_services_paginated(
        page: int = Query(0, ge=0),
        size: int = Query(10, gt=0),
        db: Session = Depends(get_db)):
    return success_response(crud.get_services_page(db, page, size))


@router.get("/search", response_model=JsonOutResult[List[ServiceDirectionOut]])
def search_services(q: str = Query(...), db: Session = Depends(get_db)):
    return success_response(crud.search_services(db, q))


@router.post("", response_model=JsonOutResult[ServiceDirectionOut])
def create_service(service: ServiceDirectionCreate, db: Session = Depends(get_db)):
    db_service = crud.create_service(db, service)
    return success_response(
        ServiceDirectionOut.model_validate(db_service),
        message="Service created successfully")


# Keep parameterized routes AFTER static routes
@router.get("/{service_id}", response_model=JsonOutResult[ServiceDirectionOut])
def get_service(service_id: int, db: Session = Depends(get_db)):
    db_service = crud.get_service_by_id(db, service_id)
    if not db_service:
        return error_response(
            message="Service not found",
            status_code=AppStatusCode.NOT_FOUND,
            http_status=404
        )
    return success_response(ServiceDirectionOut.model_validate(db_service))


@router.put("/{service_id}", response_model=JsonOutResult[ServiceDirectionOut])
def update_service(
        service_id: int,
        service: ServiceDirectionUpdate,
        db: Session = Depends(get_db)):
    db_service = crud.update_service(db, service_id, service)
    return success_response(
        ServiceDirectionOut.model_validate(db_service),
        message="Service updated successfully")


@router.patch("/{service_id}/toggle", response_model=JsonOutResult[ServiceDirectionOut])
def toggle_service(service_id: int, db: Session = Depends(get_db)):
    db_service = crud.toggle_service(db, service_id)
    return success_response(ServiceDirectionOut.model_validate(db_service))


@router.delete("/{service_id}", response_model=JsonOutResult)
def delete_service(service_id: int, db: Session = Depends(get_db)):
    crud.delete_service(db, service_id)
    return success_response(None, message="Service deleted successfully")
