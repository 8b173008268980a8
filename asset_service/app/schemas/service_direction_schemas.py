# app/schemas/service_direction_schemas.py
from typing import Optional

from shared.core.schemas import CamelModel


class ServiceDirectionBase(CamelModel):
    name: str
    description: Optional[str] = None
    code: Optional[str] = None
    manager: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    active: bool = True


class ServiceDirectionCreate(ServiceDirectionBase):
    pass


class ServiceDirectionUpdate(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    code: Optional[str] = None
    manager: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    active: Optional[bool] = None


class ServiceDirectionOut(ServiceDirectionBase):
    id: int
