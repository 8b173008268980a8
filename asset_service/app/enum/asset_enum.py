from enum import Enum
from typing import Type, TypeVar

from shared.utils.app_status_code import AppStatusCode
from shared.helpers.json_response_helper import error_response

E = TypeVar("E", bound=Enum)


class AssetStatus(str, Enum):

    IN_SERVICE = "IN_SERVICE"
    BROKEN = "BROKEN"
    IN_MAINTENANCE = "IN_MAINTENANCE"
    OUT_OF_SERVICE = "OUT_OF_SERVICE"


class AssetCategory(str, Enum):

    TOPOGRAPHIC = "TOPOGRAPHIC"
    IT = "IT"
    VEHICLE = "VEHICLE"
    FURNITURE = "FURNITURE"
    OTHER = "OTHER"


class AssetAction(str, Enum):

    CREATED = "CREATED"
    UPDATED = "UPDATED"
    DELETED = "DELETED"
    STATUS_CHANGED = "STATUS_CHANGED"


def parse_enum(enum_cls: Type[E], value: str, ignore_case: bool = False) -> E:
    """Parse a wire string into an enum member, 400 if it is not one."""
    if value is not None:
        candidate = value.strip()
        for member in enum_cls:
            if member.value == candidate or (
                ignore_case and member.value.lower() == candidate.lower()
            ):
                return member

    allowed = ", ".join(m.value for m in enum_cls)
    return error_response(
        message=f"Invalid {enum_cls.__name__} '{value}'. Allowed values: {allowed}",
        status_code=AppStatusCode.INVALID_INPUT,
        http_status=400
    )


def find_enum(enum_cls: Type[E], value: str):
    """Case-insensitive lookup that returns None instead of failing."""
    if value is None:
        return None
    for member in enum_cls:
        if member.value.lower() == value.strip().lower():
            return member
    return None
