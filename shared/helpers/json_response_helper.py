# shared/helpers/json_response_helper.py
from fastapi import HTTPException
from typing import Any, Optional

from shared.utils.app_status_code import AppStatusCode
from shared.core.schemas import JsonOutResult


def success_response(data: Any, message: Optional[str] = None):
    return JsonOutResult(
        success=True,
        data=data,
        message=message
    )


def error_response(message: str, status_code: str = AppStatusCode.OPERATION_FAILED, http_status: int = 400):
    raise HTTPException(
        status_code=http_status,
        detail={
            "message": message,
            "status_code": status_code,
        }
    )
