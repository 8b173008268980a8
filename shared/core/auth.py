from typing import Optional
from fastapi import Header
from shared.core.config import settings


def get_current_actor(x_user: Optional[str] = Header(None, alias="X-User")) -> str:
    """
    Identity recorded in the audit trail for mutating calls.

    Token validation lives in the auth collaborator; this service only needs
    the caller's name, which the gateway forwards as X-User.
    """
    if x_user and x_user.strip():
        return x_user.strip()
    return settings.DEFAULT_ACTOR
