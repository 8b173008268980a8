from datetime import datetime
from typing import Optional

from shared.core.schemas import CamelModel
from ..enum.asset_enum import AssetAction


class AssetHistoryOut(CamelModel):
    id: int
    asset_id: int
    action: AssetAction
    details: Optional[str] = None
    timestamp: datetime
    performed_by: str
