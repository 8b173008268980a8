# app/crud/asset_history_crud.py
from datetime import datetime, timezone
from typing import List
from sqlalchemy.orm import Session

from ..enum.asset_enum import AssetAction
from ..models.asset_history import AssetHistory


def append_history(db: Session, asset_id: int, action: AssetAction, details: str, actor: str) -> AssetHistory:
    """
    Add one audit entry to the current transaction.

    Entries are only flushed here; the caller's unit of work commits them
    together with the mutation they describe. There is no update or delete
    counterpart.
    """
    entry = AssetHistory(
        asset_id=asset_id,
        action=action,
        details=details,
        timestamp=datetime.now(timezone.utc),
        performed_by=actor,
    )
    db.add(entry)
    db.flush()
    return entry


def get_history(db: Session, asset_id: int) -> List[AssetHistory]:
    # No existence check on the asset: history outlives deletion
    return (
        db.query(AssetHistory)
        .filter(AssetHistory.asset_id == asset_id)
        .order_by(AssetHistory.timestamp.desc(), AssetHistory.id.desc())
        .all()
    )
