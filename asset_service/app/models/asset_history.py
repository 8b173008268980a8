# app/models/asset_history.py
from sqlalchemy import Column, Enum, Integer, Text, String, TIMESTAMP
from shared.core.database import Base
from ..enum.asset_enum import AssetAction


class AssetHistory(Base):
    __tablename__ = "asset_history"
    __table_args__ = ({"sqlite_autoincrement": True},)

    id = Column(Integer, primary_key=True, autoincrement=True)
    asset_id = Column(Integer, nullable=False, index=True)  # outlives the asset, no FK
    action = Column(Enum(AssetAction, name="asset_action",
                    native_enum=False, length=32), nullable=False)
    details = Column(Text)
    timestamp = Column(TIMESTAMP(timezone=True), nullable=False)
    performed_by = Column(String(128), nullable=False)
