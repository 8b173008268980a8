# app/models/assets.py
from sqlalchemy import CheckConstraint, Column, Date, Enum, Integer, Numeric, String, Text, TIMESTAMP
from sqlalchemy.orm import relationship
from shared.core.database import Base
from ..enum.asset_enum import AssetCategory, AssetStatus
from .service_directions import ServiceDirection  # noqa: F401  registers the relationship target


class Asset(Base):
    __tablename__ = "assets"
    __table_args__ = (
        CheckConstraint("value IS NULL OR value >= 0",
                        name="ck_assets_value_non_negative"),
        # ids are never reused after a delete
        {"sqlite_autoincrement": True},
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    reference = Column(String(128))
    description = Column(Text)
    category = Column(Enum(AssetCategory, name="asset_category",
                      native_enum=False, length=32))
    status = Column(Enum(AssetStatus, name="asset_status", native_enum=False, length=32),
                    default=AssetStatus.IN_SERVICE, nullable=False)
    acquisition_date = Column(Date)
    value = Column(Numeric(14, 2))
    serial_number = Column(String(128))
    location = Column(String(255))
    service_id = Column(Integer, nullable=True, index=True)  # plain id, no FK

    created_at = Column(TIMESTAMP(timezone=True))
    updated_at = Column(TIMESTAMP(timezone=True))
    created_by = Column(String(128))
    modified_by = Column(String(128))

    # Deleting a service leaves service_id dangling, the join just finds nothing
    service = relationship(
        "ServiceDirection",
        primaryjoin="foreign(Asset.service_id) == ServiceDirection.id",
        viewonly=True,
        lazy="joined",
    )

    @property
    def service_name(self):
        return self.service.name if self.service else None
