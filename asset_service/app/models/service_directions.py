# app/models/service_directions.py
from sqlalchemy import Boolean, Column, Integer, String, Text
from shared.core.database import Base


class ServiceDirection(Base):
    __tablename__ = "service_directions"
    __table_args__ = ({"sqlite_autoincrement": True},)

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(200), nullable=False)
    description = Column(Text)
    code = Column(String(64))
    manager = Column(String(200))
    email = Column(String(200))
    phone = Column(String(64))
    active = Column(Boolean, default=True, nullable=False)
