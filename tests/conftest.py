"""
Pytest configuration and fixtures for the asset service tests
"""
import os

# Must be set before the app modules build their engine
os.environ.setdefault("DATABASE_URL", "sqlite://")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from shared.core.database import Base, get_asset_db
from asset_service.app.main import app
from asset_service.app.enum.asset_enum import AssetCategory, AssetStatus
from asset_service.app.models.service_directions import ServiceDirection
from asset_service.app.schemas.assets_schemas import AssetCreate
from asset_service.app.services import asset_lifecycle_service


@pytest.fixture(scope='function')
def engine():
    """Fresh in-memory database per test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope='function')
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope='function')
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture(scope='function')
def client(session_factory):
    """FastAPI test client bound to the test database"""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_asset_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_service(db):
    def _make(name="Finance", code="FIN", active=True):
        service = ServiceDirection(name=name, code=code, active=active)
        db.add(service)
        db.commit()
        db.refresh(service)
        return service
    return _make


@pytest.fixture
def make_asset(db):
    def _make(name="Laptop", actor="tester", **fields):
        fields.setdefault("reference", f"REF-{name.upper()}")
        fields.setdefault("category", AssetCategory.IT)
        fields.setdefault("status", AssetStatus.IN_SERVICE)
        fields.setdefault("value", Decimal("100.00"))
        payload = AssetCreate(name=name, **fields)
        return asset_lifecycle_service.create_asset(db, payload, actor)
    return _make
