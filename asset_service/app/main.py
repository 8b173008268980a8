import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import asset_engine, Base
from shared.exception_handler import setup_exception_handlers
from .models import asset_history, assets, service_directions  # noqa: F401  registers tables
from .router import assets_router, service_direction_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s]: %(message)s"
)

app = FastAPI(title="Asset Service API")

# Create all tables
Base.metadata.create_all(bind=asset_engine)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

setup_exception_handlers(app)

# Include routers
app.include_router(assets_router.router)
app.include_router(service_direction_router.router)
