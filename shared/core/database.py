from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base
from shared.core.config import ASSET_DATABASE_URL, settings

Base = declarative_base()


def build_engine(url: str = ASSET_DATABASE_URL):
    if url.startswith("sqlite"):
        return create_engine(
            url, connect_args={"check_same_thread": False}
        )

    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=settings.DB_POOL_SIZE,        # max idle connections
        max_overflow=settings.DB_MAX_OVERFLOW,  # max temporary extra connections
        pool_timeout=30                         # wait time before failing
    )


asset_engine = build_engine()
AssetSessionLocal = sessionmaker(
    autocommit=False, autoflush=False, bind=asset_engine)


# Dependency
def get_asset_db():
    db = AssetSessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session):
    """
    Commit everything flushed inside the block as one transaction.

    A mutation and the audit entries describing it are written in the same
    block, so either both are committed or both are rolled back.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
