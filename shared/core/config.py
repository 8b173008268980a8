import os
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


class Settings(BaseSettings):
    # Full URL wins; otherwise the postgres parts below are used
    DATABASE_URL: Optional[str] = os.getenv("DATABASE_URL")

    DB_USER: Optional[str] = os.getenv("DB_USER")
    DB_PASS: Optional[str] = os.getenv("DB_PASS")
    DB_HOST: Optional[str] = os.getenv("DB_HOST")
    DB_PORT: Optional[str] = os.getenv("DB_PORT")
    DB_NAME: Optional[str] = os.getenv("DB_NAME")

    DB_POOL_SIZE: int = int(os.getenv("DB_POOL_SIZE", 2))
    DB_MAX_OVERFLOW: int = int(os.getenv("DB_MAX_OVERFLOW", 2))

    # Actor used when the caller does not send X-User
    DEFAULT_ACTOR: str = os.getenv("DEFAULT_ACTOR", "system")

    # False: unknown serviceId on create/update degrades to "no service"
    # True: unknown serviceId is rejected with 404
    STRICT_SERVICE_RESOLUTION: bool = os.getenv(
        "STRICT_SERVICE_RESOLUTION", "False").lower() == "true"

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = [
        "http://localhost:4200",
        "http://127.0.0.1:4200",
    ]
    EXPORT_FILENAME: str = os.getenv("EXPORT_FILENAME", "assets.csv")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


settings = Settings()


def build_database_url(config: Settings = settings) -> str:
    if config.DATABASE_URL:
        return config.DATABASE_URL

    if config.DB_HOST and config.DB_NAME:
        return (
            f"postgresql+psycopg2://{config.DB_USER}:{config.DB_PASS}@{config.DB_HOST}:{config.DB_PORT}/{config.DB_NAME}"
        )

    return "sqlite:///./assets.db"


ASSET_DATABASE_URL = build_database_url()
