import os
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # App Info
    PROJECT_NAME: str = os.getenv("PROJECT_NAME", "QR Reorder")
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    DEBUG: bool = os.getenv("DEBUG", "true").lower() == "true"

    # Public URL of this app; scan URLs baked into QR images point here
    SHOPIFY_APP_URL: Optional[str] = os.getenv("SHOPIFY_APP_URL") or None

    # Shopify Admin API
    SHOPIFY_API_VERSION: str = os.getenv("SHOPIFY_API_VERSION", "2025-07")
    SHOPIFY_ACCESS_TOKEN: str = os.getenv("SHOPIFY_ACCESS_TOKEN", "")
    SHOPIFY_TIMEOUT_SECONDS: float = float(os.getenv("SHOPIFY_TIMEOUT_SECONDS", "10"))

    # Database (PostgreSQL or fallback SQLite)
    POSTGRES_USER: str = os.getenv("POSTGRES_USER", "postgres")
    POSTGRES_PASSWORD: str = os.getenv("POSTGRES_PASSWORD", "strongpass")
    POSTGRES_HOST: str = os.getenv("POSTGRES_HOST", "localhost")
    POSTGRES_PORT: str = os.getenv("POSTGRES_PORT", "5432")
    POSTGRES_DB: str = os.getenv("POSTGRES_DB", "qr_reorder")

    DATABASE_URL: str = os.getenv(
        "DATABASE_URL",
        f"postgresql+psycopg2://{POSTGRES_USER}:{POSTGRES_PASSWORD}@{POSTGRES_HOST}:{POSTGRES_PORT}/{POSTGRES_DB}"
    )

    # Logs
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()
