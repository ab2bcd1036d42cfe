"""
Catalog backend configuration.
Single source of truth for environment and app settings.
"""

import logging
import os
from importlib.metadata import PackageNotFoundError, version

from dotenv import load_dotenv

load_dotenv()


def package_version() -> str:
    """Installed catalog-api version, or "0.0.0" when running from a bare checkout."""
    try:
        return version("catalog-api")
    except PackageNotFoundError:
        return "0.0.0"


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "Catalog API"
    APP_VERSION: str
    ALLOWED_ORIGINS: list[str]

    # Logging: any stdlib level name
    LOG_LEVEL: str = "INFO"

    # uvicorn launcher (python main.py)
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    def __init__(self):
        self.APP_TITLE = (os.environ.get("APP_TITLE") or "Catalog API").strip()
        self.APP_VERSION = (os.environ.get("APP_VERSION") or package_version()).strip()
        origins = os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000")
        self.ALLOWED_ORIGINS = [o.strip() for o in origins.split(",") if o.strip()]
        level = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            level = "INFO"
        self.LOG_LEVEL = level
        self.HOST = (os.environ.get("HOST") or "0.0.0.0").strip()
        try:
            self.PORT = int(os.environ.get("PORT") or 8000)
        except ValueError:
            self.PORT = 8000

    @property
    def log_level(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return logging.getLevelName(self.LOG_LEVEL)
