"""
Catalog Backend API
In-memory items and users: list, get by id, create.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import health_router, items_router, users_router
from config import Settings, get_settings
from store import create_stores

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the app with its own, empty record stores."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level)

    app = FastAPI(title=settings.APP_TITLE, version=settings.APP_VERSION)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.stores = create_stores()

    app.include_router(health_router)
    app.include_router(items_router)
    app.include_router(users_router)

    logger.info("%s %s ready", settings.APP_TITLE, settings.APP_VERSION)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=True)
