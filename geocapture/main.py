import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from loguru import logger

from geocapture.api.router import api_router
from geocapture.api.routes import page
from geocapture.core.config import Settings, load_settings
from geocapture.core.db import LocationStore
from geocapture.core.errors import install_error_handlers
from geocapture.core.logging import setup_logging


def create_app(settings: Settings | None = None, store: LocationStore | None = None) -> FastAPI:
    """
    Build the application.

    Settings are loaded from the environment when not given, so a missing
    DATABASE_URL stops the process here. The store is created once and lives
    on app.state for the lifetime of the process.
    """
    settings = settings or load_settings()
    setup_logging(settings)
    logger.info("Starting geocapture")

    store = store or LocationStore(settings.database_url, echo=settings.sql_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.init_db()
        yield
        store.dispose()

    app = FastAPI(
        title="Geocapture",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.store = store

    install_error_handlers(app)

    app.mount("/static", StaticFiles(directory=str(page.STATIC_DIR)), name="static")
    app.include_router(page.router)
    app.include_router(api_router)

    @app.get("/health")
    def health():
        logger.debug("Health check hit")
        return {"status": "ok"}

    return app


def run() -> None:
    uvicorn.run(
        "geocapture.main:create_app",
        factory=True,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )


if __name__ == "__main__":
    run()
