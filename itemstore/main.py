import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from itemstore.config import HOST, LOG_LEVEL, PORT
from itemstore.errors import install_exception_handlers
from itemstore.logging_config import resolve_level, setup_logging
from itemstore.routes.items import router as items_router
from itemstore.storage import ItemStore

APP_VERSION = "0.1.0"

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(LOG_LEVEL)
    logger.info("Starting itemstore %s", APP_VERSION)
    yield
    logger.info("Shutting down itemstore with %d items in memory", len(app.state.store))


def create_app(store: Optional[ItemStore] = None) -> FastAPI:
    """Build the HTTP application around ``store`` (a fresh empty one by default)."""
    app = FastAPI(title="Item Store API", version=APP_VERSION, lifespan=lifespan)
    app.state.store = store if store is not None else ItemStore()

    install_exception_handlers(app)
    app.include_router(items_router)

    @app.get("/health")
    async def health():
        return {"status": "ok", "version": APP_VERSION}

    return app


# Target for ``uvicorn itemstore.main:app``.
app = create_app()


def run() -> None:
    setup_logging(LOG_LEVEL)
    logger.info("Server is running on %s:%d", HOST, PORT)
    uvicorn.run(app, host=HOST, port=PORT, log_level=resolve_level(LOG_LEVEL))


if __name__ == "__main__":
    run()
