from contextlib import asynccontextmanager
from typing import Optional
import logging
import os

from fastapi import FastAPI, Request

import config
from routes import (
    games_router,
    matches_router,
    players_router,
    auth_router,
    health_router,
    register_error_handlers,
)
from stores import DocumentStore, create_document_store

logger = logging.getLogger(__name__)


def create_app(document_store: Optional[DocumentStore] = None) -> FastAPI:
    """Build the FastAPI app.

    The app owns the document store's lifecycle: it is initialized on
    startup and closed on shutdown. Pass `document_store` to use a specific
    store (tests do); otherwise the backend named in config is created.
    """
    store = document_store if document_store is not None else create_document_store()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await store.init()
        app.state.document_store = store
        logger.info(f"Document store ready: {store.__class__.__name__}")
        try:
            yield
        finally:
            await store.close()
            logger.info("Document store closed")

    app = FastAPI(
        title="Game Tracker API",
        description="CRUD for games, matches and players backed by a document store",
        version=config.APP_VERSION,
        lifespan=lifespan,
    )

    # --- Middleware ---
    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method and path so 500s can be traced to the failing endpoint."""
        response = await call_next(request)
        if response.status_code >= 500:
            logger.warning(f"[{response.status_code}] {request.method} {request.url.path}")
        return response

    register_error_handlers(app)

    # --- Register routes ---
    app.include_router(health_router)
    app.include_router(auth_router, prefix=f"{config.API_PREFIX}/auth")
    app.include_router(games_router, prefix=f"{config.API_PREFIX}/games")
    app.include_router(matches_router, prefix=f"{config.API_PREFIX}/matches")
    app.include_router(players_router, prefix=f"{config.API_PREFIX}/players")

    return app


def configure_logging() -> None:
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Served with `uvicorn main:app`.
configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "3000")))
