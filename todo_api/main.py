"""Main FastAPI application for the todo API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware

from todo_api import __version__
from todo_api import db
from todo_api.api.routes import router as todo_router
from todo_api.logging_utils import configure_logging, request_id_middleware
from todo_api.repositories.todo_repository import (
    InMemoryTodoRepository,
    PostgresTodoRepository,
    TodoRepository,
)
from todo_api.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_PREFIX = "/api/Todo"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the storage backend on startup and release it on shutdown.

    A repository already placed on ``app.state`` (tests do this) is used as
    is and left untouched on shutdown.
    """
    settings: Settings = app.state.settings
    database: Optional[db.Database] = None
    owns_repository = getattr(app.state, "repository", None) is None

    logger.info("Starting Todo API...")
    if owns_repository:
        if settings.storage_backend == "memory":
            logger.info("STORAGE_BACKEND=memory, todos will not survive a restart")
            app.state.repository = InMemoryTodoRepository()
        else:
            logger.info("Connecting to PostgreSQL at %s:%s/%s", settings.db_host, settings.db_port, settings.db_name)
            try:
                database = await db.connect(settings)
            except Exception:
                logger.exception("Failed to initialize database connection")
                raise
            app.state.repository = PostgresTodoRepository(database)
    logger.info("Storage backend: %s", app.state.repository.name)

    yield

    logger.info("Shutting down Todo API...")
    if owns_repository:
        del app.state.repository
    if database is not None:
        await database.close()


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[TodoRepository] = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Todo API",
        description="A simple Todo API",
        version=__version__,
        docs_url="/api-docs",
        openapi_tags=[{"name": "Todo", "description": "The Todo managing API"}],
        lifespan=lifespan,
    )
    app.state.settings = settings
    if repository is not None:
        app.state.repository = repository

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.middleware("http")(request_id_middleware)

    @app.get("/", include_in_schema=False)
    async def root() -> Dict[str, Any]:
        """Root endpoint with basic API info."""
        return {
            "name": "Todo API",
            "version": __version__,
            "endpoints": {
                "todos": API_PREFIX,
                "health": "/health",
                "docs": "/api-docs",
            },
        }

    @app.get("/health", include_in_schema=False)
    async def health(request: Request) -> Dict[str, str]:
        """Health check endpoint."""
        repository: TodoRepository = request.app.state.repository
        try:
            healthy = await repository.ping()
        except Exception:
            logger.exception("Health check failed")
            healthy = False
        if not healthy:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=f"{repository.name} storage unavailable",
            )
        return {"status": "healthy", "storage": repository.name}

    app.include_router(todo_router, prefix=API_PREFIX)
    return app


app = create_app()


def main() -> None:
    import uvicorn

    settings = get_settings()
    logger.info("Server starting on %s:%s", settings.host, settings.port)
    uvicorn.run(
        "todo_api.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
