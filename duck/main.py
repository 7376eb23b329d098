"""
Rubber Duck API - FastAPI Application

Two REST operations over a swappable store:
- GET  /ducks  list every duck, ascending by id
- POST /ducks  create a duck from a schema-validated body

Run with:
    python -m duck --port 8080 --store memory
    uvicorn duck.main:build_app --factory --port 8080
"""

import argparse
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from duck import __version__
from duck.api import register_error_handlers, router
from duck.config import Settings, get_settings
from duck.schemas import HealthResponse
from duck.store import DuckStore, InMemoryStore, SQLiteStore

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> DuckStore:
    """Pick the backend named in settings."""
    if settings.store == "sqlite":
        return SQLiteStore.from_url(settings.database_url, echo=settings.debug)
    return InMemoryStore()


def create_app(store: DuckStore, settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around an already constructed store."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup and shutdown."""
        logger.info(f"Starting {settings.app_name} with {store.name} store...")
        await store.open()
        logger.info("Application startup complete!")

        yield

        logger.info("Shutting down...")
        await store.close()
        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description="Rubber duck CRUD service with in-memory and SQLite stores",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(
            f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.2f} ms)"
        )
        return response

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check():
        """Health check endpoint"""
        return HealthResponse(status="ok", store=store.name)

    return app


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)


def build_app() -> FastAPI:
    """App factory for ``uvicorn --factory``."""
    settings = get_settings()
    configure_logging(settings)
    return create_app(build_store(settings), settings)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="duck", description="Rubber duck HTTP API")
    parser.add_argument("--port", type=int, default=settings.port, help="Port for the HTTP server")
    parser.add_argument("--host", default=settings.host, help="Interface to bind")
    parser.add_argument(
        "--store",
        choices=["memory", "sqlite"],
        default=settings.store,
        help="Storage backend",
    )
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    import uvicorn

    args = parse_args(argv)
    settings = get_settings().model_copy(
        update={"port": args.port, "host": args.host, "store": args.store}
    )

    configure_logging(settings)

    app = create_app(build_store(settings), settings)

    logger.info(f"Listening on http://localhost:{settings.port}")
    # uvicorn traps SIGINT/SIGTERM, stops accepting connections and gives
    # in-flight requests the grace period before the lifespan shutdown runs.
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        timeout_keep_alive=settings.keep_alive_seconds,
        timeout_graceful_shutdown=settings.shutdown_grace_seconds,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
