"""FastAPI application factory for the pairing HTTP surface."""

from __future__ import annotations

from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Awaitable, Callable

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from retadi import __version__
from retadi.utils.logging import get_logger

logger = get_logger(__name__)

NO_CACHE = "no-cache, no-store, must-revalidate"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("pairing_api_starting", asset_root=str(app.state.asset_root))
    yield
    logger.info("pairing_api_stopped")


def create_app(asset_root: Path | str) -> FastAPI:
    """Create the pairing application.

    Args:
        asset_root: Directory served under ``/``. A missing directory is not
            an error here; every asset request then answers 404.

    Returns:
        Configured FastAPI application instance.
    """
    asset_root = Path(asset_root)
    app = FastAPI(
        title="ReTADI Pairing",
        description="Static assets and handshake endpoint for companion devices",
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.asset_root = asset_root

    # Only reachable on a trusted LAN and serves nothing sensitive.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def no_cache(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        response = await call_next(request)
        response.headers["Cache-Control"] = NO_CACHE
        return response

    from retadi.api.routes import connect
    app.include_router(connect.router, prefix="/api")

    # Mounted last so /api routes take precedence. Without a directory the
    # router answers every asset path with 404.
    if asset_root.is_dir():
        app.mount("/", StaticFiles(directory=asset_root, html=True), name="assets")
    else:
        logger.warning("asset_root_missing", asset_root=str(asset_root))

    return app
