from __future__ import annotations

import argparse
import logging
import os
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import uvicorn
from fastapi import FastAPI

from parcel_tracker import __version__


def _configure_logging() -> None:
    """
    Configure root logging once for the API process.
    """

    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _check_browser_settings() -> None:
    """
    Resolve browser settings at boot so an invalid BROWSER_MODE fails fast.

    A missing remote token is only reported here; it fails individual
    lookups, not the process.
    """

    from parcel_tracker.config import get_browser_settings

    settings = get_browser_settings()
    log = logging.getLogger(__name__)
    if settings.mode == "remote" and not settings.remote_token:
        log.warning(
            "BROWSER_MODE=remote but BROWSERLESS_TOKEN is not set; tracking lookups will fail "
            "until it is configured."
        )
    log.info("Browser sessions will be acquired in %s mode", settings.mode)


@asynccontextmanager
async def _lifespan(application: FastAPI) -> AsyncIterator[None]:
    """Validate browser configuration on boot."""
    _check_browser_settings()
    yield
    logging.getLogger(__name__).info("Parcel tracker API shut down")


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.
    """

    _configure_logging()

    application = FastAPI(
        title="Parcel Tracker API",
        version=__version__,
        lifespan=_lifespan,
    )

    from parcel_tracker.api.routers import tracking_router

    application.include_router(tracking_router)

    @application.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    return application


app = create_app()


def run(argv: list[str] | None = None) -> None:
    """
    Serve the API with uvicorn.
    """

    parser = argparse.ArgumentParser(description="Parcel tracker API server.")
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"), help="Bind host.")
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Bind port (defaults to $PORT or 8000).",
    )
    parser.add_argument("--reload", action="store_true", help="Reload on code changes.")
    args = parser.parse_args(argv)

    uvicorn.run(
        "parcel_tracker.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    run()
