"""
Hookify - authenticated webhook receiver.

Main FastAPI application entry point.
It receives webhook deliveries and only accepts payloads whose
HMAC SHA-256 signature matches the shared secret.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI

from hookify import __version__
from hookify.api.router import api_router
from hookify.core.config import Settings, get_settings
from hookify.core.security import SignatureValidator

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging for the API process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - [API] - %(name)s - %(levelname)s - %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Builds the signature validator once from the configured secret and
    shares it with every request through the application state.

    Args:
        app: The FastAPI application instance.

    Yields:
        None
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(
        f"Signature header: {settings.signature_header} "
        f"({settings.signature_encoding})"
    )

    secret = settings.webhook_secret.get_secret_value()
    if not secret:
        logger.warning("Webhook secret is empty, signatures offer no protection")

    app.state.validator = SignatureValidator(secret)

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.app_name}...")
    app.state.validator = None


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    External servers should load this as a factory, e.g.
    ``uvicorn --factory hookify.main:create_app``.

    Args:
        settings: Settings to use. Defaults to the cached environment settings.

    Returns:
        FastAPI: The configured application instance.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Receives webhooks and verifies their HMAC SHA-256 signatures.",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )
    app.state.settings = settings
    app.state.validator = None

    app.include_router(api_router)

    @app.get("/health", tags=["health"])
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""
        return {"status": "healthy", "app": settings.app_name}

    return app


def run() -> None:
    """Serve the application with uvicorn until interrupted."""
    import uvicorn

    settings = get_settings()
    app = create_app(settings)
    logger.info(f"Welcome to {settings.app_name}!")

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        timeout_graceful_shutdown=5,
    )
    logger.info("Server exiting gracefully")


if __name__ == "__main__":
    run()
