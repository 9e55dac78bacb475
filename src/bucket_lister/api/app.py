"""FastAPI application factory."""

from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from bucket_lister import __version__
from bucket_lister.core import Settings, get_logger, settings as default_settings
from bucket_lister.core.exceptions import BucketListerError
from bucket_lister.objectstorage import S3ClientConfig, S3PageLister
from bucket_lister.pagination import PageTokenStore, PaginationCoordinator

from .routes import router

logger = get_logger(__name__)


def build_coordinator(settings: Settings) -> PaginationCoordinator:
    """Wire an S3-backed coordinator with a fresh token store."""
    lister = S3PageLister(S3ClientConfig.from_settings(settings))
    return PaginationCoordinator(
        backend=lister,
        bucket=settings.bucket_name,
        token_store=PageTokenStore(),
        prefix=settings.prefix,
        base_url=settings.base_url,
    )


def create_app(
    coordinator: Optional[PaginationCoordinator] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """Create the listing application.

    Args:
        coordinator: Coordinator to serve from; built from settings if omitted
        settings: Application settings; the environment-loaded ones if omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or default_settings
    if coordinator is None:
        coordinator = build_coordinator(settings)

    app = FastAPI(
        title="bucket-lister",
        description="Paginated read-only listing of objects in a storage bucket",
        version=__version__,
    )
    app.state.settings = settings
    app.state.coordinator = coordinator
    app.include_router(router)

    @app.exception_handler(BucketListerError)
    async def bucket_lister_error_handler(
        request: Request, exc: BucketListerError
    ) -> PlainTextResponse:
        logger.error(
            "Listing request failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        return PlainTextResponse(str(exc), status_code=500)

    logger.info(
        "Application created",
        bucket=coordinator.bucket,
        prefix=coordinator.prefix,
    )
    return app
