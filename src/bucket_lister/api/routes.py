"""Listing and health endpoints."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from bucket_lister.core import bound_listing_context, get_logger
from bucket_lister.core.exceptions import BucketListerError
from bucket_lister.pagination import PaginationCoordinator
from bucket_lister.schemas import ListingRequest, ListingResponse

logger = get_logger(__name__)
router = APIRouter()


def get_coordinator(request: Request) -> PaginationCoordinator:
    """Return the coordinator attached to the running application."""
    return request.app.state.coordinator


# Numeric parameters are taken as strings so malformed values fall back to
# their defaults instead of producing a 422.
@router.get("/list", response_model=ListingResponse)
def list_objects(
    request: Request,
    coordinator: Annotated[PaginationCoordinator, Depends(get_coordinator)],
    limit: Annotated[
        Optional[str], Query(description="Entries per page (default 10)")
    ] = None,
    page: Annotated[Optional[str], Query(description="1-based page number")] = None,
    page_token: Annotated[
        Optional[str],
        Query(alias="pageToken", description="Continuation token for this page"),
    ] = None,
) -> ListingResponse:
    listing_request = ListingRequest.from_query(
        limit=limit,
        page=page,
        page_token=page_token,
        default_limit=request.app.state.settings.default_limit,
    )
    with bound_listing_context(
        coordinator.bucket, path=request.url.path, page=listing_request.page
    ):
        return coordinator.list_page(listing_request, path=request.url.path)


@router.get("/health")
def health_check(
    coordinator: Annotated[PaginationCoordinator, Depends(get_coordinator)],
) -> JSONResponse:
    """Report whether the configured bucket can be listed."""
    try:
        with bound_listing_context(coordinator.bucket, path="/health"):
            coordinator.check_access()
    except BucketListerError as e:
        logger.warning("Health check failed", bucket=coordinator.bucket, error=str(e))
        return JSONResponse(
            status_code=503,
            content={
                "status": "unhealthy",
                "bucket": coordinator.bucket,
                "error": str(e),
            },
        )

    return JSONResponse(
        status_code=200,
        content={"status": "healthy", "bucket": coordinator.bucket},
    )
