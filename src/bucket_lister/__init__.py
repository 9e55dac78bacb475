"""Paginated, read-only listing of objects in an S3-compatible bucket.

The storage backend pages through a bucket with opaque continuation tokens.
This package turns those tokens into numbered pages with next/previous links
and serves them over HTTP.

Recommended Usage:
    Run the HTTP service:

    $ bucket-lister serve --port 8080

    Or use the coordinator directly:

    >>> from bucket_lister import (
    ...     ListingRequest, PageTokenStore, PaginationCoordinator,
    ...     S3ClientConfig, S3PageLister,
    ... )
    >>> coordinator = PaginationCoordinator(
    ...     backend=S3PageLister(S3ClientConfig(aws_profile="my-profile")),
    ...     bucket="my-bucket",
    ...     token_store=PageTokenStore(),
    ... )
    >>> page = coordinator.list_page(ListingRequest(page=1, limit=5))
"""

__version__ = "0.1.0"

from .objectstorage import S3ClientConfig, S3ClientManager, S3PageLister
from .pagination import ListingBackend, PageTokenStore, PaginationCoordinator
from .schemas import ListedPage, ListingRequest, ListingResponse, ObjectEntry

__all__ = [
    # Schemas
    "ListedPage",
    "ListingRequest",
    "ListingResponse",
    "ObjectEntry",
    # Pagination
    "ListingBackend",
    "PageTokenStore",
    "PaginationCoordinator",
    # Object storage
    "S3ClientConfig",
    "S3ClientManager",
    "S3PageLister",
]
