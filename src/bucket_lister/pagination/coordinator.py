"""Translate backend continuation tokens into numbered pages and links.

The storage backend only hands out the token for the *next* page. To offer a
"previous page" link, every request for page ``p`` records the token it
received for page ``p + 1`` in a :class:`PageTokenStore`. A later request for
page ``p`` can then find the token for page ``p - 1`` under key ``p - 2``.
Page 1 is always fetched without a token, so page 2 links back without one.
"""

from typing import Optional, Protocol
from urllib.parse import urlencode

from bucket_lister.core import get_logger
from bucket_lister.core.exceptions import BucketListerError, UpstreamListingError
from bucket_lister.schemas import ListedPage, ListingRequest, ListingResponse

from .token_store import PageTokenStore

logger = get_logger(__name__)


class ListingBackend(Protocol):
    """Protocol for a storage backend that lists one page at a time."""

    def list_page(
        self, bucket: str, prefix: str, limit: int, continuation_token: str
    ) -> ListedPage:
        """Fetch a single page; an empty next token means no further pages."""
        ...

    def check_access(self, bucket: str, prefix: str) -> bool:
        """Return True if the bucket can be listed, raise otherwise."""
        ...


class PaginationCoordinator:
    """Serves numbered pages over a token-based listing backend."""

    def __init__(
        self,
        backend: ListingBackend,
        bucket: str,
        token_store: PageTokenStore,
        prefix: str = "",
        base_url: str = "http://localhost:8080",
    ):
        self.backend = backend
        self.bucket = bucket
        self.prefix = prefix
        self.token_store = token_store
        self.base_url = base_url.rstrip("/")

    def list_page(
        self, request: ListingRequest, path: str = "/list"
    ) -> ListingResponse:
        """List one page and derive its navigation links.

        Args:
            request: Normalized listing request
            path: Request path the links are built against

        Returns:
            ListingResponse for the requested page

        Raises:
            UpstreamListingError: If the backend listing call fails
            ConfigurationError: If the backend client cannot be constructed
        """
        logger.info(
            "Listing page",
            bucket=self.bucket,
            page=request.page,
            limit=request.limit,
            has_token=bool(request.continuation_token),
        )

        try:
            listed = self.backend.list_page(
                self.bucket, self.prefix, request.limit, request.continuation_token
            )
        except BucketListerError:
            raise
        except Exception as e:
            error_msg = f"Failed to list objects in bucket '{self.bucket}': {e}"
            logger.error(error_msg, error=str(e))
            raise UpstreamListingError(error_msg)

        next_token = listed.next_continuation_token
        self.token_store.put(request.page, next_token)

        response = ListingResponse(
            limit=request.limit,
            next_page=self._next_link(request, path, next_token),
            page=request.page,
            prev_page=self._previous_link(request, path),
            results=list(listed.entries),
        )

        logger.info(
            "Page listed",
            bucket=self.bucket,
            page=response.page,
            total=response.total,
            has_next=response.next_page is not None,
            has_prev=response.prev_page is not None,
        )
        return response

    def check_access(self) -> bool:
        """Verify the configured bucket can be listed."""
        try:
            return self.backend.check_access(self.bucket, self.prefix)
        except BucketListerError:
            raise
        except Exception as e:
            error_msg = f"Access check failed for bucket '{self.bucket}': {e}"
            logger.warning(error_msg)
            raise UpstreamListingError(error_msg)

    def _next_link(
        self, request: ListingRequest, path: str, next_token: str
    ) -> Optional[str]:
        if not next_token:
            return None
        return self._link(path, request.page + 1, request.limit, next_token)

    def _previous_link(self, request: ListingRequest, path: str) -> Optional[str]:
        if request.page <= 1:
            return None
        if request.page == 2:
            return self._link(path, 1, request.limit)

        token = self.token_store.get(request.page - 2)
        if not token:
            logger.debug(
                "No cached token for previous page",
                page=request.page,
                lookup_page=request.page - 2,
            )
            return None
        return self._link(path, request.page - 1, request.limit, token)

    def _link(
        self, path: str, page: int, limit: int, token: Optional[str] = None
    ) -> str:
        query: dict[str, object] = {"page": page, "limit": limit}
        if token:
            query["pageToken"] = token
        return f"{self.base_url}{path}?{urlencode(query)}"
