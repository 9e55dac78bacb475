"""Pagination bookkeeping over token-based object listings."""

from .coordinator import ListingBackend, PaginationCoordinator
from .token_store import PageTokenStore

__all__ = ["ListingBackend", "PageTokenStore", "PaginationCoordinator"]
