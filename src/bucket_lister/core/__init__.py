"""Core utilities and shared components for bucket-lister."""

from .config import Settings, settings
from .exceptions import (
    BucketListerError,
    ConfigurationError,
    UpstreamListingError,
    ValidationError,
)
from .observability import bound_listing_context, get_logger, get_tracer

__all__ = [
    "Settings",
    "settings",
    "BucketListerError",
    "ConfigurationError",
    "UpstreamListingError",
    "ValidationError",
    "bound_listing_context",
    "get_logger",
    "get_tracer",
]
