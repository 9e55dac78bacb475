"""Object storage listing operations."""

from .page_lister import S3PageLister

__all__ = ["S3PageLister"]
