"""Object storage access for S3-compatible services."""

from .clients import S3ClientConfig, S3ClientManager
from .listing import S3PageLister

__all__ = ["S3ClientConfig", "S3ClientManager", "S3PageLister"]
