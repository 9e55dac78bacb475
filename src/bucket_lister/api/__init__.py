"""HTTP API for bucket listing."""

from .app import build_coordinator, create_app

__all__ = ["build_coordinator", "create_app"]
