"""API endpoint modules for version 1."""

from .posts import router as posts_router

__all__ = ["posts_router"]
