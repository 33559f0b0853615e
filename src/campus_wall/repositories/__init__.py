# src/campus_wall/repositories/__init__.py
"""Data access layer for posts, comments and likes."""

from .comment_repo import CommentRepository
from .like_repo import LikeRepository
from .post_repo import PostRepository
from .versioning import VersionConflict, VersionOk, VersionResult

__all__ = [
    "CommentRepository",
    "LikeRepository",
    "PostRepository",
    "VersionConflict",
    "VersionOk",
    "VersionResult",
]
