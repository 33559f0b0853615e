# src/campus_wall/models/__init__.py
"""SQLAlchemy models for the Campus Wall application."""

from .comment import Comment
from .like import PostLike
from .post import Post

__all__ = ["Comment", "Post", "PostLike"]
