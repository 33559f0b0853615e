# src/campus_wall/schemas/__init__.py
"""Pydantic schemas for the API layer."""

from .comment import CommentCreate, CommentListResponse, CommentResponse
from .common import Pagination
from .post import LikeResponse, PostCreate, PostListResponse, PostResponse

__all__ = [
    "CommentCreate",
    "CommentListResponse",
    "CommentResponse",
    "LikeResponse",
    "Pagination",
    "PostCreate",
    "PostListResponse",
    "PostResponse",
]
