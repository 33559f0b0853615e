# src/campus_wall/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from campus_wall.core.domain import Wall

from .common import Pagination


class PostCreate(BaseModel):
    """Schema for creating a new post.

    Length and blankness are enforced by the service so every caller gets the
    same error kind.
    """

    content: str = Field(..., description="Post body")
    wall: str | None = Field(None, description="'campus' (default) or 'national'")


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    author_id: UUID
    content: str
    wall: Wall
    school_domain: str | None
    like_count: int
    comment_count: int
    hidden: bool
    liked: bool = False
    version: int
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_post(cls, post: Any, *, liked: bool = False) -> "PostResponse":
        """Build the response for an ORM post plus the caller's like state."""
        response = cls.model_validate(post)
        response.liked = liked
        return response


class PostListResponse(BaseModel):
    """One page of posts."""

    data: list[PostResponse]
    pagination: Pagination


class LikeResponse(BaseModel):
    """Result of toggling a like."""

    liked: bool
    like_count: int
