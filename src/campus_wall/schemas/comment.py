# src/campus_wall/schemas/comment.py
"""Comment-related Pydantic schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .common import Pagination


class CommentCreate(BaseModel):
    """Schema for adding a comment."""

    text: str = Field(..., description="Comment body")


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: int
    post_id: int
    author_id: UUID
    text: str
    hidden: bool
    version: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentListResponse(BaseModel):
    """One page of visible comments."""

    data: list[CommentResponse]
    pagination: Pagination
