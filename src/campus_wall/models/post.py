# src/campus_wall/models/post.py
"""SQLAlchemy model for wall posts."""

import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    DateTime,
    Index,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from campus_wall.db.session import Base
from campus_wall.db.time import utcnow


class Post(Base):
    """Anonymous post on either the campus or the national wall.

    ``like_count`` and ``comment_count`` are denormalized and only ever change
    through atomic SQL deltas issued alongside the row change that motivates them.
    """

    __tablename__ = "post"
    __table_args__ = (
        CheckConstraint("like_count >= 0", name="ck_post_like_count_non_negative"),
        CheckConstraint("comment_count >= 0", name="ck_post_comment_count_non_negative"),
        CheckConstraint("wall IN ('campus', 'national')", name="ck_post_wall"),
        Index("ix_post_wall_domain_hidden", "wall", "school_domain", "hidden"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    author_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    # 'campus' posts carry the author's school domain; 'national' posts never do.
    wall: Mapped[str] = mapped_column(String(16), nullable=False)
    school_domain: Mapped[str | None] = mapped_column(String(255), nullable=True)

    like_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comment_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Bumped by every flag update; counter deltas leave it alone.
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )
