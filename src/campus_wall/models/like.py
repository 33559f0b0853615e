# src/campus_wall/models/like.py
"""Model recording which users liked which posts."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from campus_wall.db.session import Base
from campus_wall.db.time import utcnow


class PostLike(Base):
    """Per-user like on a post.

    The row's existence is the liked state; there is no boolean column.
    """

    __tablename__ = "post_like"
    __table_args__ = (Index("ix_post_like_post_id", "post_id"),)

    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Composite primary key rejects a second like from the same user.
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
