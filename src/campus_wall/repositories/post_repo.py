"""Data access helpers for working with posts."""
from __future__ import annotations

import uuid

from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value

from campus_wall.core.domain import PageRequest, SortBy, Wall
from campus_wall.db.time import utcnow
from campus_wall.models import Post

from .versioning import VersionConflict, VersionOk, VersionResult

__all__ = ["PostRepository"]


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier, hidden or not."""
        result = self.session.execute(select(Post).where(Post.id == post_id))
        return result.scalars().first()

    def create(
        self,
        *,
        author_id: uuid.UUID,
        content: str,
        wall: Wall,
        school_domain: str | None,
    ) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        post = Post(
            author_id=author_id,
            content=content,
            wall=wall.value,
            school_domain=school_domain,
            like_count=0,
            comment_count=0,
            hidden=False,
            version=0,
        )
        self.session.add(post)
        self.session.flush()
        return post

    def set_hidden(self, post: Post, hidden: bool) -> VersionResult:
        """Write ``hidden`` only if nobody updated the row since ``post`` was read."""
        now = utcnow()
        result = self.session.execute(
            update(Post)
            .where(Post.id == post.id, Post.version == post.version)
            .values(hidden=hidden, version=Post.version + 1, updated_at=now)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            return VersionConflict(expected=post.version)

        new_version = post.version + 1
        set_committed_value(post, "hidden", hidden)
        set_committed_value(post, "version", new_version)
        set_committed_value(post, "updated_at", now)
        return VersionOk(version=new_version)

    def add_to_counter(self, post_id: int, column: str, delta: int) -> int | None:
        """Shift a counter column by ``delta`` in SQL and return its new value.

        The update only matches while the result stays non-negative. Returns
        ``None`` when no row matched, either because the post is missing or
        because the delta would underflow.
        """
        counter = getattr(Post, column)
        result = self.session.execute(
            update(Post)
            .where(Post.id == post_id, counter + delta >= 0)
            .values({column: counter + delta})
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            return None
        return self.session.execute(select(counter).where(Post.id == post_id)).scalar_one()

    def list_by_wall(
        self,
        *,
        wall: Wall,
        school_domain: str | None,
        page_request: PageRequest,
        sort_by: SortBy,
    ) -> tuple[list[Post], int]:
        """Return one page of visible posts on a wall plus the total visible count.

        Campus queries filter on ``school_domain``; national queries ignore it.
        """
        filters = [Post.wall == wall.value, Post.hidden.is_(False)]
        if wall is Wall.CAMPUS:
            filters.append(Post.school_domain == school_domain)

        total = self.session.execute(
            select(func.count()).select_from(Post).where(*filters)
        ).scalar_one()
        if page_request.offset >= total:
            return [], total

        direction = asc if sort_by.ascending else desc
        if sort_by.by_likes:
            order = [direction(Post.like_count), desc(Post.created_at), desc(Post.id)]
        else:
            order = [direction(Post.created_at), direction(Post.id)]

        stmt = (
            select(Post)
            .where(*filters)
            .order_by(*order)
            .offset(page_request.offset)
            .limit(page_request.limit)
        )
        return list(self.session.execute(stmt).scalars()), total
