"""Data access helpers for working with comments."""
from __future__ import annotations

import uuid

from sqlalchemy import asc, desc, func, select, update
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value

from campus_wall.core.domain import PageRequest, SortBy
from campus_wall.models import Comment

from .versioning import VersionConflict, VersionOk, VersionResult

__all__ = ["CommentRepository"]


class CommentRepository:
    """Thin wrapper around database access for comment entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, comment_id: int) -> Comment | None:
        """Return a comment by identifier."""
        result = self.session.execute(select(Comment).where(Comment.id == comment_id))
        return result.scalars().first()

    def create(self, *, post_id: int, author_id: uuid.UUID, text: str) -> Comment:
        """Insert a visible comment and return the persisted ORM instance."""
        comment = Comment(
            post_id=post_id,
            author_id=author_id,
            text=text,
            hidden=False,
            version=0,
        )
        self.session.add(comment)
        self.session.flush()
        return comment

    def set_hidden(self, comment: Comment, hidden: bool) -> VersionResult:
        """Write ``hidden`` only if the row still carries the version we read.

        The version is bumped even when ``hidden`` already had the target value.
        """
        result = self.session.execute(
            update(Comment)
            .where(Comment.id == comment.id, Comment.version == comment.version)
            .values(hidden=hidden, version=Comment.version + 1)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            return VersionConflict(expected=comment.version)

        new_version = comment.version + 1
        set_committed_value(comment, "hidden", hidden)
        set_committed_value(comment, "version", new_version)
        return VersionOk(version=new_version)

    def set_hidden_for_post(self, post_id: int, hidden: bool) -> int:
        """Set ``hidden`` on every comment of a post in one statement.

        Returns the number of rows touched. Comment instances already loaded in
        the session are expired so they reload the cascaded state.
        """
        result = self.session.execute(
            update(Comment)
            .where(Comment.post_id == post_id)
            .values(hidden=hidden, version=Comment.version + 1)
            .execution_options(synchronize_session=False)
        )
        for obj in list(self.session.identity_map.values()):
            if isinstance(obj, Comment) and obj.post_id == post_id:
                self.session.expire(obj)
        return result.rowcount

    def list_visible_for_post(
        self,
        *,
        post_id: int,
        page_request: PageRequest,
        sort_by: SortBy,
    ) -> tuple[list[Comment], int]:
        """Return one page of a post's visible comments plus the visible total.

        Comments have no like counter, so every sort orders by creation time.
        """
        filters = [Comment.post_id == post_id, Comment.hidden.is_(False)]
        total = self.count_visible(post_id)
        if page_request.offset >= total:
            return [], total

        direction = asc if sort_by.ascending else desc
        stmt = (
            select(Comment)
            .where(*filters)
            .order_by(direction(Comment.created_at), direction(Comment.id))
            .offset(page_request.offset)
            .limit(page_request.limit)
        )
        return list(self.session.execute(stmt).scalars()), total

    def count_visible(self, post_id: int) -> int:
        """Count a post's comments that are not hidden."""
        return self.session.execute(
            select(func.count())
            .select_from(Comment)
            .where(Comment.post_id == post_id, Comment.hidden.is_(False))
        ).scalar_one()
