"""Data access helpers for post likes."""
from __future__ import annotations

import uuid
from collections.abc import Iterable

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_wall.db.time import utcnow
from campus_wall.models import PostLike

__all__ = ["LikeRepository"]


class LikeRepository:
    """Access to the (post, user) like rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def find(self, post_id: int, user_id: uuid.UUID) -> PostLike | None:
        """Return the like row for a (post, user) pair, if present."""
        result = self.session.execute(
            select(PostLike).where(PostLike.post_id == post_id, PostLike.user_id == user_id)
        )
        return result.scalars().first()

    def insert(self, post_id: int, user_id: uuid.UUID) -> bool:
        """Insert a like inside a savepoint.

        Returns ``False`` when the unique (post, user) key already exists, in
        which case only the savepoint is rolled back and the surrounding
        transaction stays usable.
        """
        try:
            with self.session.begin_nested():
                self.session.execute(
                    insert(PostLike).values(post_id=post_id, user_id=user_id, created_at=utcnow())
                )
        except IntegrityError:
            return False
        return True

    def delete(self, post_id: int, user_id: uuid.UUID) -> bool:
        """Delete a like and report whether a row was actually removed."""
        result = self.session.execute(
            delete(PostLike)
            .where(PostLike.post_id == post_id, PostLike.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        for obj in list(self.session.identity_map.values()):
            if isinstance(obj, PostLike) and (obj.post_id, obj.user_id) == (post_id, user_id):
                self.session.expunge(obj)
        return result.rowcount == 1

    def liked_post_ids(self, user_id: uuid.UUID, post_ids: Iterable[int]) -> set[int]:
        """Return the subset of ``post_ids`` that ``user_id`` has liked."""
        ids = list(post_ids)
        if not ids:
            return set()
        result = self.session.execute(
            select(PostLike.post_id).where(PostLike.user_id == user_id, PostLike.post_id.in_(ids))
        )
        return set(result.scalars())
