"""Denormalized post counters.

Each delta is a single SQL ``UPDATE ... SET n = n + :delta`` issued inside the
caller's unit of work, next to the row insert or delete that motivates it.
Counters are never read into Python, incremented, and written back.
"""

from __future__ import annotations

import logging
from enum import Enum

from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import set_committed_value

from campus_wall.core.errors import CounterUnderflowError, NotFoundError
from campus_wall.models import Post
from campus_wall.repositories import PostRepository

logger = logging.getLogger(__name__)


class Counter(str, Enum):
    """Counter columns maintained on ``post``."""

    LIKES = "like_count"
    COMMENTS = "comment_count"


def apply_delta(db: Session, post: Post | int, counter: Counter, delta: int) -> int:
    """Shift ``counter`` on a post by ``delta`` and return the new value.

    When an ORM instance is passed its attribute is updated to the new value
    without marking it dirty.

    Raises:
        CounterUnderflowError: If the delta would take the counter below zero.
        NotFoundError: If the post row does not exist.
    """
    post_id = post if isinstance(post, int) else post.id
    repo = PostRepository(db)
    new_value = repo.add_to_counter(post_id, counter.value, delta)
    if new_value is None:
        if repo.get_by_id(post_id) is None:
            raise NotFoundError("Post not found")
        logger.warning(
            "Rejected %s delta %+d on post %s: counter would go negative",
            counter.value,
            delta,
            post_id,
        )
        raise CounterUnderflowError(f"{counter.value} cannot go below zero")

    if isinstance(post, Post):
        set_committed_value(post, counter.value, new_value)
    return new_value
