"""Like toggling on posts.

The like row's existence is the liked state. Inserting or deleting it and
shifting ``post.like_count`` happen in one transaction, and the counter moves by
an SQL delta so concurrent likers from different users never clobber each other.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from campus_wall.core.domain import Principal
from campus_wall.db.session import unit_of_work
from campus_wall.repositories import LikeRepository
from campus_wall.services.access import ensure_can_act
from campus_wall.services.counters import Counter, apply_delta
from campus_wall.services.post_service import get_post_or_404

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LikeResult:
    """State of a (post, user) like after a toggle."""

    liked: bool
    like_count: int


def toggle_like(db: Session, *, post_id: int, principal: Principal) -> LikeResult:
    """Like the post if the principal has not liked it yet, otherwise unlike it.

    Raises:
        NotFoundError: If the post does not exist.
        ForbiddenError: If the principal may not act on the post's wall.
    """
    with unit_of_work(db):
        post = get_post_or_404(db, post_id)
        ensure_can_act(principal, post)

        likes = LikeRepository(db)
        user_id = principal.user_id
        if likes.find(post_id, user_id) is None:
            if likes.insert(post_id, user_id):
                count = apply_delta(db, post, Counter.LIKES, +1)
                result = LikeResult(liked=True, like_count=count)
            else:
                # A concurrent request from the same user inserted first.
                logger.warning(
                    "Duplicate like insert for post=%s user=%s; treating as unlike",
                    post_id,
                    user_id,
                )
                result = _unlike(db, likes, post, principal)
        else:
            result = _unlike(db, likes, post, principal)

    logger.info(
        "Post %s: postId=%s, user=%s, newLikeCount=%s",
        "liked" if result.liked else "unliked",
        post_id,
        principal.user_id,
        result.like_count,
    )
    return result


def _unlike(db: Session, likes: LikeRepository, post, principal: Principal) -> LikeResult:
    if likes.delete(post.id, principal.user_id):
        count = apply_delta(db, post, Counter.LIKES, -1)
    else:
        # Already removed by a concurrent unlike, which applied its own delta.
        db.refresh(post, attribute_names=["like_count"])
        count = post.like_count
    return LikeResult(liked=False, like_count=count)
