"""Post-level hide/unhide with a cascade onto every comment of the post.

The post flag update and the bulk comment update share one transaction: either
the post and all of its comments transition together or nothing changes.
"""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from campus_wall.core.domain import Principal
from campus_wall.core.errors import ForbiddenError
from campus_wall.db.session import unit_of_work
from campus_wall.models import Post
from campus_wall.repositories import CommentRepository, PostRepository
from campus_wall.services.post_service import get_post_or_404
from campus_wall.services.retry import write_with_retry

logger = logging.getLogger(__name__)


def hide_post(db: Session, *, post_id: int, principal: Principal) -> Post:
    """Hide the principal's own post and every comment on it."""
    return _set_post_hidden(db, post_id=post_id, principal=principal, hidden=True)


def unhide_post(db: Session, *, post_id: int, principal: Principal) -> Post:
    """Restore the principal's own post and make every comment on it visible.

    Comments their authors hid individually are restored as well; the cascade
    does not remember why a comment was hidden.
    """
    return _set_post_hidden(db, post_id=post_id, principal=principal, hidden=False)


def _set_post_hidden(db: Session, *, post_id: int, principal: Principal, hidden: bool) -> Post:
    verb = "hide" if hidden else "unhide"
    with unit_of_work(db):
        post = get_post_or_404(db, post_id)
        if post.author_id != principal.user_id:
            raise ForbiddenError(f"You can only {verb} your own posts")

        posts = PostRepository(db)
        write_with_retry(
            db,
            post,
            lambda p: posts.set_hidden(p, hidden),
            label=f"post {post_id}",
        )
        cascaded = CommentRepository(db).set_hidden_for_post(post_id, hidden)

    logger.info(
        "Post %s: id=%s, user=%s, cascadedComments=%d",
        "hidden" if hidden else "unhidden",
        post_id,
        principal.user_id,
        cascaded,
    )
    return post
