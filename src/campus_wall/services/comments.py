"""Comment creation, author-driven hide/unhide, and visible listings."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from campus_wall.core.domain import Page, PageRequest, Principal, SortBy
from campus_wall.core.errors import ForbiddenError, NotFoundError, ValidationError
from campus_wall.db.session import unit_of_work
from campus_wall.models import Comment
from campus_wall.repositories import CommentRepository
from campus_wall.services.access import ensure_can_act
from campus_wall.services.counters import Counter, apply_delta
from campus_wall.services.post_service import get_post_or_404, validate_text
from campus_wall.services.retry import write_with_retry

logger = logging.getLogger(__name__)


def add_comment(db: Session, *, post_id: int, text: str, principal: Principal) -> Comment:
    """Add a visible comment and bump the post's comment counter.

    Raises:
        ValidationError: If the text is blank or longer than the limit.
        NotFoundError: If the post does not exist.
        ForbiddenError: If the principal may not act on the post's wall.
    """
    validate_text(text, subject="Comment text")
    with unit_of_work(db):
        post = get_post_or_404(db, post_id)
        ensure_can_act(principal, post)
        comment = CommentRepository(db).create(
            post_id=post.id,
            author_id=principal.user_id,
            text=text,
        )
        count = apply_delta(db, post, Counter.COMMENTS, +1)

    logger.info(
        "Comment added: id=%s, postId=%s, user=%s, newCommentCount=%s",
        comment.id,
        post_id,
        principal.user_id,
        count,
    )
    return comment


def hide_comment(
    db: Session, *, post_id: int, comment_id: int, principal: Principal
) -> Comment:
    """Hide the principal's own comment. Calling it twice is harmless."""
    return _set_comment_hidden(
        db, post_id=post_id, comment_id=comment_id, principal=principal, hidden=True
    )


def unhide_comment(
    db: Session, *, post_id: int, comment_id: int, principal: Principal
) -> Comment:
    """Make the principal's own hidden comment visible again."""
    return _set_comment_hidden(
        db, post_id=post_id, comment_id=comment_id, principal=principal, hidden=False
    )


def _set_comment_hidden(
    db: Session,
    *,
    post_id: int,
    comment_id: int,
    principal: Principal,
    hidden: bool,
) -> Comment:
    verb = "hide" if hidden else "unhide"
    with unit_of_work(db):
        comments = CommentRepository(db)
        comment = comments.get_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment not found")
        if comment.post_id != post_id:
            raise ValidationError("Comment does not belong to this post")

        post = get_post_or_404(db, post_id)
        ensure_can_act(principal, post)
        if comment.author_id != principal.user_id:
            raise ForbiddenError(f"You can only {verb} your own comments")

        # The comment counter records every comment ever added; it is not touched here.
        write_with_retry(
            db,
            comment,
            lambda c: comments.set_hidden(c, hidden),
            label=f"comment {comment_id}",
        )

    logger.info(
        "Comment %s: id=%s, postId=%s, user=%s",
        "hidden" if hidden else "unhidden",
        comment_id,
        post_id,
        principal.user_id,
    )
    return comment


def get_comments(
    db: Session,
    *,
    post_id: int,
    principal: Principal,
    page_request: PageRequest | None = None,
    sort_by: str | SortBy | None = None,
) -> Page[Comment]:
    """Return a page of the post's visible comments, whoever wrote them."""
    page_request = page_request or PageRequest.normalize()
    post = get_post_or_404(db, post_id)
    ensure_can_act(principal, post)
    items, total = CommentRepository(db).list_visible_for_post(
        post_id=post_id,
        page_request=page_request,
        sort_by=SortBy.parse_or_default(sort_by),
    )
    return Page(items=items, page=page_request.page, limit=page_request.limit, total=total)
