"""Service-level helpers for creating and reading posts."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from campus_wall.core.domain import Principal, Wall
from campus_wall.core.errors import NotFoundError, ValidationError
from campus_wall.core.settings import settings
from campus_wall.db.session import unit_of_work
from campus_wall.models import Post
from campus_wall.repositories import LikeRepository, PostRepository
from campus_wall.services.access import ensure_can_act, ensure_can_create

logger = logging.getLogger(__name__)


@dataclass
class PostView:
    """A post as seen by one principal, with that principal's like state."""

    post: Post
    liked: bool


def validate_text(text: str | None, *, subject: str) -> str:
    """Reject blank text and text longer than ``settings.max_text_length``."""
    if text is None or not text.strip():
        raise ValidationError(f"{subject} cannot be empty")
    if len(text) > settings.max_text_length:
        raise ValidationError(
            f"{subject} exceeds maximum length of {settings.max_text_length} characters"
        )
    return text


def get_post_or_404(db: Session, post_id: int) -> Post:
    post = PostRepository(db).get_by_id(post_id)
    if post is None:
        raise NotFoundError("Post not found")
    return post


def create_post(
    db: Session,
    *,
    content: str,
    principal: Principal,
    wall: str | Wall | None = None,
) -> Post:
    """Create a post on the requested wall (campus when omitted).

    Campus posts take the author's school domain; national posts never carry one.

    Raises:
        ValidationError: If the content is blank or too long, or the wall is unknown.
        ForbiddenError: If a campus post is requested by a principal without a school.
    """
    validate_text(content, subject="Post content")
    target_wall = Wall.parse(wall, default=Wall.CAMPUS)
    ensure_can_create(principal, target_wall)

    school_domain = principal.school_domain if target_wall is Wall.CAMPUS else None
    with unit_of_work(db):
        post = PostRepository(db).create(
            author_id=principal.user_id,
            content=content,
            wall=target_wall,
            school_domain=school_domain,
        )
    logger.info(
        "Post created: id=%s, wall=%s, schoolDomain=%s, user=%s",
        post.id,
        target_wall.value,
        school_domain,
        principal.user_id,
    )
    return post


def get_post(db: Session, *, post_id: int, principal: Principal) -> PostView:
    """Return a single post the principal may see, with their like state."""
    post = get_post_or_404(db, post_id)
    ensure_can_act(principal, post)
    return view_for(db, post, principal)


def view_for(db: Session, post: Post, principal: Principal) -> PostView:
    """Pair a post with the principal's like state, without an access check."""
    liked = LikeRepository(db).find(post.id, principal.user_id) is not None
    return PostView(post=post, liked=liked)
