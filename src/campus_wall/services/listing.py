"""Paged, sorted post listings per wall."""

from __future__ import annotations

from sqlalchemy.orm import Session

from campus_wall.core.domain import Page, PageRequest, Principal, SortBy, Wall
from campus_wall.repositories import LikeRepository, PostRepository
from campus_wall.services.post_service import PostView


def get_posts_by_wall(
    db: Session,
    *,
    wall: str | Wall,
    principal: Principal,
    page_request: PageRequest | None = None,
    sort_by: str | SortBy | None = None,
) -> Page[PostView]:
    """List visible posts on a wall.

    Campus listings only show posts from the principal's school; a principal
    without a school gets an empty page rather than an error.

    Raises:
        ValidationError: If ``wall`` names neither wall.
    """
    target_wall = Wall.parse(wall)
    page_request = page_request or PageRequest.normalize()
    if target_wall is Wall.CAMPUS and not principal.has_school:
        return Page.empty(page_request)

    posts, total = PostRepository(db).list_by_wall(
        wall=target_wall,
        school_domain=principal.school_domain,
        page_request=page_request,
        sort_by=SortBy.parse_or_default(sort_by),
    )
    liked = LikeRepository(db).liked_post_ids(principal.user_id, (p.id for p in posts))
    views = [PostView(post=post, liked=post.id in liked) for post in posts]
    return Page(items=views, page=page_request.page, limit=page_request.limit, total=total)
