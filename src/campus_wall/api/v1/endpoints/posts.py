# src/campus_wall/api/v1/endpoints/posts.py
"""Post, comment and like endpoints for the wall API."""

from fastapi import APIRouter, Query, status

from campus_wall.api.v1.dependencies import PrincipalDep, SessionDep
from campus_wall.core.domain import PageRequest
from campus_wall.schemas import (
    CommentCreate,
    CommentListResponse,
    CommentResponse,
    LikeResponse,
    Pagination,
    PostCreate,
    PostListResponse,
    PostResponse,
)
from campus_wall.services import comments, likes, listing, post_service, visibility

router = APIRouter(prefix="/posts", tags=["posts"])


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(body: PostCreate, principal: PrincipalDep, db: SessionDep) -> PostResponse:
    """Create a post on the campus (default) or national wall."""
    post = post_service.create_post(
        db, content=body.content, wall=body.wall, principal=principal
    )
    return PostResponse.from_post(post)


@router.get("", response_model=PostListResponse)
def list_posts(
    principal: PrincipalDep,
    db: SessionDep,
    wall: str = Query("campus", description="'campus' or 'national'"),
    page: int = Query(1, description="One-based page number"),
    limit: int = Query(20, description="Page size; out-of-range values fall back to 20"),
    sort: str | None = Query(None, description="NEWEST, OLDEST, MOST_LIKED or LEAST_LIKED"),
) -> PostListResponse:
    """List visible posts on a wall with pagination and sorting."""
    result = listing.get_posts_by_wall(
        db,
        wall=wall,
        principal=principal,
        page_request=PageRequest.normalize(page, limit),
        sort_by=sort,
    )
    return PostListResponse(
        data=[PostResponse.from_post(view.post, liked=view.liked) for view in result.items],
        pagination=Pagination.from_page(result),
    )


@router.get("/{post_id}", response_model=PostResponse)
def get_post(post_id: int, principal: PrincipalDep, db: SessionDep) -> PostResponse:
    """Get a single post together with the caller's like state."""
    view = post_service.get_post(db, post_id=post_id, principal=principal)
    return PostResponse.from_post(view.post, liked=view.liked)


@router.post("/{post_id}/likes", response_model=LikeResponse)
def toggle_like(post_id: int, principal: PrincipalDep, db: SessionDep) -> LikeResponse:
    """Like or unlike a post."""
    result = likes.toggle_like(db, post_id=post_id, principal=principal)
    return LikeResponse(liked=result.liked, like_count=result.like_count)


@router.post(
    "/{post_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    post_id: int, body: CommentCreate, principal: PrincipalDep, db: SessionDep
) -> CommentResponse:
    """Add a comment to a post."""
    comment = comments.add_comment(db, post_id=post_id, text=body.text, principal=principal)
    return CommentResponse.model_validate(comment)


@router.get("/{post_id}/comments", response_model=CommentListResponse)
def list_comments(
    post_id: int,
    principal: PrincipalDep,
    db: SessionDep,
    page: int = Query(1),
    limit: int = Query(20),
    sort: str | None = Query(None),
) -> CommentListResponse:
    """List a post's visible comments."""
    result = comments.get_comments(
        db,
        post_id=post_id,
        principal=principal,
        page_request=PageRequest.normalize(page, limit),
        sort_by=sort,
    )
    return CommentListResponse(
        data=[CommentResponse.model_validate(c) for c in result.items],
        pagination=Pagination.from_page(result),
    )


@router.patch("/{post_id}/comments/{comment_id}/hide", response_model=CommentResponse)
def hide_comment(
    post_id: int, comment_id: int, principal: PrincipalDep, db: SessionDep
) -> CommentResponse:
    """Hide one of the caller's own comments."""
    comment = comments.hide_comment(
        db, post_id=post_id, comment_id=comment_id, principal=principal
    )
    return CommentResponse.model_validate(comment)


@router.patch("/{post_id}/comments/{comment_id}/unhide", response_model=CommentResponse)
def unhide_comment(
    post_id: int, comment_id: int, principal: PrincipalDep, db: SessionDep
) -> CommentResponse:
    """Unhide one of the caller's own comments."""
    comment = comments.unhide_comment(
        db, post_id=post_id, comment_id=comment_id, principal=principal
    )
    return CommentResponse.model_validate(comment)


@router.patch("/{post_id}/hide", response_model=PostResponse)
def hide_post(post_id: int, principal: PrincipalDep, db: SessionDep) -> PostResponse:
    """Hide the caller's own post together with all of its comments."""
    post = visibility.hide_post(db, post_id=post_id, principal=principal)
    view = post_service.view_for(db, post, principal)
    return PostResponse.from_post(view.post, liked=view.liked)


@router.patch("/{post_id}/unhide", response_model=PostResponse)
def unhide_post(post_id: int, principal: PrincipalDep, db: SessionDep) -> PostResponse:
    """Unhide the caller's own post and restore all of its comments."""
    post = visibility.unhide_post(db, post_id=post_id, principal=principal)
    view = post_service.view_for(db, post, principal)
    return PostResponse.from_post(view.post, liked=view.liked)
