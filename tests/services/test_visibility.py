# mypy: ignore-errors
# tests/services/test_visibility.py
"""Tests for post hide/unhide and the comment cascade."""

import pytest
from sqlalchemy import select

from campus_wall.core.errors import ForbiddenError, NotFoundError
from campus_wall.models import Comment, Post
from campus_wall.repositories import CommentRepository
from campus_wall.services.comments import add_comment, get_comments, hide_comment
from campus_wall.services.listing import get_posts_by_wall
from campus_wall.services.visibility import hide_post, unhide_post


def _hidden_flags(db_session, post_id) -> list[bool]:
    return list(
        db_session.execute(
            select(Comment.hidden).where(Comment.post_id == post_id).order_by(Comment.id)
        ).scalars()
    )


def _db_post_hidden(db_session, post_id) -> bool:
    return db_session.execute(select(Post.hidden).where(Post.id == post_id)).scalar_one()


@pytest.fixture()
def thread(db_session, campus_post, author, classmate):
    """Campus post with three comments from two different authors."""
    comments = [
        add_comment(db_session, post_id=campus_post.id, text=text, principal=who)
        for text, who in (("c1", author), ("c2", classmate), ("c3", classmate))
    ]
    return campus_post, comments


def test_hide_post_cascades_to_all_comments(db_session, thread, author) -> None:
    post, comments = thread

    hidden = hide_post(db_session, post_id=post.id, principal=author)

    assert hidden.hidden is True
    assert hidden.version == 1
    assert _hidden_flags(db_session, post.id) == [True, True, True]
    for comment in comments:
        assert comment.hidden is True

    unhidden = unhide_post(db_session, post_id=post.id, principal=author)

    assert unhidden.hidden is False
    assert _hidden_flags(db_session, post.id) == [False, False, False]


def test_hidden_post_leaves_listing(db_session, thread, author, classmate) -> None:
    post, _ = thread
    hide_post(db_session, post_id=post.id, principal=author)

    page = get_posts_by_wall(db_session, wall="campus", principal=classmate)
    assert post.id not in {view.post.id for view in page.items}
    assert get_comments(db_session, post_id=post.id, principal=classmate).total == 0

    unhide_post(db_session, post_id=post.id, principal=author)
    page = get_posts_by_wall(db_session, wall="campus", principal=classmate)
    assert post.id in {view.post.id for view in page.items}


def test_hide_post_is_idempotent(db_session, thread, author) -> None:
    post, _ = thread
    hide_post(db_session, post_id=post.id, principal=author)
    again = hide_post(db_session, post_id=post.id, principal=author)

    assert again.hidden is True
    assert _db_post_hidden(db_session, post.id) is True
    assert _hidden_flags(db_session, post.id) == [True, True, True]


def test_unhide_post_is_idempotent(db_session, thread, author) -> None:
    post, _ = thread
    unhide_post(db_session, post_id=post.id, principal=author)
    again = unhide_post(db_session, post_id=post.id, principal=author)

    assert again.hidden is False
    assert _hidden_flags(db_session, post.id) == [False, False, False]


def test_unhide_post_restores_individually_hidden_comments(
    db_session, thread, author, classmate
) -> None:
    post, comments = thread
    hide_comment(db_session, post_id=post.id, comment_id=comments[1].id, principal=classmate)

    hide_post(db_session, post_id=post.id, principal=author)
    unhide_post(db_session, post_id=post.id, principal=author)

    assert _hidden_flags(db_session, post.id) == [False, False, False]


def test_hide_post_keeps_counters(db_session, thread, author) -> None:
    post, _ = thread
    hide_post(db_session, post_id=post.id, principal=author)

    db_session.refresh(post)
    assert post.comment_count == 3


def test_hide_post_requires_author(db_session, thread, classmate) -> None:
    post, _ = thread
    with pytest.raises(ForbiddenError, match="only hide your own posts"):
        hide_post(db_session, post_id=post.id, principal=classmate)
    with pytest.raises(ForbiddenError, match="only unhide your own posts"):
        unhide_post(db_session, post_id=post.id, principal=classmate)

    assert _db_post_hidden(db_session, post.id) is False


def test_hide_post_missing(db_session, author) -> None:
    with pytest.raises(NotFoundError):
        hide_post(db_session, post_id=8080, principal=author)


def test_failed_cascade_rolls_back_post_flag(db_session, thread, author, monkeypatch) -> None:
    """A failure in the bulk comment update leaves the post untouched too."""
    post, _ = thread

    def _fail(self, post_id, hidden):
        raise RuntimeError("cascade failed")

    monkeypatch.setattr(CommentRepository, "set_hidden_for_post", _fail)
    with pytest.raises(RuntimeError):
        hide_post(db_session, post_id=post.id, principal=author)

    assert _db_post_hidden(db_session, post.id) is False
    assert _hidden_flags(db_session, post.id) == [False, False, False]
    db_session.refresh(post)
    assert post.version == 0
