# mypy: ignore-errors
# tests/services/test_counters.py
"""Tests for the atomic post counter layer."""

import pytest
from sqlalchemy import select

from campus_wall.core.errors import CounterUnderflowError, NotFoundError
from campus_wall.models import Post
from campus_wall.services.counters import Counter, apply_delta


def test_apply_delta_updates_row_and_instance(db_session, campus_post) -> None:
    assert apply_delta(db_session, campus_post, Counter.LIKES, +1) == 1
    assert apply_delta(db_session, campus_post, Counter.LIKES, +1) == 2
    db_session.commit()

    assert campus_post.like_count == 2
    db_session.refresh(campus_post)
    assert campus_post.like_count == 2


def test_apply_delta_by_id_leaves_other_counter_alone(db_session, campus_post) -> None:
    assert apply_delta(db_session, campus_post.id, Counter.COMMENTS, +3) == 3
    db_session.commit()

    db_session.refresh(campus_post)
    assert campus_post.comment_count == 3
    assert campus_post.like_count == 0


def test_apply_delta_rejects_underflow(db_session, campus_post) -> None:
    with pytest.raises(CounterUnderflowError):
        apply_delta(db_session, campus_post, Counter.LIKES, -1)
    db_session.rollback()

    db_session.refresh(campus_post)
    assert campus_post.like_count == 0


def test_apply_delta_missing_post(db_session) -> None:
    with pytest.raises(NotFoundError):
        apply_delta(db_session, 424242, Counter.LIKES, +1)


def test_apply_delta_does_not_bump_version(db_session, campus_post) -> None:
    apply_delta(db_session, campus_post, Counter.LIKES, +1)
    db_session.commit()

    version = db_session.execute(select(Post.version).where(Post.id == campus_post.id)).scalar_one()
    assert version == 0
