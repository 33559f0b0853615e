# mypy: ignore-errors
# tests/test_schema.py
"""Tests for table definitions and startup logging setup."""

import logging
from datetime import datetime, timezone
from types import SimpleNamespace
from uuid import uuid4

import pytest
from sqlalchemy import Integer

from campus_wall.core.log_config import HANDLER_NAME, configure_logging
from campus_wall.models import Comment, Post, PostLike
from campus_wall.schemas import PostResponse


@pytest.mark.parametrize("model", [Comment, PostLike])
def test_post_foreign_keys_match_post_id_type(model) -> None:
    """Columns pointing at post.id share its integer type."""
    column = model.__table__.c.post_id
    assert isinstance(Post.__table__.c.id.type, Integer)
    assert type(column.type) is type(Post.__table__.c.id.type)
    assert {fk.target_fullname for fk in column.foreign_keys} == {"post.id"}


def test_configure_logging_installs_one_named_handler() -> None:
    """Repeated setup keeps a single handler and applies the new level."""
    root = logging.getLogger()
    previous_level = root.level
    try:
        configure_logging("info")
        configure_logging("debug")

        named = [h for h in root.handlers if h.get_name() == HANDLER_NAME]
        assert len(named) == 1
        assert root.level == logging.DEBUG
    finally:
        for handler in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
            root.removeHandler(handler)
        root.setLevel(previous_level)


def test_post_response_from_post_sets_liked() -> None:
    """Responses are built from an ORM-like post plus an explicit liked flag."""
    now = datetime.now(timezone.utc)
    post = SimpleNamespace(
        id=1,
        author_id=uuid4(),
        content="hi",
        wall="national",
        school_domain=None,
        like_count=2,
        comment_count=0,
        hidden=False,
        version=0,
        created_at=now,
        updated_at=now,
    )

    assert PostResponse.from_post(post).liked is False
    assert PostResponse.from_post(post, liked=True).liked is True
