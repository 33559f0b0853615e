# mypy: ignore-errors
# tests/services/test_access.py
"""Tests for the wall-scope access guard."""

import uuid
from types import SimpleNamespace

import pytest

from campus_wall.core.domain import Principal, Wall
from campus_wall.core.errors import ForbiddenError
from campus_wall.services.access import can_act, can_create, ensure_can_act

CAMPUS = SimpleNamespace(wall="campus", school_domain="mit.edu")
NATIONAL = SimpleNamespace(wall="national", school_domain=None)


def _principal(domain):
    return Principal(user_id=uuid.uuid4(), school_domain=domain)


@pytest.mark.parametrize("domain", ["mit.edu", "stanford.edu", None])
def test_national_resources_open_to_everyone(domain) -> None:
    assert can_act(_principal(domain), NATIONAL).allowed


def test_campus_resource_allows_same_school() -> None:
    assert can_act(_principal("mit.edu"), CAMPUS).allowed


def test_campus_resource_denies_other_school() -> None:
    decision = can_act(_principal("stanford.edu"), CAMPUS)
    assert not decision.allowed
    assert "other schools" in decision.reason


def test_campus_resource_denies_missing_domain() -> None:
    decision = can_act(_principal(None), CAMPUS)
    assert not decision.allowed
    assert "campus posts" in decision.reason


def test_ensure_can_act_raises_forbidden() -> None:
    with pytest.raises(ForbiddenError):
        ensure_can_act(_principal("stanford.edu"), CAMPUS)


def test_campus_creation_requires_domain() -> None:
    assert not can_create(_principal(None), Wall.CAMPUS).allowed
    assert can_create(_principal(None), Wall.NATIONAL).allowed
    assert can_create(_principal("mit.edu"), Wall.CAMPUS).allowed
