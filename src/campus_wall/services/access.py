"""Wall-scope access rules shared by every read and write path.

National resources are open to any authenticated principal. Campus resources
are open only to principals whose school domain matches the resource's.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from campus_wall.core.domain import Principal, Wall
from campus_wall.core.errors import ForbiddenError


class WallScoped(Protocol):
    """Anything carrying a wall and, for campus content, a school domain."""

    wall: str
    school_domain: str | None


@dataclass(frozen=True)
class AccessDecision:
    """Outcome of an access check; ``reason`` is set only on denial."""

    allowed: bool
    reason: str | None = None

    @classmethod
    def allow(cls) -> "AccessDecision":
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> "AccessDecision":
        return cls(allowed=False, reason=reason)


def can_act(principal: Principal, resource: WallScoped) -> AccessDecision:
    """Decide whether ``principal`` may read or act on ``resource``."""
    if Wall.parse(resource.wall) is Wall.NATIONAL:
        return AccessDecision.allow()
    if not principal.has_school:
        return AccessDecision.deny("You do not have access to campus posts")
    if principal.school_domain != resource.school_domain:
        return AccessDecision.deny("You do not have access to posts from other schools")
    return AccessDecision.allow()


def can_create(principal: Principal, wall: Wall) -> AccessDecision:
    """Decide whether ``principal`` may create a post on ``wall``."""
    if wall is Wall.CAMPUS and not principal.has_school:
        return AccessDecision.deny("Cannot post to campus wall without school domain")
    return AccessDecision.allow()


def ensure_can_act(principal: Principal, resource: WallScoped) -> None:
    """Raise :class:`ForbiddenError` unless ``principal`` may act on ``resource``."""
    decision = can_act(principal, resource)
    if not decision.allowed:
        raise ForbiddenError(decision.reason or "Forbidden")


def ensure_can_create(principal: Principal, wall: Wall) -> None:
    """Raise :class:`ForbiddenError` unless ``principal`` may post on ``wall``."""
    decision = can_create(principal, wall)
    if not decision.allowed:
        raise ForbiddenError(decision.reason or "Forbidden")
