"""Domain types shared by the services, repositories and the API edge.

Wall and sort values arrive as loose strings from clients; they are parsed once
at the boundary into closed enums and never compared as raw strings afterwards.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar
from uuid import UUID

from campus_wall.core.errors import ValidationError
from campus_wall.core.settings import settings

T = TypeVar("T")


class Wall(str, Enum):
    """Visibility scope of a post."""

    CAMPUS = "campus"
    NATIONAL = "national"

    @classmethod
    def parse(cls, value: "str | Wall | None", default: "Wall | None" = None) -> "Wall":
        """Parse a wall name case-insensitively.

        Raises:
            ValidationError: If the value names neither wall and no default applies.
        """
        if isinstance(value, Wall):
            return value
        if value is None or not value.strip():
            if default is not None:
                return default
            raise ValidationError("Wall must be 'campus' or 'national'")
        try:
            return cls(value.strip().lower())
        except ValueError as err:
            raise ValidationError("Wall must be 'campus' or 'national'") from err


class SortBy(str, Enum):
    """Listing order for posts and comments."""

    NEWEST = "NEWEST"
    OLDEST = "OLDEST"
    MOST_LIKED = "MOST_LIKED"
    LEAST_LIKED = "LEAST_LIKED"

    @classmethod
    def parse_or_default(cls, value: "str | SortBy | None") -> "SortBy":
        """Parse a sort name case-insensitively, falling back to NEWEST."""
        if isinstance(value, SortBy):
            return value
        if value is None:
            return cls.NEWEST
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.NEWEST

    @property
    def ascending(self) -> bool:
        return self in (SortBy.OLDEST, SortBy.LEAST_LIKED)

    @property
    def by_likes(self) -> bool:
        return self in (SortBy.MOST_LIKED, SortBy.LEAST_LIKED)


@dataclass(frozen=True)
class Principal:
    """Authenticated caller as supplied by the identity provider."""

    user_id: UUID
    school_domain: str | None = None

    def __post_init__(self) -> None:
        # Blank domains behave exactly like a missing one.
        if self.school_domain is not None and not self.school_domain.strip():
            object.__setattr__(self, "school_domain", None)

    @property
    def has_school(self) -> bool:
        return self.school_domain is not None


@dataclass(frozen=True)
class PageRequest:
    """One-based page request with the limit policy already applied."""

    page: int = 1
    limit: int = 20

    @classmethod
    def normalize(cls, page: int | None = None, limit: int | None = None) -> "PageRequest":
        """Clamp raw paging input.

        ``page < 1`` becomes 1. A limit below 1 or above ``settings.max_page_limit``
        is reset to ``settings.default_page_limit`` rather than clamped.
        """
        page = page if page is not None and page >= 1 else 1
        if limit is None or limit < 1 or limit > settings.max_page_limit:
            limit = settings.default_page_limit
        return cls(page=page, limit=limit)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class Page(Generic[T]):
    """A slice of a filtered query plus the metadata needed to page through it."""

    items: list[T]
    page: int
    limit: int
    total: int
    total_pages: int = field(init=False)

    def __post_init__(self) -> None:
        self.total_pages = math.ceil(self.total / self.limit) if self.limit else 0

    @classmethod
    def empty(cls, request: PageRequest) -> "Page[T]":
        return cls(items=[], page=request.page, limit=request.limit, total=0)
