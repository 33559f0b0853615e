"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from campus_wall.core.domain import Page


class Pagination(BaseModel):
    """Paging metadata returned next to every list."""

    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_page(cls, page: Page) -> "Pagination":
        return cls(
            page=page.page,
            limit=page.limit,
            total=page.total,
            total_pages=page.total_pages,
        )
