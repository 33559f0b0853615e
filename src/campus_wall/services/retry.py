"""Single re-read-and-retry policy for optimistic version conflicts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from sqlalchemy.orm import Session

from campus_wall.core.errors import ConflictError
from campus_wall.core.settings import settings
from campus_wall.repositories import VersionOk, VersionResult

logger = logging.getLogger(__name__)

E = TypeVar("E")


def write_with_retry(
    db: Session,
    instance: E,
    write: Callable[[E], VersionResult],
    *,
    label: str,
) -> VersionOk:
    """Apply a version-checked write, re-reading the row after each conflict.

    ``write`` is retried up to ``settings.version_retry_limit`` times with
    freshly loaded state before a :class:`ConflictError` is raised.
    """
    attempts = max(settings.version_retry_limit, 0) + 1
    for attempt in range(1, attempts + 1):
        result = write(instance)
        if isinstance(result, VersionOk):
            return result
        logger.warning(
            "Version conflict on %s (expected version %s, attempt %d/%d)",
            label,
            result.expected,
            attempt,
            attempts,
        )
        db.refresh(instance)

    raise ConflictError(f"{label} was modified concurrently; retry the request")
