"""Error kinds raised by the wall core.

Every error carries a stable ``code`` and the HTTP status the edge should map it
to, so the API layer needs a single handler for the whole hierarchy.
"""

from __future__ import annotations

from typing import Any


class WallError(Exception):
    """Base exception for all domain failures of the wall core."""

    code = "wall_error"
    http_status = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        """Convert to the error envelope returned by the API."""
        return {"error": {"code": self.code, "message": self.message}}


class NotFoundError(WallError):
    """A post or comment does not exist."""

    code = "not_found"
    http_status = 404


class ForbiddenError(WallError):
    """Ownership or school-domain rule violated."""

    code = "forbidden"
    http_status = 403


class ValidationError(WallError):
    """Input rejected: blank or oversized text, unknown wall, mismatched parent."""

    code = "validation_error"
    http_status = 400


class ConflictError(WallError):
    """Optimistic version mismatch between concurrent writers of one row."""

    code = "conflict"
    http_status = 409


class CounterUnderflowError(ConflictError):
    """A counter delta would have driven a denormalized count below zero."""

    code = "counter_underflow"
