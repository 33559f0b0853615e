"""Shared API dependencies for the caller identity and database session."""

import uuid
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from campus_wall.core.domain import Principal
from campus_wall.db.session import get_db

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_principal(
    x_user_id: Annotated[str | None, Header()] = None,
    x_school_domain: Annotated[str | None, Header()] = None,
) -> Principal:
    """Build the principal from headers set by the upstream identity provider.

    Raises:
        HTTPException: If the user id header is missing or not a UUID.
    """
    if not x_user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not authenticated",
        )
    try:
        user_id = uuid.UUID(x_user_id)
    except ValueError as err:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user ID format",
        ) from err
    return Principal(user_id=user_id, school_domain=x_school_domain)


# Type alias for current principal dependency
PrincipalDep = Annotated[Principal, Depends(get_principal)]
