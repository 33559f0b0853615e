# tests/conftest.py
from __future__ import annotations

import os
import uuid
from collections.abc import Callable, Generator, Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")

from campus_wall.core.domain import Principal, Wall
from campus_wall.db.session import Base, build_engine
from campus_wall.db.session import get_db as app_get_session
from campus_wall.main import app as fastapi_app
from campus_wall.models import Post
from campus_wall.services.post_service import create_post

TEST_DB_URL = "sqlite://"
SCHOOL = "mit.edu"
OTHER_SCHOOL = "stanford.edu"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = build_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database since services commit.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def _principal(school_domain: str | None) -> Principal:
    return Principal(user_id=uuid.uuid4(), school_domain=school_domain)


@pytest.fixture()
def author() -> Principal:
    """Primary user at the home school; owns the fixture posts."""
    return _principal(SCHOOL)


@pytest.fixture()
def classmate() -> Principal:
    """Second user at the same school."""
    return _principal(SCHOOL)


@pytest.fixture()
def outsider() -> Principal:
    """User from a different school."""
    return _principal(OTHER_SCHOOL)


@pytest.fixture()
def no_school() -> Principal:
    """User whose identity carries no school domain."""
    return _principal(None)


@pytest.fixture()
def make_post(db_session: Session, author: Principal) -> Callable[..., Post]:
    """Return a factory creating posts through the service layer."""

    def _make_post(
        content: str = "Test post content",
        *,
        wall: Wall = Wall.CAMPUS,
        principal: Principal | None = None,
    ) -> Post:
        return create_post(
            db_session,
            content=content,
            wall=wall,
            principal=principal or author,
        )

    return _make_post


@pytest.fixture()
def campus_post(make_post) -> Post:
    """A campus post at the home school."""
    return make_post("Campus post content")


@pytest.fixture()
def national_post(make_post) -> Post:
    """A national post."""
    return make_post("National post content", wall=Wall.NATIONAL)


def principal_headers(principal: Principal) -> dict[str, str]:
    """Headers the identity gateway would attach for ``principal``."""
    headers = {"X-User-Id": str(principal.user_id)}
    if principal.school_domain:
        headers["X-School-Domain"] = principal.school_domain
    return headers


@pytest.fixture()
def headers_for() -> Callable[[Principal], dict[str, str]]:
    """Return a helper building identity headers for a principal."""
    return principal_headers
