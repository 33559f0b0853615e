"""Database session configuration."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from campus_wall.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import campus_wall.models  # noqa: E402,F401


def enable_sqlite_savepoints(engine: Engine) -> None:
    """Let SQLAlchemy own transaction boundaries on pysqlite.

    The driver otherwise starts transactions lazily on its own, which breaks
    SAVEPOINT handling used when a duplicate like insert is rolled back.
    Transactions take the write lock up front (``BEGIN IMMEDIATE``) so that
    concurrent writers queue on the busy timeout instead of failing when a
    shared lock cannot be upgraded.
    """

    @event.listens_for(engine, "connect")
    def _disable_driver_autobegin(dbapi_connection, connection_record) -> None:
        dbapi_connection.isolation_level = None

    @event.listens_for(engine, "begin")
    def _emit_begin(conn) -> None:
        conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(url: str, **kwargs) -> Engine:
    """Create an engine, applying the SQLite savepoint fix where needed."""
    engine = create_engine(url, **kwargs)
    if engine.dialect.name == "sqlite":
        enable_sqlite_savepoints(engine)
    return engine


engine = build_engine(
    settings.effective_database_url,
    pool_pre_ping=True,
    echo=settings.sql_debug,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def unit_of_work(db: Session) -> Iterator[Session]:
    """Run a block as one atomic transaction.

    Commits when the block finishes and rolls back everything it wrote when any
    exception escapes, so callers observe either the full change or none of it.
    """
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """Drop all database tables."""
    Base.metadata.drop_all(bind=engine)
