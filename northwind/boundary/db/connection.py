"""
Database connection management.

Provides the SQLAlchemy engine and the session factory that services
use to open one short-lived session per operation.

Dependencies: sqlalchemy, northwind.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from northwind.configs import get_settings


def get_engine(database_url: str | None = None) -> Engine:
    """
    Create SQLAlchemy engine with connection pooling and health checks.

    pool_pre_ping=True verifies connections before use to detect
    stale/broken connections early. Pool sizing applies to server
    databases only; SQLite keeps SQLAlchemy's default pool.

    Args:
        database_url: Explicit URL; defaults to the configured one

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails

    Usage:
        engine = get_engine()
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    """
    db_config = get_settings().database
    url = make_url(database_url or db_config.database_url)

    options: dict = {"echo": db_config.echo_sql, "pool_pre_ping": True}
    if url.get_backend_name() != "sqlite":
        options.update(
            pool_size=db_config.pool_size,
            max_overflow=db_config.max_overflow,
            pool_timeout=db_config.pool_timeout,
        )
    return create_engine(url, **options)


def get_session_factory(engine: Engine | None = None) -> sessionmaker[Session]:
    """
    Create session factory for database operations.

    Sessions are created with autoflush=False for predictable writes and
    expire_on_commit=False so loaded rows stay readable after commit.

    Args:
        engine: Engine to bind; a configured engine is created when omitted

    Returns:
        sessionmaker: Session factory configured for manual transaction control

    Usage:
        SessionFactory = get_session_factory()
        with SessionFactory() as session:
            session.add(obj)
            session.commit()
    """
    return sessionmaker(
        bind=engine or get_engine(),
        autoflush=False,
        expire_on_commit=False,
    )
