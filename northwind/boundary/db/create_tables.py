"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, northwind.configs
System role: Database schema initialization for development

Usage:
    python -m northwind.boundary.db.create_tables
"""

import logging

from sqlalchemy import Engine

from northwind.boundary.db.base import Base
from northwind.boundary.db.connection import get_engine

# Import all models to register them with Base.metadata
from northwind.boundary.db.models.employee_model import EmployeeModel  # noqa: F401

logger = logging.getLogger(__name__)


def create_all_tables(engine: Engine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables remain unchanged.

    Args:
        engine: Target engine; the configured engine when omitted

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    Base.metadata.create_all(bind=engine or get_engine())
    logger.info("Tables created", extra={"tables": sorted(Base.metadata.tables)})


def drop_all_tables(engine: Engine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.

    Args:
        engine: Target engine; the configured engine when omitted
    """
    Base.metadata.drop_all(bind=engine or get_engine())
    logger.info("Tables dropped", extra={"tables": sorted(Base.metadata.tables)})


if __name__ == "__main__":
    from northwind.observability import configure_logging

    configure_logging()
    create_all_tables()
