"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite engine and session factory, sample employees
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

from datetime import datetime

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from northwind.boundary.db.base import Base
from northwind.models.employee import Employee


@pytest.fixture
def engine():
    """
    Create in-memory SQLite engine with the schema installed.

    Foreign keys are switched on so ReportsTo behaves like a server database.

    Yields:
        Engine: Test engine, disposed after the test
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    @event.listens_for(engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine) -> sessionmaker:
    """Provide session factory bound to the test engine."""
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest.fixture
def sample_employee() -> Employee:
    """Provide a fully populated employee without an id."""
    return Employee(
        first_name="Nancy",
        last_name="Davolio",
        title="Sales Representative",
        title_of_courtesy="Ms.",
        birth_date=datetime(1968, 12, 8),
        hire_date=datetime(1992, 5, 1),
        address="507 - 20th Ave. E. Apt. 2A",
        city="Seattle",
        region="WA",
        postal_code="98122",
        country="USA",
        home_phone="(206) 555-9857",
        extension="5467",
        notes="Education includes a BA in psychology.",
        reports_to=None,
        photo_path="http://accweb/emmployees/davolio.bmp",
    )
