"""
Test suite for configuration and connection helpers.

Tests database URL resolution, settings caching, engine and session
factory construction, and table creation.

System role: Verification of configuration layer
"""

import pytest
from sqlalchemy import create_engine, inspect
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from northwind.boundary.db.connection import get_engine, get_session_factory
from northwind.boundary.db.create_tables import create_all_tables, drop_all_tables
from northwind.configs import DatabaseSettings, get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reset cached settings around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestDatabaseSettings:
    """Test suite for DatabaseSettings."""

    def test_database_url_should_compose_from_fields(self, monkeypatch) -> None:
        """Test composed URL when no override is set."""
        monkeypatch.delenv("NORTHWIND_DB_URL", raising=False)

        settings = DatabaseSettings(host="db", port=5433, user="u", password="p", name="nw")

        assert settings.database_url == "postgresql://u:p@db:5433/nw"

    def test_database_url_should_prefer_explicit_url(self) -> None:
        """Test full URL override wins."""
        settings = DatabaseSettings(url="sqlite:///northwind.db")

        assert settings.database_url == "sqlite:///northwind.db"

    def test_env_prefix_should_apply(self, monkeypatch) -> None:
        """Test NORTHWIND_DB_ environment variables are read."""
        monkeypatch.setenv("NORTHWIND_DB_URL", "sqlite://")

        assert get_settings().database.database_url == "sqlite://"

    def test_get_settings_should_be_cached(self) -> None:
        """Test settings singleton."""
        assert get_settings() is get_settings()


class TestConnection:
    """Test suite for engine and session factory helpers."""

    def test_get_engine_should_use_given_sqlite_url(self) -> None:
        """Test SQLite engines are created without pool sizing."""
        engine = get_engine("sqlite://")
        try:
            assert engine.url.get_backend_name() == "sqlite"
        finally:
            engine.dispose()

    def test_get_session_factory_should_produce_sessions(self) -> None:
        """Test factory is a sessionmaker bound to the engine."""
        engine = get_engine("sqlite://")
        try:
            factory = get_session_factory(engine)

            assert isinstance(factory, sessionmaker)
            with factory() as session:
                assert isinstance(session, Session)
                assert session.get_bind() is engine
        finally:
            engine.dispose()


class TestCreateTables:
    """Test suite for schema helpers."""

    def test_create_and_drop_should_manage_employees_table(self) -> None:
        """Test tables appear and disappear on the given engine."""
        engine = create_engine("sqlite://", poolclass=StaticPool)
        try:
            create_all_tables(engine)
            assert "Employees" in inspect(engine).get_table_names()

            drop_all_tables(engine)
            assert "Employees" not in inspect(engine).get_table_names()
        finally:
            engine.dispose()
