"""
Database configuration settings.

Manages connection parameters for the Northwind database. A full
SQLAlchemy URL can be supplied directly; otherwise one is composed
from the individual connection fields.

Dependencies: pydantic, pydantic_settings
System role: Database connection configuration for ORM
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from northwind.configs.base import BaseSettings


class DatabaseSettings(BaseSettings):
    """Northwind database configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="NORTHWIND_DB_",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = Field(default=None, description="Full SQLAlchemy URL, overrides the fields below")
    driver: str = Field(default="postgresql", description="SQLAlchemy dialect+driver name")
    host: str = Field(default="localhost", description="Database host")
    port: int = Field(default=5432, description="Database port")
    user: str = Field(default="postgres", description="Database user")
    password: str = Field(default="postgres", description="Database password")
    name: str = Field(default="northwind", description="Database name")

    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum overflow connections")
    pool_timeout: int = Field(default=30, description="Connection pool timeout in seconds")
    echo_sql: bool = Field(default=False, description="Echo SQL statements to logs")

    @property
    def database_url(self) -> str:
        """
        Resolve the SQLAlchemy connection URL.

        Returns:
            str: `url` when configured, else the URL composed from host/port/etc.
        """
        if self.url:
            return self.url
        return (
            f"{self.driver}://{self.user}:{self.password}"
            f"@{self.host}:{self.port}/{self.name}"
        )
