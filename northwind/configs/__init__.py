"""
Configuration management module.

Provides centralized, type-safe configuration using Pydantic Settings.
All config modules support environment variable mapping with validation.
"""

from northwind.configs.database import DatabaseSettings
from northwind.configs.settings import Settings, get_settings

__all__ = ["DatabaseSettings", "Settings", "get_settings"]
