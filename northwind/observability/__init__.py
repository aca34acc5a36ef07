"""
Observability module.

Provides process-wide logging configuration.
"""

from northwind.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
