"""
Core domain module.

Contains the exception hierarchy shared by the service and its callers.
"""

from northwind.core.exceptions import (
    EmployeeNotFoundError,
    EmployeeServiceError,
    InvalidArgumentError,
)

__all__ = [
    "EmployeeServiceError",
    "EmployeeNotFoundError",
    "InvalidArgumentError",
]
