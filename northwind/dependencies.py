"""
Dependency injection container.

Factory functions wiring services to configured infrastructure.

Dependencies: northwind.application, northwind.boundary
System role: DI container for service injection
"""

from functools import lru_cache

from sqlalchemy.orm import Session, sessionmaker

from northwind.application.services import EmployeeRecordService
from northwind.boundary.db import get_session_factory


@lru_cache
def get_default_session_factory() -> sessionmaker[Session]:
    """Session factory bound to the configured engine, created once."""
    return get_session_factory()


def get_employee_service() -> EmployeeRecordService:
    """
    Get employee service instance.

    Returns:
        EmployeeRecordService: Service bound to the configured database
    """
    return EmployeeRecordService(get_default_session_factory())
