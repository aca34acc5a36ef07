"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from northwind.boundary.db.CRUD import employee_crud

    with session_factory() as session:
        row = employee_crud.get_by_id(session, 1)
"""

from northwind.boundary.db.CRUD.base_crud import BaseCRUD
from northwind.boundary.db.CRUD.employee_crud import EmployeeCRUD, employee_crud

__all__ = [
    "BaseCRUD",
    "EmployeeCRUD",
    "employee_crud",
]
