"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base: Declarative base
  - get_engine(), get_session_factory(): Connection management
  - EmployeeModel: Employees table entity
  - BaseCRUD, EmployeeCRUD, employee_crud: CRUD operations

Dependencies: sqlalchemy, northwind.configs
System role: Database adapter for the Northwind Employees table
"""

from northwind.boundary.db.base import Base
from northwind.boundary.db.connection import get_engine, get_session_factory
from northwind.boundary.db.models.employee_model import EmployeeModel
from northwind.boundary.db.CRUD import BaseCRUD, EmployeeCRUD, employee_crud

__all__ = [
    "Base",
    "get_engine",
    "get_session_factory",
    "EmployeeModel",
    "BaseCRUD",
    "EmployeeCRUD",
    "employee_crud",
]
