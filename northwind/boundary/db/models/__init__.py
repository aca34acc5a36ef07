"""
Database models package.

Exports:
  - EmployeeModel: Employees table ORM model

Dependencies: sqlalchemy, northwind.boundary.db.base
System role: Database model definitions for domain entities
"""

from northwind.boundary.db.models.employee_model import EmployeeModel

__all__ = ["EmployeeModel"]
