"""Domain models and schemas."""

from northwind.models.employee import EMPLOYEE_MUTABLE_FIELDS, Employee

__all__ = ["Employee", "EMPLOYEE_MUTABLE_FIELDS"]
