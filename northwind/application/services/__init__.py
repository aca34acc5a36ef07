"""Service orchestrators."""

from .employee_service import EmployeeRecordService

__all__ = ["EmployeeRecordService"]
