"""
Employee record service.

CRUD facade over the Northwind Employees table. Every operation opens
its own session from the injected factory and closes it before
returning, on success and on error alike.

Dependencies: sqlalchemy, northwind.boundary.db.CRUD, northwind.models
System role: Employee use case orchestration
"""

import logging
from typing import Callable

from sqlalchemy.orm import Session

from northwind.boundary.db.CRUD.employee_crud import employee_crud
from northwind.core.exceptions import EmployeeNotFoundError, InvalidArgumentError
from northwind.models.employee import Employee

logger = logging.getLogger(__name__)


class EmployeeRecordService:
    """
    Service for the Employees table.

    Storage errors (integrity violations, lost connections) propagate
    unchanged; only missing rows are reported as EmployeeNotFoundError.
    """

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        """
        Initialize the service with a session factory.

        Args:
            session_factory: Zero-argument callable returning a new Session,
                usually a `sessionmaker`

        Raises:
            InvalidArgumentError: If session_factory is None
        """
        if session_factory is None:
            raise InvalidArgumentError(
                "Database session factory cannot be None.",
                argument="session_factory",
            )
        self.session_factory = session_factory

    def list_employees(self) -> list[Employee]:
        """
        Retrieve every employee in storage order.

        Returns:
            list[Employee]: All rows, unfiltered and unpaginated
        """
        with self.session_factory() as session:
            rows = employee_crud.get_all(session)
            employees = [Employee.model_validate(row) for row in rows]
        logger.debug("Employees listed", extra={"count": len(employees)})
        return employees

    def get_employee(self, employee_id: int) -> Employee:
        """
        Retrieve one employee.

        Args:
            employee_id: Employee primary key

        Returns:
            Employee: The stored record

        Raises:
            EmployeeNotFoundError: If no row has this id
        """
        with self.session_factory() as session:
            row = employee_crud.get_by_id(session, employee_id)
            if row is None:
                raise EmployeeNotFoundError(employee_id)
            return Employee.model_validate(row)

    def add_employee(self, employee: Employee) -> int:
        """
        Insert a new employee.

        The input's id is ignored and left untouched; storage assigns one.

        Args:
            employee: Field values for the new row

        Returns:
            int: Identifier assigned by storage
        """
        with self.session_factory() as session:
            row = employee_crud.create_from(session, employee)
            session.commit()
            employee_id = row.id
        logger.info("Employee added", extra={"employee_id": employee_id})
        return employee_id

    def remove_employee(self, employee_id: int) -> None:
        """
        Delete an employee.

        Args:
            employee_id: Employee primary key

        Raises:
            EmployeeNotFoundError: If no row has this id
        """
        with self.session_factory() as session:
            row = employee_crud.get_by_id(session, employee_id)
            if row is None:
                raise EmployeeNotFoundError(employee_id)
            employee_crud.delete(session, row)
            session.commit()
        logger.info("Employee removed", extra={"employee_id": employee_id})

    def update_employee(self, employee: Employee) -> None:
        """
        Overwrite every field of an existing employee except its id.

        This is a full replace: fields left as None on the input are
        written as NULL.

        Args:
            employee: New values; `employee.id` selects the row

        Raises:
            EmployeeNotFoundError: If no row has `employee.id`
        """
        with self.session_factory() as session:
            row = employee_crud.get_by_id(session, employee.id)
            if row is None:
                raise EmployeeNotFoundError(employee.id)
            employee_crud.replace_fields(session, row, employee)
            session.commit()
        logger.info("Employee updated", extra={"employee_id": employee.id})
