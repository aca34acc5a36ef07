"""
Employee CRUD operations.

Dependencies: sqlalchemy, northwind.boundary.db.models, northwind.models
System role: Employee persistence operations
"""

from sqlalchemy.orm import Session

from northwind.boundary.db.CRUD.base_crud import BaseCRUD
from northwind.boundary.db.models.employee_model import EmployeeModel
from northwind.models.employee import EMPLOYEE_MUTABLE_FIELDS, Employee


class EmployeeCRUD(BaseCRUD[EmployeeModel]):
    """CRUD operations for EmployeeModel."""

    def __init__(self) -> None:
        """Initialize EmployeeCRUD with EmployeeModel."""
        super().__init__(EmployeeModel)

    def create_from(self, session: Session, employee: Employee) -> EmployeeModel:
        """
        Insert a row built from every mutable field of `employee`.

        The incoming id is ignored; the database assigns one.
        """
        return self.create(session, **employee.model_dump(include=set(EMPLOYEE_MUTABLE_FIELDS)))

    def replace_fields(
        self,
        session: Session,
        instance: EmployeeModel,
        employee: Employee,
    ) -> EmployeeModel:
        """
        Full replace: copy every mutable field, None included.

        Args:
            session: Database session the instance belongs to
            instance: Loaded row to overwrite
            employee: Source of the new values

        Returns:
            The overwritten instance
        """
        values = {field: getattr(employee, field) for field in EMPLOYEE_MUTABLE_FIELDS}
        return self.update(session, instance, **values)


employee_crud = EmployeeCRUD()
