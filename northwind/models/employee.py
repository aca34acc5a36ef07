"""
Employee domain model.

Plain data object handed to and returned from the employee service.
Built from ORM rows via `from_attributes`, so callers never hold a
session-bound instance.

Dependencies: pydantic
System role: Employee data contract
"""

from pydantic import BaseModel, ConfigDict, Field, NaiveDatetime


class Employee(BaseModel):
    """One row of the Northwind Employees table."""

    model_config = ConfigDict(from_attributes=True)

    id: int | None = Field(None, description="Primary key, assigned by storage on insert")
    first_name: str | None = Field(None, description="First name")
    last_name: str | None = Field(None, description="Last name")
    title: str | None = Field(None, description="Job title")
    title_of_courtesy: str | None = Field(None, description="Courtesy title (Mr., Ms., Dr.)")
    birth_date: NaiveDatetime | None = Field(None, description="Stored without timezone")
    hire_date: NaiveDatetime | None = Field(None, description="Stored without timezone")
    address: str | None = None
    city: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    home_phone: str | None = None
    extension: str | None = None
    notes: str | None = Field(None, description="Free-text notes")
    reports_to: int | None = Field(None, description="ID of the employee's manager")
    photo_path: str | None = None


# Every field except the identifier; order follows the table definition
EMPLOYEE_MUTABLE_FIELDS: tuple[str, ...] = tuple(
    name for name in Employee.model_fields if name != "id"
)
