"""
Employee ORM model.

Maps the Northwind `Employees` table, keeping its original column
names while exposing snake_case attributes.

Dependencies: sqlalchemy, northwind.boundary.db.base
System role: Employee persistence
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from northwind.boundary.db.base import Base


class EmployeeModel(Base):
    """
    Employee ORM model.

    Attributes:
        id: Integer primary key (autoincrement, assigned on insert)
        first_name: First name (NOT NULL, 10 chars)
        last_name: Last name (NOT NULL, 20 chars)
        reports_to: Nullable self-reference to the manager's EmployeeID

    Referential integrity of `reports_to` is enforced by the database.
    """

    __tablename__ = "Employees"

    id: Mapped[int] = mapped_column("EmployeeID", Integer, primary_key=True, autoincrement=True)
    last_name: Mapped[str] = mapped_column("LastName", String(20), nullable=False)
    first_name: Mapped[str] = mapped_column("FirstName", String(10), nullable=False)
    title: Mapped[str | None] = mapped_column("Title", String(30))
    title_of_courtesy: Mapped[str | None] = mapped_column("TitleOfCourtesy", String(25))
    birth_date: Mapped[datetime | None] = mapped_column("BirthDate", DateTime)
    hire_date: Mapped[datetime | None] = mapped_column("HireDate", DateTime)
    address: Mapped[str | None] = mapped_column("Address", String(60))
    city: Mapped[str | None] = mapped_column("City", String(15))
    region: Mapped[str | None] = mapped_column("Region", String(15))
    postal_code: Mapped[str | None] = mapped_column("PostalCode", String(10))
    country: Mapped[str | None] = mapped_column("Country", String(15))
    home_phone: Mapped[str | None] = mapped_column("HomePhone", String(24))
    extension: Mapped[str | None] = mapped_column("Extension", String(4))
    notes: Mapped[str | None] = mapped_column("Notes", Text)
    reports_to: Mapped[int | None] = mapped_column(
        "ReportsTo",
        Integer,
        ForeignKey("Employees.EmployeeID"),
        nullable=True,
    )
    photo_path: Mapped[str | None] = mapped_column("PhotoPath", String(255))

    def __repr__(self) -> str:
        return f"<EmployeeModel id={self.id} name={self.first_name!r} {self.last_name!r}>"
