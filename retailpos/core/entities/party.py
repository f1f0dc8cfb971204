"""Customer and employee records."""

from datetime import datetime

from pydantic import Field

from retailpos.core.entities.base import DomainModel, Record


class CustomerFields(DomainModel):
    name: str = Field(min_length=1)
    phone: str = ""
    email: str | None = None
    address: str | None = None


class Customer(CustomerFields, Record):
    """A customer of the store."""


class EmployeeFields(DomainModel):
    name: str = Field(min_length=1)
    phone: str = ""
    email: str | None = None
    position: str = ""
    start_date: datetime | None = None


class Employee(EmployeeFields, Record):
    """A member of staff."""
