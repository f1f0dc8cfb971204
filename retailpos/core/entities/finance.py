"""Income and expense bookkeeping records."""

from pydantic import Field

from retailpos.core.entities.base import DomainModel, Record


class CategoryFields(DomainModel):
    name: str = Field(min_length=1)


class Category(CategoryFields, Record):
    """An expense or income category."""


class CashEntryFields(DomainModel):
    """Shared shape of expenses and incomes."""

    description: str = Field(min_length=1)
    amount: float = Field(ge=0)
    category_id: str = ""
    category_name: str = ""  # snapshot


class Expense(CashEntryFields, Record):
    """Money paid out."""


class Income(CashEntryFields, Record):
    """Money received outside of sales."""
