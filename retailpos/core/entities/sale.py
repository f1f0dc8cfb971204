"""Sale domain entities."""

from enum import Enum

from pydantic import Field, model_validator

from retailpos.core.entities.base import DomainModel, Record


class SaleStatus(str, Enum):
    """Lifecycle states of a sale."""

    PENDING = "Pending"
    COMPLETED = "Completed"
    RETURNED = "Returned"

    @classmethod
    def _missing_(cls, value):
        # exports from the first release stored the localized labels
        return _LEGACY_STATUSES.get(value) if isinstance(value, str) else None


_LEGACY_STATUSES = {
    "Đang giao": SaleStatus.PENDING,
    "Hoàn thành": SaleStatus.COMPLETED,
    "Trả hàng": SaleStatus.RETURNED,
}


class SaleItem(DomainModel):
    """A single line on a sale. Name and prices are snapshots."""

    product_id: str
    product_name: str
    quantity: int = Field(gt=0)
    price: float = Field(ge=0)  # selling price at sale time
    purchase_price: float = Field(default=0.0, ge=0)  # cost at sale time

    @property
    def line_total(self) -> float:
        return self.price * self.quantity

    @property
    def line_cost(self) -> float:
        return self.purchase_price * self.quantity


class NewSale(DomainModel):
    """Sale data before it is persisted."""

    items: list[SaleItem] = Field(default_factory=list)
    total_amount: float = 0.0
    discount: float = Field(default=0.0, ge=0)
    final_amount: float = 0.0
    status: SaleStatus = SaleStatus.PENDING
    customer_id: str | None = None
    customer_name: str = ""
    employee_id: str | None = None
    employee_name: str = ""
    notes: str | None = None

    @model_validator(mode="after")
    def compute_amounts(self) -> "NewSale":
        """Derive total_amount from items and final_amount from total and discount."""
        self.total_amount = sum(item.line_total for item in self.items)
        self.final_amount = self.total_amount - self.discount
        return self

    @property
    def cost_of_goods(self) -> float:
        return sum(item.line_cost for item in self.items)


class Sale(NewSale, Record):
    """A persisted sale."""
