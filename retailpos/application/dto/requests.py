"""
Request DTOs for application use cases.

Pydantic models validating what callers hand to the core.
"""

from pydantic import BaseModel, Field

from retailpos.config import get_settings
from retailpos.core.entities import (
    AdjustmentKind,
    NewSale,
    SaleItem,
    SaleStatus,
    StockAdjustment,
)
from retailpos.core.exceptions import ValidationError


class SaleItemRequest(BaseModel):
    """One cart line."""

    product_id: str = Field(..., description="Product to sell")
    product_name: str = Field(..., description="Name shown on the receipt")
    quantity: int = Field(..., gt=0, description="Units sold")
    price: float = Field(..., ge=0, description="Unit selling price at sale time")
    purchase_price: float = Field(
        default=0.0, ge=0, description="Unit cost at sale time"
    )


class CreateSaleRequest(BaseModel):
    """Checkout of a cart."""

    items: list[SaleItemRequest] = Field(..., min_length=1, description="Cart lines")
    discount: float = Field(default=0.0, ge=0, description="Discount off the total")
    status: SaleStatus = Field(
        default=SaleStatus.PENDING, description="Initial status (any is accepted)"
    )
    customer_id: str | None = Field(default=None, description="Known customer")
    customer_name: str = Field(default="", description="Customer name snapshot")
    employee_id: str | None = Field(default=None, description="Cashier")
    employee_name: str = Field(default="", description="Cashier name snapshot")
    notes: str | None = Field(default=None, description="Free-form notes")

    def to_new_sale(self) -> NewSale:
        return NewSale(
            items=[SaleItem(**item.model_dump()) for item in self.items],
            discount=self.discount,
            status=self.status,
            customer_id=self.customer_id,
            customer_name=self.customer_name or get_settings().pos.walk_in_customer_name,
            employee_id=self.employee_id,
            employee_name=self.employee_name,
            notes=self.notes,
        )


class UpdateSaleStatusRequest(BaseModel):
    """Move a sale to another status."""

    sale_id: str = Field(..., description="Sale to update")
    status: SaleStatus = Field(..., description="Target status")


class AdjustInventoryRequest(BaseModel):
    """Manual stock-in or stock-take."""

    product_id: str = Field(..., description="Product to adjust")
    product_name: str | None = Field(
        default=None, description="Name for the log; defaults to the product's"
    )
    kind: AdjustmentKind = Field(..., description="StockIn adds, StockTake sets")
    quantity: int = Field(..., description="Added units, or counted level for StockTake")

    def to_adjustment(self) -> StockAdjustment:
        return StockAdjustment(kind=self.kind, quantity=self.quantity)


class BulkCustomer(BaseModel):
    name: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)


class BulkOrderRequest(BaseModel):
    """One pending order of the same product for each listed customer."""

    product_id: str = Field(..., description="Product every order contains")
    customers: list[BulkCustomer] = Field(..., min_length=1)
    quantity_per_order: int = Field(default=1, gt=0)
    discount_per_order: float = Field(default=0.0, ge=0)
    employee_id: str = Field(..., description="Employee credited with the orders")

    @classmethod
    def from_lines(
        cls,
        product_id: str,
        names: str,
        phones: str,
        employee_id: str,
        quantity_per_order: int = 1,
        discount_per_order: float = 0.0,
    ) -> "BulkOrderRequest":
        """Build from newline-separated names and phones, paired by line."""
        name_list = [n.strip() for n in names.splitlines() if n.strip()]
        phone_list = [p.strip() for p in phones.splitlines() if p.strip()]
        if len(name_list) != len(phone_list):
            raise ValidationError(
                "customers",
                f"{len(name_list)} names but {len(phone_list)} phones",
            )
        return cls(
            product_id=product_id,
            customers=[
                BulkCustomer(name=n, phone=p) for n, p in zip(name_list, phone_list)
            ],
            employee_id=employee_id,
            quantity_per_order=quantity_per_order,
            discount_per_order=discount_per_order,
        )

