"""Product catalog entity."""

from pydantic import Field

from retailpos.core.entities.base import DomainModel, Record


class ProductFields(DomainModel):
    """Product data supplied by catalog management."""

    name: str = Field(min_length=1)
    purchase_price: float = Field(default=0.0, ge=0)
    selling_price: float = Field(default=0.0, ge=0)
    barcode: str = ""
    quantity_in_stock: int = 0


class Product(ProductFields, Record):
    """A product on the shelf.

    ``quantity_in_stock`` only moves through the product ledger.
    """
