"""Product ledger: the only writer of ``Product.quantity_in_stock``."""

from retailpos.config import get_logger
from retailpos.core.entities.product import Product
from retailpos.core.exceptions import ProductNotFoundError
from retailpos.core.interfaces.entity_store import IEntityStore

logger = get_logger(__name__)


class ProductLedger:
    """
    Sets stock levels on products.

    The ledger does not know why stock changed and never writes audit
    entries; callers pair every ``set_stock`` with an inventory log append.
    """

    def __init__(self, products: IEntityStore[Product]) -> None:
        self._products = products

    async def get(self, product_id: str) -> Product | None:
        return await self._products.get_by_id(product_id)

    async def require(self, product_id: str) -> Product:
        """Get a product or raise ProductNotFoundError."""
        product = await self._products.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def set_stock(self, product_id: str, new_quantity: int) -> Product:
        """Persist a new stock level for a product."""
        product = await self.require(product_id)
        updated = await self._products.update(
            product_id, {"quantity_in_stock": new_quantity}
        )
        logger.debug(
            "stock_set",
            product_id=product_id,
            old_quantity=product.quantity_in_stock,
            new_quantity=new_quantity,
        )
        return updated
