"""
Domain exceptions for the point-of-sale core.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class POSError(Exception):
    """Base exception for all retailpos errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for display or export."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(POSError):
    """Base exception for storage operations."""

    pass


class EntityNotFoundError(StorageError):
    """Record not found in a collection."""

    def __init__(self, collection: str, entity_id: str, code: str = "ENTITY_NOT_FOUND"):
        super().__init__(
            f"{collection} record not found: {entity_id}",
            code=code,
            details={"collection": collection, "id": entity_id},
        )


class ProductNotFoundError(EntityNotFoundError):
    """Product not found."""

    def __init__(self, product_id: str):
        super().__init__("products", product_id, code="PRODUCT_NOT_FOUND")


class SaleNotFoundError(EntityNotFoundError):
    """Sale not found."""

    def __init__(self, sale_id: str):
        super().__init__("sales", sale_id, code="SALE_NOT_FOUND")


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(POSError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InsufficientStockError(ValidationError):
    """Requested quantity exceeds what is on the shelf."""

    def __init__(self, product_id: str, requested: int, available: int):
        super().__init__(
            field="quantity",
            message=f"Insufficient stock for {product_id}: need {requested}, have {available}",
            value=requested,
        )
        self.code = "INSUFFICIENT_STOCK"
        self.details.update(
            {
                "product_id": product_id,
                "requested": requested,
                "available": available,
            }
        )
