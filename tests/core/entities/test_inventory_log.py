"""Tests for inventory log and product entities."""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError

from retailpos.core.entities import (
    InventoryLog,
    InventoryLogEntry,
    InventoryLogType,
    Product,
    ProductFields,
)


class TestInventoryLog:
    def test_type_is_stored_under_type_key(self):
        log = InventoryLog(
            id="l1",
            created_at=datetime(2024, 5, 1, tzinfo=UTC),
            product_id="p1",
            product_name="Widget",
            quantity_change=-3,
            new_quantity=7,
            log_type=InventoryLogType.SALE,
            sale_id="s1",
        )
        record = log.to_record()

        assert record["type"] == "Sale"
        assert record["quantityChange"] == -3
        assert record["newQuantity"] == 7
        assert record["saleId"] == "s1"
        assert "logType" not in record

    def test_entry_accepts_stored_alias(self):
        entry = InventoryLogEntry.model_validate(
            {
                "productId": "p1",
                "productName": "Widget",
                "quantityChange": 5,
                "newQuantity": 15,
                "type": "StockIn",
            }
        )
        assert entry.log_type is InventoryLogType.STOCK_IN
        assert entry.sale_id is None

    def test_unknown_type_rejected(self):
        with pytest.raises(ValidationError):
            InventoryLogEntry(
                product_id="p1",
                product_name="Widget",
                quantity_change=1,
                new_quantity=1,
                log_type="Shrinkage",
            )

    def test_localized_type_labels_accepted(self):
        entry = InventoryLogEntry.model_validate(
            {
                "productId": "p1",
                "productName": "Widget",
                "quantityChange": 4,
                "newQuantity": 4,
                "type": "NHẬP HÀNG",
            }
        )
        assert entry.log_type is InventoryLogType.STOCK_IN
        assert entry.to_record()["type"] == "StockIn"
        assert InventoryLogType("SỬA ĐƠN HÀNG") is InventoryLogType.ADJUSTMENT


class TestRecordTimestamps:
    def test_naive_timestamp_treated_as_utc(self):
        product = Product(id="p1", name="Widget", created_at=datetime(2024, 5, 1, 12, 0))
        assert product.created_at.tzinfo is UTC
        assert product.created_at.hour == 12


class TestProductFields:
    def test_defaults(self):
        fields = ProductFields(name="Widget")
        assert fields.quantity_in_stock == 0
        assert fields.barcode == ""

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ProductFields(name="")

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            ProductFields(name="Widget", selling_price=-1)
