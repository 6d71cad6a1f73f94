"""
Tests for the BigCommerce constant sets.
"""
import pytest

from bigcommerce.constants.bigcommerce import (
    EventDateFieldType,
    InventoryType,
    ProductAvailability,
    ProductType,
)
from bigcommerce.schemas.products import Product


def test_constant_values():
    assert ProductType.PHYSICAL == "physical"
    assert ProductType.DIGITAL == "digital"
    assert InventoryType.NONE == "none"
    assert InventoryType.SIMPLE == "simple"
    assert InventoryType.SKU == "sku"
    assert EventDateFieldType.AFTER == "after"
    assert EventDateFieldType.BEFORE == "before"
    assert EventDateFieldType.RANGE == "range"
    assert ProductAvailability.DISABLED == "disabled"
    assert ProductAvailability.PREORDER == "preorder"


@pytest.mark.parametrize("field, enum", [
    ("type", ProductType),
    ("inventory_tracking", InventoryType),
    ("event_date_type", EventDateFieldType),
    ("availability", ProductAvailability),
])
def test_every_value_decodes(field, enum):
    for member in enum:
        product = Product.model_validate_json(f'{{"{field}": "{member.value}"}}')
        assert getattr(product, field) is member
        assert product.model_dump_json(exclude_none=True) == f'{{"{field}":"{member.value}"}}'
