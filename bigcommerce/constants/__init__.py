from bigcommerce.constants.bigcommerce import (
    EventDateFieldType,
    InventoryType,
    ProductAvailability,
    ProductType,
)

__all__ = [
    "EventDateFieldType",
    "InventoryType",
    "ProductAvailability",
    "ProductType",
]
