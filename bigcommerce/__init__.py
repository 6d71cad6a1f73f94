"""Typed models for the BigCommerce Product API resource."""

from bigcommerce.constants import (
    EventDateFieldType,
    InventoryType,
    ProductAvailability,
    ProductType,
)
from bigcommerce.schemas import (
    BCBrand,
    BCResource,
    DateRFC2822,
    ParsedProduct,
    Product,
    ProductImage,
)
from bigcommerce.services import decode_product, encode_product, parse_product

__all__ = [
    "BCBrand",
    "BCResource",
    "DateRFC2822",
    "EventDateFieldType",
    "InventoryType",
    "ParsedProduct",
    "Product",
    "ProductAvailability",
    "ProductImage",
    "ProductType",
    "decode_product",
    "encode_product",
    "parse_product",
]
