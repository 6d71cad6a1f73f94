from bigcommerce.schemas.products import (
    BCBrand,
    BCResource,
    DateRFC2822,
    ParsedProduct,
    Product,
    ProductImage,
)

__all__ = [
    "BCBrand",
    "BCResource",
    "DateRFC2822",
    "ParsedProduct",
    "Product",
    "ProductImage",
]
