"""JSON document helpers for BigCommerce products."""

import logging
from typing import List, Optional, Union

from bigcommerce.schemas.products import BCBrand, ParsedProduct, Product

__logger__ = logging.getLogger(__name__)


def decode_product(data: Union[str, bytes]) -> Product:
    """
    Decode a BigCommerce product JSON document.

    Args:
        data: JSON document as returned by the products endpoint

    Returns:
        Product object

    Raises:
        pydantic.ValidationError: If the document is malformed, a field has
            the wrong type, or a date is not RFC 2822 text in strict mode
    """
    product = Product.model_validate_json(data)
    __logger__.debug(f"Decoded product {product.id} ({product.name})")
    return product


def encode_product(product: Product) -> str:
    """
    Encode a product back to JSON.

    Unset fields are omitted and dates are written as epoch seconds, so the
    output is not byte-for-byte the document the product was decoded from.
    """
    return product.model_dump_json(exclude_none=True)


def parse_product(
    data: Union[str, bytes],
    brands: Optional[List[BCBrand]] = None
) -> ParsedProduct:
    """
    Decode a product document and attach its expanded brands.

    Args:
        data: JSON document as returned by the products endpoint
        brands: Brand objects replacing the product's brand resource link

    Returns:
        ParsedProduct object
    """
    product = decode_product(data)
    if brands is None:
        __logger__.info(f"Product {product.id} has NO expanded brands")
        brands = []
    return ParsedProduct.from_product(product, brands)
