from bigcommerce.services.products import decode_product, encode_product, parse_product

__all__ = [
    "decode_product",
    "encode_product",
    "parse_product",
]
