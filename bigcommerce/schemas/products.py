"""
Pydantic schemas for the BigCommerce (API v2) Product resource.

Every field is optional: the API omits or nulls most of them depending on the
store configuration, and documents are re-encoded with `exclude_none=True`.
"""
import json
from datetime import datetime
from typing import Annotated, Any, List, Optional, Union

from pydantic import BaseModel, BeforeValidator, Field, PlainSerializer

from bigcommerce.constants.bigcommerce import (
    EventDateFieldType,
    InventoryType,
    ProductAvailability,
    ProductType,
)
from bigcommerce.core.config import settings
from bigcommerce.utils.date_helpers import (
    DecodeOutcome,
    marshal_epoch,
    unmarshal_rfc2822,
)


def _decode_date(value: Any) -> Optional[datetime]:
    """
    Re-serialize the decoded JSON value and run it through the date codec.

    Pydantic only hands over the decoded value, so the length checked by
    unmarshal_rfc2822 is that of the re-serialized token, not the bytes in
    the document. A string written with escapes (e.g. "\\u0031\\u0032")
    is measured by its unescaped form and may be skipped as too short.
    Bytes values are passed to the codec untouched.
    """
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, (bytes, bytearray)):
        token = bytes(value)
    else:
        try:
            token = json.dumps(value, ensure_ascii=False).encode("utf-8")
        except TypeError as e:
            raise ValueError(f"unsupported date value {value!r}") from e

    result = unmarshal_rfc2822(token)
    # The codec already logs the format error; lenient mode keeps its fallback.
    if result.outcome is DecodeOutcome.FORMAT_ERROR and settings.strict_dates:
        raise ValueError(str(result.error))
    return result.value


def _encode_date(value: datetime) -> Union[int, str]:
    # Epoch seconds as a JSON number, or the ",omitempty" string sentinel.
    return json.loads(marshal_epoch(value))


DateRFC2822 = Annotated[
    Optional[datetime],
    BeforeValidator(_decode_date),
    PlainSerializer(_encode_date, when_used="json-unless-none"),
]


# ==================== SHARED RESOURCES ====================

class BCResource(BaseModel):
    """Link to a BigCommerce sub-resource endpoint"""
    url: Optional[str] = None
    resource: Optional[str] = None


class BCBrand(BaseModel):
    """BigCommerce brand object"""
    id: Optional[int] = None
    name: Optional[str] = None
    page_title: Optional[str] = None
    meta_keywords: Optional[str] = None
    meta_description: Optional[str] = None
    image_file: Optional[str] = None
    search_keywords: Optional[str] = None


class ProductImage(BaseModel):
    """Product thumbnail image with its URLs at different sizes"""
    id: Optional[int] = None
    zoom_url: Optional[str] = None
    thumbnail_url: Optional[str] = None
    standard_url: Optional[str] = None
    tiny_url: Optional[str] = None


# ==================== PRODUCT ====================

class Product(BaseModel):
    """BigCommerce Product object"""

    # Identity
    id: Optional[int] = Field(None, description="Sequential numeric product ID")
    keyword_filter: Optional[str] = Field(None, description="Deprecated")
    name: Optional[str] = None
    type: Optional[ProductType] = None
    sku: Optional[str] = None
    upc: Optional[str] = None
    bin_picking_number: Optional[str] = None
    condition: Optional[str] = Field(None, description="New, Used, Refurbished")
    is_condition_shown: Optional[bool] = None

    # Descriptions
    description: Optional[str] = None
    search_keywords: Optional[str] = Field(None, description="Comma-separated search keywords")
    availability_description: Optional[str] = None
    warranty: Optional[str] = None

    # Prices (decimal text as sent by the API)
    price: Optional[str] = None
    cost_price: Optional[str] = None
    retail_price: Optional[str] = None
    sale_price: Optional[str] = None
    calculated_price: Optional[str] = Field(None, description="Read-only")
    fixed_cost_shipping_price: Optional[str] = None
    is_free_shipping: Optional[bool] = None
    is_price_hidden: Optional[bool] = None
    price_hidden_label: Optional[str] = None
    tax_class_id: Optional[int] = None
    avalara_product_tax_code: Optional[str] = None

    # Storefront
    sort_order: Optional[int] = None
    is_visible: Optional[bool] = None
    is_featured: Optional[bool] = None
    related_products: Optional[str] = Field(None, description="-1 for automatic, or comma-separated IDs")
    availability: Optional[ProductAvailability] = None
    categories: Optional[List[int]] = None
    brand_id: Optional[int] = None
    layout_file: Optional[str] = None
    custom_url: Optional[str] = None
    page_title: Optional[str] = None
    meta_keywords: Optional[str] = None
    meta_description: Optional[str] = None

    # Inventory
    inventory_level: Optional[int] = None
    inventory_warning_level: Optional[int] = None
    inventory_tracking: Optional[InventoryType] = None
    order_quantity_minimum: Optional[int] = None
    order_quantity_maximum: Optional[int] = None

    # Dimensions
    weight: Optional[str] = None
    width: Optional[str] = None
    height: Optional[str] = None
    depth: Optional[str] = None

    # Statistics
    rating_total: Optional[int] = None
    rating_count: Optional[int] = None
    total_sold: Optional[int] = None
    view_count: Optional[int] = None

    # Dates
    date_created: DateRFC2822 = None
    date_modified: DateRFC2822 = None
    date_last_imported: DateRFC2822 = None

    # Event / delivery date
    event_date_field_name: Optional[str] = None
    event_date_type: Optional[EventDateFieldType] = None
    event_date_start: DateRFC2822 = None
    event_date_end: DateRFC2822 = None

    # Pre-orders
    preorder_release_date: DateRFC2822 = None
    is_preorder_only: Optional[bool] = None
    preorder_message: Optional[str] = Field(None, description="May contain the %%DATE%% placeholder")

    # Accounting
    myob_asset_account: Optional[str] = None
    myob_income_account: Optional[str] = None
    myob_expense_account: Optional[str] = None
    peachtree_gl_account: Optional[str] = None

    # Open Graph
    open_graph_type: Optional[str] = None
    open_graph_title: Optional[str] = None
    open_graph_description: Optional[str] = None
    is_open_graph_thumbnail: Optional[bool] = None

    # Option set
    option_set_id: Optional[int] = None
    option_set_display: Optional[str] = None

    # Sub-resources
    primary_image: Optional[ProductImage] = None
    brand: Optional[BCResource] = None
    images: Optional[BCResource] = None
    discount_rules: Optional[BCResource] = None
    configurable_fields: Optional[BCResource] = None
    custom_fields: Optional[BCResource] = None
    videos: Optional[BCResource] = None
    skus: Optional[BCResource] = None
    rules: Optional[BCResource] = None
    option_set: Optional[BCResource] = None
    options: Optional[BCResource] = None
    tax_class: Optional[BCResource] = None


class ParsedProduct(Product):
    """Product with its brand resource expanded into brand objects"""
    brand: Optional[List[BCBrand]] = None

    @classmethod
    def from_product(cls, product: Product, brands: List[BCBrand]):
        data = product.model_dump(exclude={"brand"}, exclude_unset=True)
        data["brand"] = brands
        return cls.model_validate(data)
