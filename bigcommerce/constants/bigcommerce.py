"""Constants for BigCommerce product resources."""

from enum import Enum


class ProductType(str, Enum):
    """BigCommerce product type constants."""
    PHYSICAL = "physical"
    DIGITAL = "digital"


class InventoryType(str, Enum):
    """Type of inventory tracking for a product."""
    NONE = "none"      # Levels are not tracked
    SIMPLE = "simple"  # Tracked with inventory_level / inventory_warning_level
    SKU = "sku"        # Tracked per product option (SKU)


class EventDateFieldType(str, Enum):
    """Event/delivery date requirement for a product."""
    NONE = "none"      # No event date field
    AFTER = "after"    # On or after event_date_start
    BEFORE = "before"  # On or before event_date_end
    RANGE = "range"    # Between event_date_start and event_date_end


class ProductAvailability(str, Enum):
    """Storefront availability of a product."""
    AVAILABLE = "available"
    DISABLED = "disabled"  # Listed, but cannot be purchased
    PREORDER = "preorder"
