"""Domain value objects package.

Value objects are immutable objects that represent concepts without identity.
They encapsulate validation rules and provide behavior related to their data.
"""

from .order_property_info import OrderPropertyInfo, require_text
from .property_sources import (
    AddressField,
    CapacityInfo,
    OrderCustomProperty,
    OrderCustomPropertyType,
)

__all__ = [
    "AddressField",
    "CapacityInfo",
    "OrderCustomProperty",
    "OrderCustomPropertyType",
    "OrderPropertyInfo",
    "require_text",
]
