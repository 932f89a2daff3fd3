"""Domain entities package."""

from .order_custom_properties_info import OrderCustomPropertiesInfo

__all__ = ["OrderCustomPropertiesInfo"]
