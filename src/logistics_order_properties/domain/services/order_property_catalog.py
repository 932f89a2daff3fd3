"""Builds the order property catalog from a project's property sources."""

from collections.abc import Callable, Iterable

from ...logging_config import get_logger
from ..exceptions import InvalidArgumentError
from ..property_names import get_capacity_property_name, get_custom_property_name
from ..value_objects import (
    AddressField,
    CapacityInfo,
    OrderCustomProperty,
    OrderPropertyInfo,
)

logger = get_logger("domain.catalog")

PropertyFilter = Callable[[str], bool]


def _require_collection(value: object, argument: str) -> None:
    if value is None:
        raise InvalidArgumentError(argument, "must not be None")


def properties_info_for_capacities(
    capacities: Iterable[CapacityInfo],
) -> list[OrderPropertyInfo]:
    """
    Get order property info for each capacity.

    Args:
        capacities: Capacities defined for the project

    Returns:
        One info per capacity named ``Capacity<i>`` and titled by the capacity name

    Raises:
        InvalidArgumentError: If capacities is None
    """
    _require_collection(capacities, "capacities")
    return [
        OrderPropertyInfo.create(get_capacity_property_name(index), info.name)
        for index, info in enumerate(capacities)
    ]


def properties_info_for_custom_properties(
    custom_properties: Iterable[OrderCustomProperty],
) -> list[OrderPropertyInfo]:
    """
    Get order property info for each custom order property.

    Args:
        custom_properties: Custom order properties defined for the project

    Returns:
        One info per property named ``OrderCustomProperty<i>`` and titled by
        the custom property name

    Raises:
        InvalidArgumentError: If custom_properties is None
    """
    _require_collection(custom_properties, "custom_properties")
    return [
        OrderPropertyInfo.create(get_custom_property_name(index), info.name)
        for index, info in enumerate(custom_properties)
    ]


def properties_info_for_address_fields(
    address_fields: Iterable[AddressField],
) -> list[OrderPropertyInfo]:
    """Get order property info for each address field, named by field type."""
    _require_collection(address_fields, "address_fields")
    return [
        OrderPropertyInfo.create(field.type, field.title) for field in address_fields
    ]


def export_order_properties(
    capacities: Iterable[CapacityInfo],
    custom_properties: Iterable[OrderCustomProperty],
    address_fields: Iterable[AddressField],
    exclude: PropertyFilter | None = None,
) -> list[OrderPropertyInfo]:
    """
    Collect every order property that should be exported.

    Address fields come first, followed by capacities and custom properties.

    Args:
        capacities: Capacities defined for the project
        custom_properties: Custom order properties defined for the project
        address_fields: Geocoder address fields
        exclude: Predicate returning True for property names to leave out

    Returns:
        Order property info for every exported property
    """
    catalog = [
        *properties_info_for_address_fields(address_fields),
        *properties_info_for_capacities(capacities),
        *properties_info_for_custom_properties(custom_properties),
    ]
    exported = [
        info for info in catalog if exclude is None or not exclude(info.name)
    ]

    logger.debug(f"Exporting {len(exported)} of {len(catalog)} order properties")
    return exported
