"""Synthetic names of order properties backed by indexed collections.

Capacities and custom order properties are stored per order as indexed
values, so the order exposes them under generated names: ``Capacity0``,
``Capacity1``, ... and ``OrderCustomProperty0``, ``OrderCustomProperty1``, ...
"""

from .exceptions import InvalidArgumentError

CUSTOM_PROPERTY_NAME_BASE = "OrderCustomProperty"
CAPACITY_PROPERTY_NAME_BASE = "Capacity"


def _make_name(base: str, index: int) -> str:
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError("index", "must be an integer")
    if index < 0:
        raise InvalidArgumentError("index", f"must not be negative, got {index}")
    return f"{base}{index}"


def _parse_index(base: str, name: str) -> int:
    if not isinstance(name, str) or not name.startswith(base):
        return -1
    suffix = name[len(base) :]
    if not (suffix.isascii() and suffix.isdigit()):
        return -1
    return int(suffix)


def get_custom_property_name(index: int) -> str:
    """Get the order property name of the custom property at ``index``."""
    return _make_name(CUSTOM_PROPERTY_NAME_BASE, index)


def get_custom_property_index(name: str) -> int:
    """Get the custom property index encoded in ``name``, or -1 if there is none."""
    return _parse_index(CUSTOM_PROPERTY_NAME_BASE, name)


def get_capacity_property_name(index: int) -> str:
    """Get the order property name of the capacity at ``index``."""
    return _make_name(CAPACITY_PROPERTY_NAME_BASE, index)


def get_capacity_property_index(name: str) -> int:
    """Get the capacity index encoded in ``name``, or -1 if there is none."""
    return _parse_index(CAPACITY_PROPERTY_NAME_BASE, name)
