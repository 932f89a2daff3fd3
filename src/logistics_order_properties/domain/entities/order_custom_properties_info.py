"""Collection of the custom order properties defined for a project."""

from collections.abc import Iterable, Iterator

from ...logging_config import get_logger
from ..exceptions import InvalidArgumentError, ReadOnlyCollectionError
from ..value_objects import OrderCustomProperty

logger = get_logger("domain.custom_properties")


class OrderCustomPropertiesInfo:
    """
    Ordered collection of custom order property definitions.

    The position of a property in the collection determines its synthetic
    order property name (``OrderCustomProperty0``, ``OrderCustomProperty1``,
    ...). A collection can be frozen by cloning it; the clone rejects every
    modification with ReadOnlyCollectionError.
    """

    def __init__(self, properties: Iterable[OrderCustomProperty] | None = None):
        """Initialize the collection, optionally adding the given properties."""
        self._properties: list[OrderCustomProperty] = []
        self._total_length = 0
        self._is_read_only = False

        for item in properties or ():
            self.add(item)

    @property
    def is_read_only(self) -> bool:
        """Whether the collection rejects modification."""
        return self._is_read_only

    @property
    def total_length(self) -> int:
        """Sum of the lengths of all properties ever added."""
        return self._total_length

    def add(self, item: OrderCustomProperty) -> None:
        """Append a property definition.

        Args:
            item: Property to append

        Raises:
            InvalidArgumentError: If item is None or not a custom property
            ReadOnlyCollectionError: If the collection is read-only
        """
        if item is None:
            raise InvalidArgumentError("item", "must not be None")
        if not isinstance(item, OrderCustomProperty):
            raise InvalidArgumentError(
                "item", f"expected OrderCustomProperty, got {type(item).__name__}"
            )
        self._ensure_writable()

        self._total_length += item.length
        self._properties.append(item)
        logger.debug(f"Added custom order property {item.name!r}")

    def remove(self, item: OrderCustomProperty) -> bool:
        """Remove a property definition.

        Returns:
            True if the property was found and removed, False otherwise
        """
        self._ensure_writable()
        try:
            self._properties.remove(item)
        except ValueError:
            return False
        return True

    def clear(self) -> None:
        """Remove every property definition."""
        self._ensure_writable()
        self._properties.clear()

    def clone(self) -> "OrderCustomPropertiesInfo":
        """Return a read-only copy of this collection."""
        copy = OrderCustomPropertiesInfo()
        copy._properties = list(self._properties)
        copy._total_length = self._total_length
        copy._is_read_only = True
        return copy

    def _ensure_writable(self) -> None:
        if self._is_read_only:
            raise ReadOnlyCollectionError(
                "Custom order properties collection is read-only"
            )

    def __len__(self) -> int:
        return len(self._properties)

    def __iter__(self) -> Iterator[OrderCustomProperty]:
        return iter(self._properties)

    def __getitem__(self, index: int) -> OrderCustomProperty:
        return self._properties[index]

    def __contains__(self, item: object) -> bool:
        return item in self._properties

    def __repr__(self) -> str:
        names = ", ".join(p.name for p in self._properties)
        return f"OrderCustomPropertiesInfo([{names}], read_only={self._is_read_only})"
