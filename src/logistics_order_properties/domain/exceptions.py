"""Domain exception hierarchy."""


class OrderPropertyError(Exception):
    """Base class for all order property domain errors."""


class InvalidArgumentError(OrderPropertyError, ValueError):
    """Raised when an argument violates a domain precondition."""

    def __init__(self, argument: str, message: str):
        self.argument = argument
        super().__init__(f"{argument}: {message}")


class ReadOnlyCollectionError(OrderPropertyError):
    """Raised when modifying a collection that has been made read-only."""


class ConfigurationError(OrderPropertyError):
    """Raised when a project definition cannot be loaded."""
