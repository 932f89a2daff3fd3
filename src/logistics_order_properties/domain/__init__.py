"""Domain layer: value objects, exceptions and catalog services."""
