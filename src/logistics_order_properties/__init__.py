"""Order property catalog for a route-planning logistics domain model."""

from importlib.metadata import PackageNotFoundError, version

__version__ = "0.1.0"


def get_version() -> str:
    """Get the installed package version, falling back to the source version."""
    try:
        return version("logistics-order-properties")
    except PackageNotFoundError:
        return __version__
