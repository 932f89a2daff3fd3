"""Logging setup shared by the library and the CLI."""

import logging
import sys

ROOT_LOGGER_NAME = "logistics_order_properties"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger(name: str) -> logging.Logger:
    """Get a logger namespaced under the package logger.

    Args:
        name: Short component name, e.g. ``"cli"``

    Returns:
        Logger named ``logistics_order_properties.<name>``
    """
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: int = logging.WARNING) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this again replaces the handler instead of adding a second one.

    Args:
        level: Logging level for the package logger and its handler

    Returns:
        The configured package logger
    """
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)

    # stderr may have been swapped since the last call
    for existing in list(root_logger.handlers):
        if getattr(existing, "_order_properties", False):
            root_logger.removeHandler(existing)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    handler._order_properties = True  # type: ignore[attr-defined]
    root_logger.addHandler(handler)
    return root_logger
