"""Project definition loading."""

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from ..domain.entities import OrderCustomPropertiesInfo
from ..domain.exceptions import ConfigurationError
from ..domain.services.order_property_catalog import (
    PropertyFilter,
    export_order_properties,
)
from ..domain.value_objects import (
    AddressField,
    CapacityInfo,
    OrderCustomProperty,
    OrderPropertyInfo,
)
from ..logging_config import get_logger

logger = get_logger("config")

PROJECT_PATH_ENV_VAR = "ORDER_PROPERTIES_PROJECT"
DEFAULT_PROJECT_FILE = "order_properties.json"


class ProjectConfig(BaseModel):
    """Property sources defined by a route-planning project."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    capacities: tuple[CapacityInfo, ...] = ()
    custom_properties: tuple[OrderCustomProperty, ...] = ()
    address_fields: tuple[AddressField, ...] = ()

    def custom_properties_info(self) -> OrderCustomPropertiesInfo:
        """Get the custom properties as a read-only collection."""
        return OrderCustomPropertiesInfo(self.custom_properties).clone()

    def export_order_properties(
        self, exclude: PropertyFilter | None = None
    ) -> list[OrderPropertyInfo]:
        """Get the exported order property catalog of this project."""
        return export_order_properties(
            self.capacities,
            self.custom_properties_info(),
            self.address_fields,
            exclude=exclude,
        )


def default_project_path() -> Path:
    """Get the project file path from the environment or the working directory."""
    return Path(os.environ.get(PROJECT_PATH_ENV_VAR) or DEFAULT_PROJECT_FILE)


def load_project_config(path: str | Path | None = None) -> ProjectConfig:
    """
    Load a project definition from a JSON file.

    Args:
        path: Project file; defaults to default_project_path()

    Returns:
        Parsed project configuration

    Raises:
        ConfigurationError: If the file cannot be read, parsed or validated
    """
    project_path = Path(path) if path is not None else default_project_path()
    logger.debug(f"Loading project definition from {project_path}")

    try:
        with open(project_path, encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read project file {project_path}: {e}"
        ) from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(
            f"Project file {project_path} is not valid JSON: {e}"
        ) from e

    try:
        config = ProjectConfig.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Project file {project_path} is invalid: {e}"
        ) from e

    logger.debug(
        f"Loaded {len(config.capacities)} capacities, "
        f"{len(config.custom_properties)} custom properties, "
        f"{len(config.address_fields)} address fields"
    )
    return config
