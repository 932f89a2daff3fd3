"""Project-level definitions that order properties are derived from."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .order_property_info import require_text

DEFAULT_CUSTOM_PROPERTY_LENGTH = 50


class OrderCustomPropertyType(str, Enum):
    """Value type of a custom order property."""

    TEXT = "text"
    NUMERIC = "numeric"


class CapacityInfo(BaseModel):
    """A capacity tracked for every order, such as weight or volume."""

    model_config = ConfigDict(frozen=True)

    name: str
    display_units: str = ""

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return require_text(value, "name")


class OrderCustomProperty(BaseModel):
    """A user-defined attribute attached to every order of a project."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: OrderCustomPropertyType = OrderCustomPropertyType.TEXT
    length: int = Field(default=DEFAULT_CUSTOM_PROPERTY_LENGTH, gt=0)
    description: str = ""
    order_pair_key: bool = False

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        return require_text(value, "name")


class AddressField(BaseModel):
    """A geocoder address field, e.g. type ``"City"`` shown as ``"City"``."""

    model_config = ConfigDict(frozen=True)

    type: str
    title: str

    @field_validator("type", "title")
    @classmethod
    def _check_text(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info.field_name)
