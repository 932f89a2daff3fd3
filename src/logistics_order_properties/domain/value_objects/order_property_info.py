"""Name and title of a single order property."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from ..exceptions import InvalidArgumentError


def require_text(value: object, argument: str) -> str:
    """Check that a value is a string with at least one non-whitespace character.

    Args:
        value: Value to check
        argument: Argument name reported in the error

    Returns:
        The value unchanged

    Raises:
        InvalidArgumentError: If the value is None, not a string, or blank
    """
    if value is None:
        raise InvalidArgumentError(argument, "must not be None")
    if not isinstance(value, str):
        raise InvalidArgumentError(
            argument, f"must be a string, got {type(value).__name__}"
        )
    if not value.strip():
        raise InvalidArgumentError(argument, "must not be empty or whitespace")
    return value


class OrderPropertyInfo(BaseModel):
    """
    Immutable pairing of an order property's name and title.

    ``name`` is the machine-readable key (e.g. ``"OrderCustomProperty0"``) and
    ``title`` the label shown to users. Both are required to be non-blank;
    values are stored verbatim. Instances compare and hash by value.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    name: str
    title: str

    @field_validator("name", "title")
    @classmethod
    def _check_not_blank(cls, value: str, info: ValidationInfo) -> str:
        return require_text(value, info.field_name)

    @classmethod
    def create(cls, name: str, title: str) -> "OrderPropertyInfo":
        """
        Create a validated order property info.

        Args:
            name: Machine-readable property name
            title: Human-readable property title

        Returns:
            New instance holding the given name and title

        Raises:
            InvalidArgumentError: If either argument is None or blank
        """
        require_text(name, "name")
        require_text(title, "title")
        return cls(name=name, title=title)

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "OrderPropertyInfo":
        """Copy the instance, validating any updated fields."""
        if not update:
            return super().model_copy(deep=deep)
        return self.model_validate({**self.model_dump(), **update})

    def __str__(self) -> str:
        return f"{self.name} ({self.title})"
