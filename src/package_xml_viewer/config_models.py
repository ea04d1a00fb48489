"""
Pydantic model for the viewer's run configuration.

Option strings coming from the command line are mapped onto the closed
``OutputFormat`` / ``SortPolicy`` enums here and nowhere else; the core only
ever sees enum members.
"""

from enum import Enum
from typing import Any, Dict, Type

from pydantic import BaseModel, Field, ValidationError, field_validator

from package_xml_viewer.exceptions import InvalidOptionError
from package_xml_viewer.models import OutputFormat, SortPolicy

# Alias -> (command-line option, enum of allowed values)
_OPTION_CHOICES: Dict[str, tuple] = {
    "format": ("--format", OutputFormat),
    "sort": ("--sort", SortPolicy),
}


def allowed_values(enum_cls: Type[Enum]) -> list:
    """Option strings accepted for an enum, in declaration order."""
    return [member.value for member in enum_cls]


class ViewerConfig(BaseModel):
    """Options threaded through one parse-sort-render pass."""
    output_format: OutputFormat = Field(
        OutputFormat.TABLE, alias="format", description="Output format"
    )
    sort_policy: SortPolicy = Field(
        SortPolicy.BY_TYPE, alias="sort", description="Component ordering"
    )
    split_parent: bool = Field(
        False, description="Split Parent.Member names of parent-scoped types into two columns"
    )

    model_config = {"populate_by_name": True, "frozen": True, "extra": "forbid"}

    @field_validator("output_format", "sort_policy", mode="before")
    @classmethod
    def normalize_option(cls, value: Any) -> Any:
        """Accept option strings case-insensitively, with '_' for '-'."""
        if isinstance(value, str):
            return value.strip().lower().replace("_", "-")
        return value

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ViewerConfig":
        """
        Create ViewerConfig from a dictionary.

        Raises:
            ValidationError: If configuration is invalid
        """
        return cls.model_validate(config_dict)

    @classmethod
    def from_options(
        cls,
        output_format: Any = OutputFormat.TABLE,
        sort_policy: Any = SortPolicy.BY_TYPE,
        split_parent: bool = False,
    ) -> "ViewerConfig":
        """
        Build a config from raw command-line option values.

        Raises:
            InvalidOptionError: If a value is not one of the allowed choices
        """
        raw = {"format": output_format, "sort": sort_policy, "split_parent": split_parent}
        try:
            return cls.from_dict(raw)
        except ValidationError as e:
            error = e.errors()[0]
            key = str(error["loc"][0]) if error["loc"] else ""
            if key in _OPTION_CHOICES:
                option, enum_cls = _OPTION_CHOICES[key]
                raise InvalidOptionError(option, raw[key], allowed_values(enum_cls)) from e
            option = f"--{key.replace('_', '-')}" if key else "option"
            raise InvalidOptionError(option, raw.get(key), ["true", "false"]) from e
