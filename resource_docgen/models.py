"""
Resource record models.

Typed views over the JSON emitted by the resource inspector. Field aliases
follow the inspector's wire names so a raw mapping entry validates directly.
"""

import json
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from resource_docgen.exceptions import InvalidResourceRecordError

# Marker the inspector emits in place of a default that is computed at runtime
LAZY_DEFAULT = "lazy default"

# Type tokens standing in for the boolean classes
TRUE_CLASS = "TrueClass"
FALSE_CLASS = "FalseClass"


class PropertyRecord(BaseModel):
    """
    A single configurable property of a resource.

    Fields:
        name: Property name. ``name`` itself is the resource identity property.
        description: Free-form description, if the resource provides one.
        accepted_types: Type tokens; ``None`` entries mean nil is accepted.
        default_value: Literal default, ``LAZY_DEFAULT``, or ``None``.
        is_deprecated: Whether the property is deprecated.
        is_name_property: Whether the property defaults to the resource name.
        introduced_in_version: Release the property first appeared in.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    description: Optional[str] = None
    accepted_types: List[Optional[str]] = Field(default_factory=list, alias="is")
    default_value: Any = Field(None, alias="default")
    is_deprecated: bool = Field(False, alias="deprecated")
    is_name_property: bool = Field(False, alias="name_property")
    introduced_in_version: Optional[str] = Field(None, alias="introduced")

    @field_validator("accepted_types", mode="before")
    @classmethod
    def _coerce_types(cls, value: Any) -> Any:
        # The inspector emits null for untyped properties and a bare string
        # when only one type is accepted.
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("is_deprecated", "is_name_property", mode="before")
    @classmethod
    def _coerce_flags(cls, value: Any) -> Any:
        return bool(value)

    @property
    def has_literal_default(self) -> bool:
        """True when there is a default value that can be shown verbatim."""
        return self.default_value is not None and self.default_value != LAZY_DEFAULT


class ResourceRecord(BaseModel):
    """
    The inspected description of one resource.

    Fields:
        identifier: Resource name, also used to name the output page.
        description: Resource description, if any.
        default_action: Ordered default actions; the first one applies.
        actions: Every action the resource supports, including ``nothing``.
        properties: Properties in the order the inspector reported them.
        examples: Example usage text, if any.
        introduced_in_version: Release the resource first appeared in.
        is_preview: Whether the resource is a preview resource.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    identifier: str
    description: Optional[str] = None
    default_action: List[str] = Field(default_factory=lambda: ["nothing"])
    actions: List[str]
    properties: List[PropertyRecord] = Field(default_factory=list)
    examples: Optional[str] = None
    introduced_in_version: Optional[str] = Field(None, alias="introduced")
    is_preview: bool = Field(False, alias="preview")

    @field_validator("default_action", mode="before")
    @classmethod
    def _coerce_default_action(cls, value: Any) -> Any:
        if value is None:
            return ["nothing"]
        if isinstance(value, str):
            return [value]
        return value

    @field_validator("properties", mode="before")
    @classmethod
    def _coerce_properties(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("is_preview", mode="before")
    @classmethod
    def _coerce_preview(cls, value: Any) -> Any:
        return bool(value)

    @property
    def first_default_action(self) -> str:
        return self.default_action[0] if self.default_action else "nothing"


def parse_resource_record(identifier: str, data: Any) -> ResourceRecord:
    """
    Validate one entry of the inspector mapping.

    Args:
        identifier: The mapping key for the resource
        data: The raw mapping value

    Returns:
        ResourceRecord: The validated record

    Raises:
        InvalidResourceRecordError: If required fields are missing or malformed
    """
    if not isinstance(data, dict):
        raise InvalidResourceRecordError(
            f"Resource record must be an object, got {type(data).__name__}",
            resource_name=identifier,
        )
    try:
        return ResourceRecord.model_validate({**data, "identifier": identifier})
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in e.errors()
        )
        raise InvalidResourceRecordError(
            f"Resource record is malformed: {fields}",
            resource_name=identifier,
            cause=e,
        ) from e


def format_default_value(value: Any) -> str:
    """Render a literal default the way it reads in a recipe."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "nil"
    return json.dumps(value)

