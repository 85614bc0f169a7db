"""
Form field descriptors — immutable building blocks of a form schema.

A ``FormSchema`` is built once at startup and never mutated afterwards,
so a single instance can be shared by any number of concurrent requests.
The same models serialise the schema for client-side rendering, using
the camelCase keys the form client expects (``validations``,
``minLength``, ...).
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from forms_api.core.constants import FieldType


class FieldConstraints(BaseModel):
    """
    Type-specific rules attached to a field.

    Unset rules are ``None`` (absent), never zero.  Which rules apply
    depends on the field type:

        text / textarea  — min_length, max_length
        number           — min, max
        multi-select     — min_selected, max_selected
        date             — min_date (ISO-8601 date string)
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    min_length: int | None = None
    max_length: int | None = None
    min: int | float | None = None
    max: int | float | None = None
    min_selected: int | None = None
    max_selected: int | None = None
    min_date: str | None = None


class FieldDefinition(BaseModel):
    """Static descriptor of one form input."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    label: str
    type: FieldType
    required: bool = False
    placeholder: str | None = None
    options: tuple[str, ...] | None = None
    constraints: FieldConstraints = Field(
        default_factory=FieldConstraints,
        alias="validations",
    )


class FormSchema(BaseModel):
    """Ordered, read-only list of field definitions plus form metadata."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str = ""
    fields: tuple[FieldDefinition, ...]

    @model_validator(mode="after")
    def check_unique_names(self) -> FormSchema:
        seen: set[str] = set()
        for field in self.fields:
            if field.name in seen:
                raise ValueError(f"Duplicate field name: {field.name}")
            seen.add(field.name)
        return self

    def field_names(self) -> list[str]:
        return [field.name for field in self.fields]

    def to_client_dict(self) -> dict:
        """Serialise for the form client, omitting unset rules and options."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
