"""
Form schema registry — the single form this service serves and validates.

The schema is fixed at import time.  Routes receive it through the
``get_form_schema`` dependency and pass it explicitly to the validator,
so swapping in a reloadable registry later only touches this module.
"""

from __future__ import annotations

from forms_api.core.constants import FieldType
from forms_api.schema.fields import FieldConstraints, FieldDefinition, FormSchema

EMPLOYEE_FORM = FormSchema(
    title="EMPLOYEE FORM",
    description="Fill your employee details carefully",
    fields=(
        FieldDefinition(
            name="fullName",
            label="Full Name",
            type=FieldType.TEXT,
            required=True,
            placeholder="Enter your name",
            constraints=FieldConstraints(min_length=3, max_length=30),
        ),
        FieldDefinition(
            name="age",
            label="Age",
            type=FieldType.NUMBER,
            required=True,
            constraints=FieldConstraints(min=18, max=60),
        ),
        FieldDefinition(
            name="gender",
            label="Gender",
            type=FieldType.SELECT,
            required=True,
            options=("Male", "Female", "Other"),
        ),
        FieldDefinition(
            name="skills",
            label="Skills",
            type=FieldType.MULTI_SELECT,
            options=("React", "Node", "Tailwind", "AWS"),
            constraints=FieldConstraints(min_selected=1, max_selected=3),
        ),
        FieldDefinition(
            name="joinDate",
            label="Joining Date",
            type=FieldType.DATE,
            constraints=FieldConstraints(min_date="2025-01-01"),
        ),
        FieldDefinition(
            name="bio",
            label="Bio",
            type=FieldType.TEXTAREA,
            placeholder="Write about yourself",
            constraints=FieldConstraints(min_length=10, max_length=200),
        ),
        FieldDefinition(
            name="isActive",
            label="Active Employee",
            type=FieldType.SWITCH,
        ),
    ),
)


def get_form_schema() -> FormSchema:
    """Return the active form schema."""
    return EMPLOYEE_FORM
