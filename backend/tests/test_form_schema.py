"""Tests for the form schema registry and its client serialisation."""

import pydantic
import pytest

from forms_api.core.constants import FieldType
from forms_api.schema.fields import FieldConstraints, FieldDefinition, FormSchema
from forms_api.schema.registry import EMPLOYEE_FORM, get_form_schema


def test_registry_returns_the_shared_schema():
    assert get_form_schema() is EMPLOYEE_FORM
    assert get_form_schema() is get_form_schema()


def test_field_order_is_declared_order():
    assert EMPLOYEE_FORM.field_names() == [
        "fullName",
        "age",
        "gender",
        "skills",
        "joinDate",
        "bio",
        "isActive",
    ]


def test_schema_is_immutable():
    with pytest.raises(pydantic.ValidationError):
        EMPLOYEE_FORM.title = "Other"
    with pytest.raises(pydantic.ValidationError):
        EMPLOYEE_FORM.fields[0].required = False
    with pytest.raises(pydantic.ValidationError):
        EMPLOYEE_FORM.fields[0].constraints.min_length = 0


def test_duplicate_field_names_are_rejected():
    field = FieldDefinition(name="email", label="Email", type=FieldType.TEXT)

    with pytest.raises(pydantic.ValidationError, match="Duplicate field name: email"):
        FormSchema(title="Broken", fields=(field, field))


def test_client_dict_uses_camel_case_and_omits_unset_rules():
    data = EMPLOYEE_FORM.to_client_dict()

    assert data["title"] == "EMPLOYEE FORM"
    assert data["description"] == "Fill your employee details carefully"

    full_name, age, gender, skills, join_date, bio, is_active = data["fields"]
    assert full_name == {
        "name": "fullName",
        "label": "Full Name",
        "type": "text",
        "required": True,
        "placeholder": "Enter your name",
        "validations": {"minLength": 3, "maxLength": 30},
    }
    assert age["validations"] == {"min": 18, "max": 60}
    assert gender["options"] == ["Male", "Female", "Other"]
    assert gender["validations"] == {}
    assert skills["type"] == "multi-select"
    assert skills["required"] is False
    assert skills["validations"] == {"minSelected": 1, "maxSelected": 3}
    assert join_date["validations"] == {"minDate": "2025-01-01"}
    assert bio["validations"] == {"minLength": 10, "maxLength": 200}
    assert is_active == {
        "name": "isActive",
        "label": "Active Employee",
        "type": "switch",
        "required": False,
        "validations": {},
    }


def test_field_definition_accepts_client_shaped_input():
    field = FieldDefinition.model_validate(
        {
            "name": "headcount",
            "label": "Headcount",
            "type": "number",
            "validations": {"min": 0, "max": 10},
        }
    )

    assert field.type is FieldType.NUMBER
    assert field.constraints == FieldConstraints(min=0, max=10)
