"""Form schema endpoint — serves the field definitions to the form client."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from forms_api.api.deps import get_form_schema
from forms_api.schema.fields import FormSchema

router = APIRouter(prefix="/form-schema", tags=["Form Schema"])


@router.get("")
async def read_form_schema(form: FormSchema = Depends(get_form_schema)) -> dict[str, Any]:
    """Return the form title, description and ordered field list."""
    return form.to_client_dict()
