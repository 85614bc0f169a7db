"""Shared dependencies for API routes."""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from forms_api.db.session import get_db as _get_db
from forms_api.schema.fields import FormSchema
from forms_api.schema.registry import get_form_schema as _get_form_schema


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async DB session."""
    async for session in _get_db():
        yield session


def get_form_schema() -> FormSchema:
    """Resolve the form schema that submissions are validated against."""
    return _get_form_schema()
