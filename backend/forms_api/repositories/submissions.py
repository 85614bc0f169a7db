"""
Submission repository containing all data-access operations for the
submissions table.

Repository rules:
- Pure data-access logic only
- Every function receives AsyncSession explicitly
- Functions flush, but never commit
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forms_api.core.constants import SortOrder
from forms_api.core.errors import StorageError
from forms_api.db.models.base import generate_uuid, utcnow
from forms_api.db.models.submission import Submission


async def create_submission(
    db: AsyncSession,
    record: Mapping[str, Any],
    *,
    submission_id: str | None = None,
    created_at: datetime | None = None,
) -> Submission:
    """Insert one validated employee form record and return the new row."""
    skills = record.get("skills")
    submission = Submission(
        submission_id=submission_id or generate_uuid(),
        full_name=_scalar(record.get("fullName")),
        age=_scalar(record.get("age")),
        gender=_scalar(record.get("gender")),
        skills=list(skills) if isinstance(skills, (list, tuple)) else None,
        join_date=_scalar(record.get("joinDate")) or None,
        bio=_scalar(record.get("bio")),
        is_active=bool(record.get("isActive")),
        created_at=created_at or utcnow(),
    )
    db.add(submission)
    try:
        await db.flush()
    except SQLAlchemyError as exc:
        raise StorageError("Database insert failed", operation="insert") from exc
    return submission


def _scalar(value: Any) -> Any:
    """Scalar columns take JSON text for list or object values."""
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value)
    return value


async def count_submissions(db: AsyncSession) -> int:
    """Return the total number of stored submissions."""
    stmt = select(func.count()).select_from(Submission)
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as exc:
        raise StorageError("Count query failed", operation="count") from exc
    return int(result.scalar_one())


async def list_submissions(
    db: AsyncSession,
    *,
    offset: int = 0,
    limit: int = 5,
    sort_order: SortOrder = SortOrder.DESC,
) -> list[Submission]:
    """List one page of submissions ordered by creation time."""
    if sort_order == SortOrder.ASC:
        ordering = (Submission.created_at.asc(), Submission.id.asc())
    else:
        ordering = (Submission.created_at.desc(), Submission.id.desc())

    stmt = select(Submission).order_by(*ordering).offset(offset).limit(limit)
    try:
        result = await db.execute(stmt)
    except SQLAlchemyError as exc:
        raise StorageError("Data fetch failed", operation="select") from exc
    return list(result.scalars().all())

