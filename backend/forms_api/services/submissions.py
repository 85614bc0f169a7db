"""
Submission service — validate-then-persist pipeline and paginated reads.

Validation runs before any storage I/O, so the store never sees a record
that failed the form's rules.  The read path does not touch the
validator at all.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from forms_api.core.constants import SortOrder
from forms_api.core.errors import StorageError, SubmissionValidationError
from forms_api.core.logging import get_logger
from forms_api.db.models.submission import Submission
from forms_api.repositories import submissions as submission_repository
from forms_api.schema.fields import FormSchema
from forms_api.validation.schema_validator import validate

logger = get_logger(__name__)


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata for one page of a listing."""

    current_page: int
    total_pages: int
    total_items: int
    limit: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total_items: int) -> PageInfo:
        total_pages = math.ceil(total_items / limit)
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_items=total_items,
            limit=limit,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )


@dataclass(frozen=True)
class SubmissionPage:
    items: list[Submission]
    page_info: PageInfo


async def submit(
    db: AsyncSession,
    form: FormSchema,
    record: Mapping[str, Any],
) -> Submission:
    """
    Validate ``record`` against ``form`` and store it.

    Raises:
        SubmissionValidationError: one or more fields failed; nothing stored.
        StorageError: the insert or its commit failed.
    """
    errors = validate(form.fields, record)
    if errors:
        logger.info("Submission rejected", fields=sorted(errors))
        raise SubmissionValidationError(errors)

    submission = await submission_repository.create_submission(db, record)
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        raise StorageError("Database insert failed", operation="commit") from exc

    logger.info(
        "Submission stored",
        submission_id=submission.submission_id,
        created_at=submission.created_at.isoformat(),
    )
    return submission


async def list_page(
    db: AsyncSession,
    *,
    page: int = 1,
    limit: int = 5,
    sort_order: SortOrder = SortOrder.DESC,
) -> SubmissionPage:
    """Return one page of stored submissions plus pagination metadata."""
    total_items = await submission_repository.count_submissions(db)
    items = await submission_repository.list_submissions(
        db,
        offset=(page - 1) * limit,
        limit=limit,
        sort_order=sort_order,
    )
    return SubmissionPage(
        items=items,
        page_info=PageInfo.build(page, limit, total_items),
    )


def selected_labels(values: Iterable[Any] | None) -> list[str]:
    """
    Reduce stored multi-select entries to their option labels.

    Older clients posted option objects (``{"label": ..., "value": ...}``)
    instead of plain strings; both shapes come back as labels, in order.
    """
    labels: list[str] = []
    for value in values or ():
        if isinstance(value, str):
            labels.append(value)
        elif isinstance(value, Mapping) and value.get("label") is not None:
            labels.append(str(value["label"]))
    return labels
