"""Submission endpoints — validated create and paginated listing."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from forms_api.api.deps import get_db, get_form_schema
from forms_api.api.schemas.submissions import (
    FailureResponse,
    PageInfoResponse,
    SubmissionCreatedResponse,
    SubmissionListResponse,
    SubmissionResponse,
    ValidationErrorResponse,
    format_timestamp,
)
from forms_api.core.config import settings
from forms_api.core.constants import SUBMISSION_SAVED_MESSAGE, SortOrder
from forms_api.schema.fields import FormSchema
from forms_api.services import submissions as submission_service

router = APIRouter(prefix="/submissions", tags=["Submissions"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=SubmissionCreatedResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ValidationErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": FailureResponse},
    },
)
async def create_submission(
    record: dict[str, Any] = Body(...),
    db: AsyncSession = Depends(get_db),
    form: FormSchema = Depends(get_form_schema),
) -> SubmissionCreatedResponse:
    """Validate a form submission and store it."""
    submission = await submission_service.submit(db, form, record)
    return SubmissionCreatedResponse(
        submission_id=submission.submission_id,
        created_at=format_timestamp(submission.created_at),
        message=SUBMISSION_SAVED_MESSAGE,
    )


@router.get(
    "",
    response_model=SubmissionListResponse,
    responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": FailureResponse}},
)
async def list_submissions(
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder"),
    db: AsyncSession = Depends(get_db),
) -> SubmissionListResponse:
    """List stored submissions one page at a time, newest first by default."""
    result = await submission_service.list_page(
        db,
        page=page,
        limit=limit,
        sort_order=sort_order,
    )
    return SubmissionListResponse(
        data=[SubmissionResponse.from_model(item) for item in result.items],
        page_info=PageInfoResponse.from_page_info(result.page_info),
    )
