"""Submission request/response schemas.

Field names are snake_case in Python and camelCase on the wire, matching
the keys the form client submits (``fullName``, ``isActive``, ...).
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from forms_api.db.models.submission import Submission
from forms_api.services.submissions import PageInfo, selected_labels


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a ``Z`` suffix."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SubmissionCreatedResponse(CamelModel):
    """Success envelope for a stored submission."""

    success: bool = True
    submission_id: str
    created_at: str
    message: str


class SubmissionResponse(CamelModel):
    """One stored submission as returned by the listing."""

    submission_id: str
    full_name: str | None = None
    age: Any = None
    gender: str | None = None
    skills: list[str] = []
    join_date: str | None = None
    bio: str | None = None
    is_active: bool = False
    created_at: str

    @classmethod
    def from_model(cls, submission: Submission) -> SubmissionResponse:
        return cls(
            submission_id=submission.submission_id,
            full_name=submission.full_name,
            age=submission.age,
            gender=submission.gender,
            skills=selected_labels(submission.skills),
            join_date=submission.join_date,
            bio=submission.bio,
            is_active=bool(submission.is_active),
            created_at=format_timestamp(submission.created_at),
        )


class PageInfoResponse(CamelModel):
    current_page: int
    total_pages: int
    total_items: int
    limit: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def from_page_info(cls, info: PageInfo) -> PageInfoResponse:
        return cls(
            current_page=info.current_page,
            total_pages=info.total_pages,
            total_items=info.total_items,
            limit=info.limit,
            has_next_page=info.has_next_page,
            has_prev_page=info.has_prev_page,
        )


class SubmissionListResponse(CamelModel):
    """Success envelope for a page of submissions."""

    success: bool = True
    data: list[SubmissionResponse]
    page_info: PageInfoResponse


class ValidationErrorResponse(BaseModel):
    """Error envelope for a submission that failed validation."""

    success: bool = False
    errors: dict[str, str]


class FailureResponse(BaseModel):
    """Error envelope for failures the caller cannot fix (storage, etc.)."""

    success: bool = False
    message: str
