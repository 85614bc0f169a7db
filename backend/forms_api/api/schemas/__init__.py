"""API schema package."""

from forms_api.api.schemas.submissions import (
    FailureResponse,
    PageInfoResponse,
    SubmissionCreatedResponse,
    SubmissionListResponse,
    SubmissionResponse,
    ValidationErrorResponse,
)

__all__ = [
    "FailureResponse",
    "PageInfoResponse",
    "SubmissionCreatedResponse",
    "SubmissionListResponse",
    "SubmissionResponse",
    "ValidationErrorResponse",
]
