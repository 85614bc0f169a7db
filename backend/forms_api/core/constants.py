"""Shared constants and enums used across the application."""

from enum import StrEnum


class FieldType(StrEnum):
    """Input variants a form field can declare."""

    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    MULTI_SELECT = "multi-select"
    DATE = "date"
    TEXTAREA = "textarea"
    SWITCH = "switch"


class SortOrder(StrEnum):
    """Listing direction over submission creation time."""

    ASC = "asc"
    DESC = "desc"


SUBMISSION_SAVED_MESSAGE = "Submission saved successfully!"
