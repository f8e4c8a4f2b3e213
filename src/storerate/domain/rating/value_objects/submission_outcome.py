from enum import Enum


class SubmissionOutcome(str, Enum):
    """Whether a rating submission inserted a new row or changed an existing one."""

    CREATED = "created"
    UPDATED = "updated"
