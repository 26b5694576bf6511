"""Domain layer: entities and value objects. No dependencies on outer layers."""

from odoocontacts.domain.entities import (
    STATUS_FAILED,
    STATUS_IDLE,
    STATUS_SUBMITTING,
    STATUS_SUCCEEDED,
    Contact,
    ContactDraft,
    SubmissionState,
)

__all__ = [
    "STATUS_FAILED",
    "STATUS_IDLE",
    "STATUS_SUBMITTING",
    "STATUS_SUCCEEDED",
    "Contact",
    "ContactDraft",
    "SubmissionState",
]
