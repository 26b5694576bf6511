"""Application layer: use cases, ports, and errors. Depends only on domain."""

from odoocontacts.application.contact_service import ContactSubmissionService
from odoocontacts.application.errors import (
    AuthenticationError,
    CreationFailed,
    SubmissionError,
    TransportError,
    ValidationError,
)
from odoocontacts.application.ports import ContactCreator, ContactGateway

__all__ = [
    "AuthenticationError",
    "ContactCreator",
    "ContactGateway",
    "ContactSubmissionService",
    "CreationFailed",
    "SubmissionError",
    "TransportError",
    "ValidationError",
]
