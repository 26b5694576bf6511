"""
Odoo contacts core: clean-architecture layout.

- domain: entities (ContactDraft, Contact, SubmissionState). No outer dependencies.
- application: use cases (ContactSubmissionService), ports (ContactGateway), errors.
- infrastructure: adapters (JsonRpcGateway, RelayGateway), settings, phone normalization.
"""

from odoocontacts.application import (
    AuthenticationError,
    ContactGateway,
    ContactSubmissionService,
    CreationFailed,
    SubmissionError,
    TransportError,
    ValidationError,
)
from odoocontacts.domain import Contact, ContactDraft, SubmissionState
from odoocontacts.infrastructure import (
    JsonRpcGateway,
    OdooSettings,
    RelayGateway,
    build_gateway,
)

__all__ = [
    "AuthenticationError",
    "Contact",
    "ContactDraft",
    "ContactGateway",
    "ContactSubmissionService",
    "CreationFailed",
    "JsonRpcGateway",
    "OdooSettings",
    "RelayGateway",
    "SubmissionError",
    "SubmissionState",
    "TransportError",
    "ValidationError",
    "build_gateway",
]
