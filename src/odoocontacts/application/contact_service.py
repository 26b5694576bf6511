"""Contact submission: authenticate, create, and list partners. Stateless per call."""

import logging

from odoocontacts.application.errors import (
    AuthenticationError,
    CreationFailed,
    SubmissionError,
)
from odoocontacts.application.ports import ContactGateway
from odoocontacts.domain import Contact, ContactDraft

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ["id", "name", "email", "phone"]
DEFAULT_CONTACTS_LIMIT = 10

AUTH_FAILED_MSG = "Failed to authenticate with Odoo"
CREATE_FAILED_MSG = "Failed to create contact"


def _error_message(envelope: dict) -> str | None:
    error = envelope.get("error")
    if not isinstance(error, dict):
        return None
    return error.get("message") or None


def _error_debug(envelope: dict) -> str | None:
    error = envelope.get("error")
    if not isinstance(error, dict):
        return None
    data = error.get("data")
    if not isinstance(data, dict):
        return None
    return data.get("debug") or None


def _as_contact_id(result) -> int | None:
    if isinstance(result, bool) or not isinstance(result, int):
        return None
    return result if result > 0 else None


class ContactSubmissionService:
    """Re-authenticates before every call so no session state lives in the client."""

    def __init__(
        self,
        gateway: ContactGateway,
        *,
        contacts_limit: int = DEFAULT_CONTACTS_LIMIT,
    ) -> None:
        self._gateway = gateway
        self._contacts_limit = contacts_limit

    async def authenticate(self) -> bool:
        """True if the backend opened a session (result carries a uid).

        A well-formed "no session" answer returns False; TransportError propagates.
        """
        envelope = await self._gateway.authenticate()
        result = envelope.get("result")
        if isinstance(result, dict) and result.get("uid"):
            logger.info("Authenticated with Odoo as %s", result.get("name") or result["uid"])
            return True
        logger.warning("Odoo authentication failed: %s", _error_message(envelope) or "Unknown error")
        return False

    async def create_contact(self, draft: ContactDraft) -> int:
        """Create a partner from the draft and return its id.

        Raises AuthenticationError before any create call when no session was
        opened, CreationFailed when the backend gives no id, TransportError on
        network failure.
        """
        if not await self.authenticate():
            raise AuthenticationError(AUTH_FAILED_MSG)

        logger.info("Creating contact %r", draft.name)
        envelope = await self._gateway.create_contact(draft)
        contact_id = _as_contact_id(envelope.get("result"))
        if contact_id is None:
            message = _error_debug(envelope) or CREATE_FAILED_MSG
            logger.error("Create failed: %s", message)
            raise CreationFailed(message)
        logger.info("Contact created with id %s", contact_id)
        return contact_id

    async def fetch_contacts(self) -> list[Contact]:
        """Return the first contacts, or an empty list on any failure.

        An empty list is ambiguous: no contacts, or the fetch failed.
        """
        try:
            if not await self.authenticate():
                raise AuthenticationError(AUTH_FAILED_MSG)
            envelope = await self._gateway.search_contacts(CONTACT_FIELDS, self._contacts_limit)
        except SubmissionError as e:
            logger.error("Error fetching contacts: %s", e.message)
            return []

        records = envelope.get("result")
        if not isinstance(records, list):
            logger.error("Fetch failed: %s", envelope.get("error"))
            return []
        contacts = [c for c in (Contact.from_record(r) for r in records) if c is not None]
        logger.info("Fetched %d contacts", len(contacts))
        return contacts
