"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from odoocontacts.domain import ContactDraft


class ContactGateway(Protocol):
    """A remote contact store reachable over HTTP with JSON payloads.

    Every method returns the decoded JSON envelope ({"result": ...} or
    {"error": {...}}) and raises TransportError when no envelope could be read.
    """

    async def authenticate(self) -> dict:
        """Open a session with the configured credentials."""
        ...

    async def create_contact(self, draft: ContactDraft) -> dict:
        """Create a res.partner carrying exactly name and phone."""
        ...

    async def search_contacts(self, fields: list[str], limit: int) -> dict:
        """Read up to `limit` partners with the given fields."""
        ...

    async def aclose(self) -> None:
        ...


class ContactCreator(Protocol):
    """What a form needs to submit a draft: the new partner id, or SubmissionError."""

    async def create_contact(self, draft: ContactDraft) -> int:
        ...
