"""Relay gateway: the simplified /api/* endpoints served by the relay server."""

from odoocontacts.application.errors import TransportError
from odoocontacts.domain import ContactDraft
from odoocontacts.infrastructure.http_gateway import HttpGateway

RELAY_AUTHENTICATE_PATH = "/api/authenticate"
RELAY_CREATE_PATH = "/api/create-contact"
RELAY_CONTACTS_PATH = "/api/contacts"

# Error name the relay puts in envelopes when it could not reach Odoo.
RELAY_TRANSPORT_ERROR = "odoocontacts.TransportError"


class RelayGateway(HttpGateway):
    """Credentials stay on the relay; requests carry only the contact fields."""

    async def _request(self, method: str, path: str, payload: dict | None = None) -> dict:
        body = await super()._request(method, path, payload)
        error = body.get("error")
        if isinstance(error, dict):
            data = error.get("data")
            if isinstance(data, dict) and data.get("name") == RELAY_TRANSPORT_ERROR:
                raise TransportError(error.get("message") or "Network error")
        return body

    async def authenticate(self) -> dict:
        return await self._post(RELAY_AUTHENTICATE_PATH, {})

    async def create_contact(self, draft: ContactDraft) -> dict:
        return await self._post(RELAY_CREATE_PATH, {"name": draft.name, "phone": draft.phone})

    async def search_contacts(self, fields: list[str], limit: int) -> dict:
        # The relay decides fields and limit.
        return await self._get(RELAY_CONTACTS_PATH)
