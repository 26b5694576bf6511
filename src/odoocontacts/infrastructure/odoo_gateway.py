"""Direct gateway: Odoo's JSON-RPC web endpoints (session authenticate, call_kw)."""

from odoocontacts.domain import ContactDraft
from odoocontacts.infrastructure.http_gateway import HttpGateway

AUTHENTICATE_PATH = "/web/session/authenticate"
CALL_KW_PATH = "/web/dataset/call_kw"
PARTNER_MODEL = "res.partner"


def jsonrpc_payload(params: dict) -> dict:
    return {"jsonrpc": "2.0", "method": "call", "params": params}


class JsonRpcGateway(HttpGateway):
    """Talks to Odoo itself at settings.odoo_url (or a dev proxy in front of it)."""

    async def authenticate(self) -> dict:
        return await self._post(
            AUTHENTICATE_PATH,
            jsonrpc_payload(
                {
                    "db": self.settings.database,
                    "login": self.settings.username,
                    "password": self.settings.password,
                }
            ),
        )

    async def call_kw(
        self,
        model: str,
        method: str,
        args: list,
        kwargs: dict | None = None,
    ) -> dict:
        """Call `model.method(*args, **kwargs)` through /web/dataset/call_kw."""
        return await self._post(
            f"{CALL_KW_PATH}/{model}/{method}",
            jsonrpc_payload(
                {
                    "model": model,
                    "method": method,
                    "args": args,
                    "kwargs": kwargs or {},
                }
            ),
        )

    async def create_contact(self, draft: ContactDraft) -> dict:
        return await self.call_kw(
            PARTNER_MODEL, "create", [{"name": draft.name, "phone": draft.phone}]
        )

    async def search_contacts(self, fields: list[str], limit: int) -> dict:
        return await self.call_kw(
            PARTNER_MODEL, "search_read", [[]], {"fields": fields, "limit": limit}
        )
