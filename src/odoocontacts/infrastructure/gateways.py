"""Pick the gateway for this deployment's topology."""

import logging

import httpx

from odoocontacts.infrastructure.odoo_gateway import JsonRpcGateway
from odoocontacts.infrastructure.relay_gateway import RelayGateway
from odoocontacts.infrastructure.settings import GATEWAY_RELAY, OdooSettings

logger = logging.getLogger(__name__)


def build_gateway(
    settings: OdooSettings,
    client: httpx.AsyncClient | None = None,
) -> JsonRpcGateway | RelayGateway:
    """Return the relay or direct gateway named by settings.gateway."""
    info = settings.describe()
    logger.info(
        "Odoo gateway initialized: mode=%s url=%s database=%s",
        info["mode"],
        info["url"],
        info["database"],
    )
    if settings.gateway == GATEWAY_RELAY:
        return RelayGateway(settings, client)
    return JsonRpcGateway(settings, client)
