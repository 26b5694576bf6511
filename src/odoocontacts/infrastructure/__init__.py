"""Infrastructure layer: concrete implementations of application ports."""

from odoocontacts.infrastructure.gateways import build_gateway
from odoocontacts.infrastructure.http_gateway import HttpGateway
from odoocontacts.infrastructure.odoo_gateway import JsonRpcGateway
from odoocontacts.infrastructure.phone import phone_for_backend
from odoocontacts.infrastructure.relay_gateway import RelayGateway
from odoocontacts.infrastructure.settings import (
    GATEWAY_DIRECT,
    GATEWAY_RELAY,
    OdooSettings,
)

__all__ = [
    "GATEWAY_DIRECT",
    "GATEWAY_RELAY",
    "HttpGateway",
    "JsonRpcGateway",
    "OdooSettings",
    "RelayGateway",
    "build_gateway",
    "phone_for_backend",
]
