"""
FastAPI relay: simplified contact endpoints in front of Odoo, plus an optional
development proxy for Odoo's JSON-RPC paths.
Run with uvicorn: uvicorn api.main:app --reload --port 8010
"""

import logging
from dataclasses import asdict, replace
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

import httpx
from fastapi import APIRouter, FastAPI, Request, Response
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from odoocontacts.application import (
    AuthenticationError,
    ContactSubmissionService,
    CreationFailed,
    SubmissionError,
    TransportError,
    ValidationError,
)
from odoocontacts.application.contact_service import AUTH_FAILED_MSG
from odoocontacts.domain import ContactDraft
from odoocontacts.infrastructure import (
    GATEWAY_DIRECT,
    JsonRpcGateway,
    OdooSettings,
    phone_for_backend,
)
from odoocontacts.infrastructure.http_gateway import JSON_HEADERS
from odoocontacts.infrastructure.odoo_gateway import AUTHENTICATE_PATH, CALL_KW_PATH

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=logging.INFO,
)
logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: dict[type[SubmissionError], int] = {
    ValidationError: 400,
    AuthenticationError: 401,
    CreationFailed: 422,
    TransportError: 502,
}


def error_envelope(status_code: int, error: SubmissionError) -> dict:
    """Odoo-shaped error envelope so relay clients parse one format."""
    return {
        "jsonrpc": "2.0",
        "error": {
            "code": status_code,
            "message": error.message,
            "data": {
                "name": f"odoocontacts.{type(error).__name__}",
                "debug": error.message,
            },
        },
    }


def _error_response(error: SubmissionError) -> JSONResponse:
    status_code = _STATUS_BY_ERROR.get(type(error), 500)
    return JSONResponse(status_code=status_code, content=error_envelope(status_code, error))


# --- Relay: simplified endpoints ---

router = APIRouter()


class CreateContactBody(BaseModel):
    name: str = ""
    phone: str = ""


@router.get("/health")
def health():
    return {"status": "ok"}


@router.post("/api/authenticate")
async def relay_authenticate(request: Request):
    gateway: JsonRpcGateway = request.app.state.gateway
    try:
        envelope = await gateway.authenticate()
    except TransportError as e:
        return _error_response(e)
    result = envelope.get("result")
    if isinstance(result, dict) and result.get("uid"):
        return {"result": {"uid": result["uid"], "name": result.get("name")}}
    if isinstance(envelope.get("error"), dict):
        return JSONResponse(status_code=401, content=envelope)
    return _error_response(AuthenticationError(AUTH_FAILED_MSG))


@router.post("/api/create-contact")
async def relay_create_contact(body: CreateContactBody, request: Request):
    settings: OdooSettings = request.app.state.settings
    service: ContactSubmissionService = request.app.state.service
    draft = ContactDraft(name=body.name, phone=body.phone).trimmed()
    if not draft.is_complete():
        return _error_response(ValidationError("Name and phone are required."))
    draft = ContactDraft(
        name=draft.name,
        phone=phone_for_backend(draft.phone, settings.phone_region),
    )
    try:
        contact_id = await service.create_contact(draft)
    except SubmissionError as e:
        return _error_response(e)
    return {"result": contact_id}


@router.api_route("/api/contacts", methods=["GET", "POST"])
async def relay_contacts(request: Request):
    service: ContactSubmissionService = request.app.state.service
    contacts = await service.fetch_contacts()
    return {"result": [asdict(c) for c in contacts]}


# --- Development proxy: Odoo JSON-RPC paths forwarded as-is ---

dev_proxy_router = APIRouter()


async def _forward(request: Request, path: str) -> Response:
    """POST the raw body to the same path on Odoo. Cookies pass through both ways."""
    settings: OdooSettings = request.app.state.settings
    headers = dict(JSON_HEADERS)
    cookie = request.headers.get("cookie")
    if cookie:
        headers["Cookie"] = cookie
    # One client per request so no cookie jar is shared between browsers.
    async with httpx.AsyncClient(
        base_url=settings.odoo_url,
        timeout=settings.timeout,
        transport=request.app.state.transport,
    ) as client:
        try:
            upstream = await client.post(path, content=await request.body(), headers=headers)
        except httpx.HTTPError as e:
            logger.warning("Dev proxy %s failed: %s", path, e)
            return _error_response(TransportError(f"Network error: {e}"))
    response = Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type=upstream.headers.get("content-type"),
    )
    for value in upstream.headers.get_list("set-cookie"):
        response.headers.append("set-cookie", value)
    return response


@dev_proxy_router.post(AUTHENTICATE_PATH)
async def proxy_authenticate(request: Request):
    return await _forward(request, AUTHENTICATE_PATH)


@dev_proxy_router.post(CALL_KW_PATH + "/{path:path}")
async def proxy_call_kw(path: str, request: Request):
    return await _forward(request, f"{CALL_KW_PATH}/{path}")


# --- App factory ---


def create_app(
    settings: OdooSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the relay. `transport` replaces the network (tests pass httpx.MockTransport)."""
    if settings is None:
        settings = OdooSettings.from_env()
    # The relay itself always talks to Odoo directly.
    upstream_settings = replace(settings, gateway=GATEWAY_DIRECT)
    client = httpx.AsyncClient(
        base_url=upstream_settings.odoo_url,
        timeout=upstream_settings.timeout,
        headers=JSON_HEADERS,
        transport=transport,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        info = upstream_settings.describe()
        logger.info(
            "Relay for Odoo at %s (database %s). Dev proxy: %s",
            info["url"],
            info["database"],
            "on" if settings.dev_proxy else "off",
        )
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(title="Odoo Contact Relay", lifespan=lifespan)
    app.state.settings = settings
    app.state.transport = transport
    app.state.gateway = JsonRpcGateway(upstream_settings, client)
    app.state.service = ContactSubmissionService(
        app.state.gateway, contacts_limit=settings.contacts_limit
    )
    app.include_router(router)
    if settings.dev_proxy:
        app.include_router(dev_proxy_router)
    return app


app = create_app()
