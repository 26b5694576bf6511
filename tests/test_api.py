"""Relay and dev proxy tests. Odoo is replaced by httpx.MockTransport."""

import json

import httpx
import pytest
from fastapi.testclient import TestClient

from api.main import create_app, error_envelope
from odoocontacts.application import CreationFailed
from odoocontacts.infrastructure import OdooSettings

AUTH_PATH = "/web/session/authenticate"
CREATE_PATH = "/web/dataset/call_kw/res.partner/create"
SEARCH_PATH = "/web/dataset/call_kw/res.partner/search_read"


class FakeOdoo:
    """Answers Odoo paths from a dict and records (path, body, cookie)."""

    def __init__(self, answers: dict) -> None:
        self.answers = answers
        self.requests: list[tuple[str, dict | None, str | None]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content) if request.content else None
        self.requests.append((request.url.path, body, request.headers.get("cookie")))
        answer = self.answers[request.url.path]
        if isinstance(answer, Exception):
            raise answer
        if isinstance(answer, httpx.Response):
            return answer
        return httpx.Response(200, json=answer)

    def paths(self) -> list[str]:
        return [path for path, _, _ in self.requests]


def _client(odoo: FakeOdoo, **settings) -> TestClient:
    settings.setdefault("odoo_url", "http://odoo.test")
    app = create_app(OdooSettings(**settings), transport=httpx.MockTransport(odoo))
    return TestClient(app)


AUTH_OK = {"jsonrpc": "2.0", "result": {"uid": 2, "name": "Mitchell Admin", "session_id": "x"}}
AUTH_DENIED = {
    "jsonrpc": "2.0",
    "error": {"code": 200, "message": "Access Denied", "data": {"debug": "Access Denied"}},
}


def test_health():
    with _client(FakeOdoo({})) as client:
        r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_authenticate_forwards_uid_and_name_only():
    with _client(FakeOdoo({AUTH_PATH: AUTH_OK})) as client:
        r = client.post("/api/authenticate", json={})
    assert r.status_code == 200
    assert r.json() == {"result": {"uid": 2, "name": "Mitchell Admin"}}


def test_authenticate_denied_passes_error_envelope():
    with _client(FakeOdoo({AUTH_PATH: AUTH_DENIED})) as client:
        r = client.post("/api/authenticate", json={})
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Access Denied"


def test_authenticate_unreachable_odoo_is_502():
    odoo = FakeOdoo({AUTH_PATH: httpx.ConnectError("refused")})
    with _client(odoo) as client:
        r = client.post("/api/authenticate", json={})
    assert r.status_code == 502
    assert r.json()["error"]["data"]["name"] == "odoocontacts.TransportError"


def test_create_contact_returns_id():
    odoo = FakeOdoo({AUTH_PATH: AUTH_OK, CREATE_PATH: {"jsonrpc": "2.0", "result": 42}})
    with _client(odoo) as client:
        r = client.post("/api/create-contact", json={"name": " Alice ", "phone": "555"})
    assert r.status_code == 200
    assert r.json() == {"result": 42}
    assert odoo.paths() == [AUTH_PATH, CREATE_PATH]
    create_body = odoo.requests[1][1]
    assert create_body["params"]["args"] == [{"name": "Alice", "phone": "555"}]


def test_create_contact_normalizes_phone_with_region():
    odoo = FakeOdoo({AUTH_PATH: AUTH_OK, CREATE_PATH: {"result": 42}})
    with _client(odoo, phone_region="US") as client:
        client.post("/api/create-contact", json={"name": "Alice", "phone": "202 555 1234"})
    assert odoo.requests[1][1]["params"]["args"] == [{"name": "Alice", "phone": "+12025551234"}]


def test_create_contact_missing_field_is_400_without_odoo_call():
    odoo = FakeOdoo({})
    with _client(odoo) as client:
        r = client.post("/api/create-contact", json={"name": "Alice", "phone": "  "})
    assert r.status_code == 400
    assert r.json()["error"]["data"]["name"] == "odoocontacts.ValidationError"
    assert odoo.requests == []


def test_create_contact_auth_failure_is_401_without_create():
    odoo = FakeOdoo({AUTH_PATH: AUTH_DENIED})
    with _client(odoo) as client:
        r = client.post("/api/create-contact", json={"name": "Alice", "phone": "555"})
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Failed to authenticate with Odoo"
    assert odoo.paths() == [AUTH_PATH]


def test_create_contact_backend_error_is_422_with_debug():
    odoo = FakeOdoo({AUTH_PATH: AUTH_OK, CREATE_PATH: {"error": {"data": {"debug": "dup"}}}})
    with _client(odoo) as client:
        r = client.post("/api/create-contact", json={"name": "Alice", "phone": "555"})
    assert r.status_code == 422
    assert r.json()["error"]["data"]["debug"] == "dup"


def test_contacts_lists_partners():
    records = [{"id": 3, "name": "Ready Mat", "email": False, "phone": "+1 555"}]
    odoo = FakeOdoo({AUTH_PATH: AUTH_OK, SEARCH_PATH: {"result": records}})
    with _client(odoo, contacts_limit=5) as client:
        r = client.get("/api/contacts")
    assert r.status_code == 200
    assert r.json() == {"result": [{"id": 3, "name": "Ready Mat", "email": None, "phone": "+1 555"}]}
    assert odoo.requests[1][1]["params"]["kwargs"]["limit"] == 5


def test_contacts_empty_when_auth_fails():
    with _client(FakeOdoo({AUTH_PATH: AUTH_DENIED})) as client:
        r = client.get("/api/contacts")
    assert r.status_code == 200
    assert r.json() == {"result": []}


def test_dev_proxy_disabled_by_default():
    with _client(FakeOdoo({})) as client:
        r = client.post(AUTH_PATH, json={})
    assert r.status_code in (404, 405)


def test_dev_proxy_forwards_body_and_cookies():
    upstream = httpx.Response(
        200,
        json={"result": {"uid": 2}},
        headers={"set-cookie": "session_id=abc; Path=/; HttpOnly"},
    )
    odoo = FakeOdoo({AUTH_PATH: upstream, CREATE_PATH: {"result": 9}})
    payload = {"jsonrpc": "2.0", "method": "call", "params": {"db": "d", "login": "u", "password": "p"}}
    with _client(odoo, dev_proxy=True) as client:
        r = client.post(AUTH_PATH, json=payload)
        assert r.status_code == 200
        assert r.json() == {"result": {"uid": 2}}
        assert "session_id=abc" in r.headers["set-cookie"]

        r = client.post(CREATE_PATH, json={"params": {"args": [{"name": "A", "phone": "1"}]}})
        assert r.json() == {"result": 9}
    assert odoo.requests[0][1] == payload
    assert odoo.requests[1][0] == CREATE_PATH
    assert "session_id=abc" in (odoo.requests[1][2] or "")


def test_dev_proxy_unreachable_is_502():
    odoo = FakeOdoo({AUTH_PATH: httpx.ConnectError("refused")})
    with _client(odoo, dev_proxy=True) as client:
        r = client.post(AUTH_PATH, json={})
    assert r.status_code == 502


@pytest.mark.parametrize("status_code", [401, 422])
def test_error_envelope_shape(status_code):
    envelope = error_envelope(status_code, CreationFailed("dup"))
    assert envelope["error"]["code"] == status_code
    assert envelope["error"]["message"] == "dup"
    assert envelope["error"]["data"] == {"name": "odoocontacts.CreationFailed", "debug": "dup"}
