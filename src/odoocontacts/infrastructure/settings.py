"""Backend connection settings. Built once at startup and passed to the gateways."""

import os
from dataclasses import dataclass

GATEWAY_DIRECT = "direct"
GATEWAY_RELAY = "relay"
GATEWAYS = (GATEWAY_DIRECT, GATEWAY_RELAY)

_TRUTHY = ("1", "true", "yes")


def _env(name: str, default: str) -> str:
    return os.environ.get(name, "").strip() or default


@dataclass(frozen=True)
class OdooSettings:
    """Where the backend lives and which credentials open a session.

    `gateway` picks one topology per deployment: "direct" talks JSON-RPC to
    Odoo at `odoo_url`, "relay" talks to the relay server at `relay_url`.
    """

    odoo_url: str = "http://localhost:8069"
    database: str = "dbbrazen"
    username: str = "admin"
    password: str = "admin"
    gateway: str = GATEWAY_DIRECT
    relay_url: str = "http://localhost:8010"
    timeout: float = 10.0
    contacts_limit: int = 10
    phone_region: str | None = None
    dev_proxy: bool = False

    def __post_init__(self):
        if self.gateway not in GATEWAYS:
            raise ValueError(f"gateway must be one of {', '.join(GATEWAYS)}, got {self.gateway!r}")
        if self.timeout <= 0:
            raise ValueError("timeout must be positive.")
        if self.contacts_limit <= 0:
            raise ValueError("contacts_limit must be positive.")
        object.__setattr__(self, "odoo_url", self.odoo_url.rstrip("/"))
        object.__setattr__(self, "relay_url", self.relay_url.rstrip("/"))

    @classmethod
    def from_env(cls) -> "OdooSettings":
        """Read ODOO_* / RELAY_URL / PHONE_DEFAULT_REGION, falling back to defaults."""
        try:
            timeout = float(_env("ODOO_TIMEOUT", "10"))
            contacts_limit = int(_env("ODOO_CONTACTS_LIMIT", "10"))
        except ValueError as e:
            raise ValueError(f"Invalid numeric setting: {e}") from e
        return cls(
            odoo_url=_env("ODOO_URL", cls.odoo_url),
            database=_env("ODOO_DATABASE", cls.database),
            username=_env("ODOO_USERNAME", cls.username),
            password=_env("ODOO_PASSWORD", cls.password),
            gateway=_env("ODOO_GATEWAY", GATEWAY_DIRECT).lower(),
            relay_url=_env("RELAY_URL", cls.relay_url),
            timeout=timeout,
            contacts_limit=contacts_limit,
            phone_region=os.environ.get("PHONE_DEFAULT_REGION", "").strip().upper() or None,
            dev_proxy=os.environ.get("ODOO_DEV_PROXY", "").strip().lower() in _TRUTHY,
        )

    @property
    def base_url(self) -> str:
        """URL the configured gateway talks to."""
        return self.relay_url if self.gateway == GATEWAY_RELAY else self.odoo_url

    def describe(self) -> dict:
        """Settings summary for startup logs. Never includes the password."""
        return {
            "mode": self.gateway,
            "url": self.base_url,
            "database": self.database,
            "username": self.username,
        }
