"""Domain entities: ContactDraft, Contact, and SubmissionState."""

from dataclasses import dataclass, field

STATUS_IDLE = "idle"
STATUS_SUBMITTING = "submitting"
STATUS_SUCCEEDED = "succeeded"
STATUS_FAILED = "failed"

STATUSES = frozenset({STATUS_IDLE, STATUS_SUBMITTING, STATUS_SUCCEEDED, STATUS_FAILED})


@dataclass(frozen=True)
class ContactDraft:
    """
    What the user has typed so far. Both fields are always strings (never None)
    so the inputs bound to them stay controlled.
    """

    name: str = ""
    phone: str = ""

    def __post_init__(self):
        object.__setattr__(self, "name", "" if self.name is None else str(self.name))
        object.__setattr__(self, "phone", "" if self.phone is None else str(self.phone))

    def is_complete(self) -> bool:
        """True when trimmed name and trimmed phone are both non-empty."""
        return bool(self.name.strip()) and bool(self.phone.strip())

    def trimmed(self) -> "ContactDraft":
        return ContactDraft(name=self.name.strip(), phone=self.phone.strip())


@dataclass(frozen=True)
class Contact:
    """A res.partner record as returned by search_read (id, name, email, phone)."""

    id: int
    name: str = ""
    email: str | None = None
    phone: str | None = None

    @classmethod
    def from_record(cls, record: dict) -> "Contact | None":
        """Build from a search_read record. Odoo sends False for empty fields.

        Returns None when the record has no integer id.
        """
        if not isinstance(record, dict):
            return None
        record_id = record.get("id")
        if not isinstance(record_id, int) or isinstance(record_id, bool):
            return None
        return cls(
            id=record_id,
            name=record.get("name") or "",
            email=record.get("email") or None,
            phone=record.get("phone") or None,
        )


@dataclass(frozen=True)
class SubmissionState:
    """
    Ephemeral state of the contact form. Owned by a single controller.
    At most one of error and success is set.
    """

    draft: ContactDraft = field(default_factory=ContactDraft)
    status: str = STATUS_IDLE
    loading: bool = False
    error: str | None = None
    success: str | None = None
    # Bumped on every success; a deferred clear only applies to the latest one.
    expiry_token: int = 0

    def __post_init__(self):
        if self.status not in STATUSES:
            raise ValueError(f"Unknown submission status: {self.status!r}")
        if self.error is not None and self.success is not None:
            raise ValueError("SubmissionState cannot carry both error and success.")
