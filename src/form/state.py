"""
Reducer for the contact form: (SubmissionState, event) -> SubmissionState.

Status changes go through the XState machine (machine.py); everything else
(draft, loading flag, messages) is decided here. No I/O, no clock.
"""

from dataclasses import dataclass, replace

from form.machine import get_machine, transition
from form.messages import format_message, get_messages
from odoocontacts.domain import (
    STATUS_SUCCEEDED,
    ContactDraft,
    SubmissionState,
)

DRAFT_FIELDS = ("name", "phone")


@dataclass(frozen=True)
class FieldEdited:
    field: str
    value: str


@dataclass(frozen=True)
class SubmitRequested:
    pass


@dataclass(frozen=True)
class SubmitSucceeded:
    contact_id: int


@dataclass(frozen=True)
class SubmitFailed:
    # None means a failure without a usable message; the generic one is shown.
    message: str | None = None


@dataclass(frozen=True)
class SuccessExpired:
    token: int


FormEvent = FieldEdited | SubmitRequested | SubmitSucceeded | SubmitFailed | SuccessExpired


def event_to_xstate(event: FormEvent, draft: ContactDraft) -> str | None:
    """Map a form event to the machine event it drives, or None for pure data edits."""
    if isinstance(event, SubmitRequested):
        return "SUBMIT" if draft.is_complete() else "INVALID"
    if isinstance(event, SubmitSucceeded):
        return "RESOLVE"
    if isinstance(event, SubmitFailed):
        return "REJECT"
    if isinstance(event, SuccessExpired):
        return "EXPIRE"
    return None


def reduce(
    state: SubmissionState,
    event: FormEvent,
    messages: dict | None = None,
    machine: dict | None = None,
) -> SubmissionState:
    """Return the state after `event`. Returns `state` itself when the event is ignored."""
    if messages is None:
        messages = get_messages()
    if machine is None:
        machine = get_machine()

    if isinstance(event, FieldEdited):
        if event.field not in DRAFT_FIELDS:
            raise ValueError(f"Unknown draft field: {event.field!r}")
        if state.loading:
            return state
        return replace(state, draft=replace(state.draft, **{event.field: event.value}))

    if isinstance(event, SubmitRequested) and state.loading:
        return state

    if isinstance(event, SuccessExpired) and (
        event.token != state.expiry_token or state.status != STATUS_SUCCEEDED
    ):
        return state

    xevent = event_to_xstate(event, state.draft)
    next_status = transition(machine, state.status, xevent) if xevent else None
    if next_status is None:
        return state

    if xevent == "INVALID":
        return replace(
            state,
            status=next_status,
            error=format_message(messages, "validation_required"),
            success=None,
        )
    if xevent == "SUBMIT":
        return replace(state, status=next_status, loading=True, error=None, success=None)
    if xevent == "RESOLVE":
        return SubmissionState(
            draft=ContactDraft(),
            status=next_status,
            loading=False,
            error=None,
            success=format_message(messages, "contact_created", id=event.contact_id),
            expiry_token=state.expiry_token + 1,
        )
    if xevent == "REJECT":
        return replace(
            state,
            status=next_status,
            loading=False,
            error=event.message or format_message(messages, "generic_error"),
            success=None,
        )
    # EXPIRE
    return replace(state, status=next_status, success=None)
