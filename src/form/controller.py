"""Contact form controller: owns the SubmissionState and drives the submission service."""

import asyncio
import logging
from collections.abc import Callable

from form.messages import get_messages
from form.state import (
    FieldEdited,
    FormEvent,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
    SuccessExpired,
    reduce,
)
from odoocontacts.application import ContactCreator, SubmissionError
from odoocontacts.domain import SubmissionState

logger = logging.getLogger(__name__)

SUCCESS_TTL_SECONDS = 3.0


class ContactFormController:
    """
    One form instance. All state changes run on the event loop, one event at a
    time. After close() late completions and timers are dropped.
    """

    def __init__(
        self,
        service: ContactCreator,
        *,
        success_ttl: float = SUCCESS_TTL_SECONDS,
        messages: dict | None = None,
        on_change: Callable[[SubmissionState], None] | None = None,
    ) -> None:
        self._service = service
        self._success_ttl = success_ttl
        self._messages = messages if messages is not None else get_messages()
        self._on_change = on_change
        self._state = SubmissionState()
        self._expiry_handle: asyncio.TimerHandle | None = None
        self._closed = False

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    def set_name(self, value: str) -> None:
        self._dispatch(FieldEdited("name", value))

    def set_phone(self, value: str) -> None:
        self._dispatch(FieldEdited("phone", value))

    async def submit(self) -> SubmissionState:
        """Submit the draft. A no-op while a submission is already in flight."""
        if self._closed or self._state.loading:
            return self._state

        self._cancel_expiry()
        self._dispatch(SubmitRequested())
        if not self._state.loading:
            # Validation failed; nothing was sent.
            return self._state

        draft = self._state.draft.trimmed()
        try:
            contact_id = await self._service.create_contact(draft)
        except SubmissionError as e:
            self._dispatch(SubmitFailed(e.message))
        except Exception:
            logger.exception("Unexpected error creating contact")
            self._dispatch(SubmitFailed(None))
        else:
            self._dispatch(SubmitSucceeded(contact_id))
            if not self._closed:
                self._schedule_expiry(self._state.expiry_token)
        return self._state

    def close(self) -> None:
        """Detach the controller. In-flight requests keep running but cannot touch state."""
        self._closed = True
        self._cancel_expiry()

    def _dispatch(self, event: FormEvent) -> None:
        if self._closed:
            return
        new_state = reduce(self._state, event, self._messages)
        if new_state is self._state:
            return
        self._state = new_state
        if self._on_change is not None:
            self._on_change(new_state)

    def _schedule_expiry(self, token: int) -> None:
        loop = asyncio.get_running_loop()
        self._expiry_handle = loop.call_later(self._success_ttl, self._expire, token)

    def _expire(self, token: int) -> None:
        self._expiry_handle = None
        self._dispatch(SuccessExpired(token))

    def _cancel_expiry(self) -> None:
        if self._expiry_handle is not None:
            self._expiry_handle.cancel()
            self._expiry_handle = None
