"""Contact form: state machine, reducer, controller, and terminal front end."""

from form.controller import SUCCESS_TTL_SECONDS, ContactFormController
from form.state import (
    FieldEdited,
    SubmitFailed,
    SubmitRequested,
    SubmitSucceeded,
    SuccessExpired,
    reduce,
)

__all__ = [
    "SUCCESS_TTL_SECONDS",
    "ContactFormController",
    "FieldEdited",
    "SubmitFailed",
    "SubmitRequested",
    "SubmitSucceeded",
    "SuccessExpired",
    "reduce",
]
