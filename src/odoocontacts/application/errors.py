"""Failures a contact submission can end in. All surface as one-line messages."""


class SubmissionError(Exception):
    """Base class. `message` is what the form shows to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(SubmissionError):
    """A required field is empty. Detected locally, never reaches the network."""


class AuthenticationError(SubmissionError):
    """The backend did not return a session for the configured credentials."""


class CreationFailed(SubmissionError):
    """The backend answered the create call with an error envelope or no id."""


class TransportError(SubmissionError):
    """Network failure or a response that is not a JSON object."""
