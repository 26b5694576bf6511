"""Load and validate the YAML messages shown by the contact form."""

import os
from pathlib import Path

import yaml

REQUIRED_MESSAGES = ("validation_required", "contact_created", "generic_error")


def get_messages_path() -> Path:
    """Return path to the messages YAML (FORM_MESSAGES_PATH env or flows/contact_form.yaml)."""
    path = os.environ.get("FORM_MESSAGES_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return Path(__file__).resolve().parent / "flows" / "contact_form.yaml"


def load_messages(path: Path | None = None) -> dict[str, str]:
    """Load the YAML and return its messages mapping. All required ids must be present."""
    if path is None:
        path = get_messages_path()
    raw = path.read_text(encoding="utf-8")
    data = yaml.safe_load(raw)
    if not isinstance(data, dict):
        raise ValueError("Messages YAML must be a dict")
    messages = data.get("messages")
    if not isinstance(messages, dict):
        raise ValueError("Messages YAML must have a 'messages' mapping")
    missing = [m for m in REQUIRED_MESSAGES if not messages.get(m)]
    if missing:
        raise ValueError(f"Missing messages: {', '.join(missing)}")
    return {str(k): str(v) for k, v in messages.items()}


def format_message(messages: dict, message_id: str, **template_vars) -> str:
    text = messages.get(message_id) or message_id
    for k, v in template_vars.items():
        text = text.replace("{" + k + "}", str(v) if v is not None else "")
    return text


_messages_cache: dict | None = None


def get_messages(cache: bool = True) -> dict[str, str]:
    """Load messages (cached by default). Pass cache=False to reload."""
    global _messages_cache
    if cache and _messages_cache is not None:
        return _messages_cache
    _messages_cache = load_messages()
    return _messages_cache
