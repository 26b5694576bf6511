"""
Contact form state machine using xstate-python.

Loads standard XState JSON (id, initial, states with on: { EVENT: target })
and uses the library for transitions. The same file can be opened in
Stately Studio.
"""

import json
import os
from pathlib import Path

from xstate.machine import Machine


def _flows_dir() -> Path:
    return Path(__file__).resolve().parent / "flows"


def get_machine_path() -> Path:
    """Return path to the machine JSON (FORM_MACHINE_PATH env or flows/contact_form_machine.json)."""
    path = os.environ.get("FORM_MACHINE_PATH", "").strip()
    if path:
        return Path(path).resolve()
    return _flows_dir() / "contact_form_machine.json"


def load_machine(path: Path | None = None) -> dict:
    if path is None:
        path = get_machine_path()
    raw = path.read_text(encoding="utf-8")
    config = json.loads(raw)
    if "initial" not in config or "states" not in config:
        raise ValueError("Machine must have 'initial' and 'states'")
    config.setdefault("id", path.stem)
    states = config["states"]
    if not isinstance(states, dict) or config["initial"] not in states:
        raise ValueError(f"initial '{config['initial']}' must be a state")
    for name, node in states.items():
        for event, target in ((node or {}).get("on") or {}).items():
            if not isinstance(target, str) or target not in states:
                raise ValueError(
                    f"State '{name}' event '{event}' targets unknown state {target!r}"
                )
    return config


def _machine_instance(config: dict) -> Machine:
    """Return a Machine instance for this config. Cached per config object."""
    cache: dict[int, tuple[dict, Machine]] = getattr(_machine_instance, "_cache", {})
    key = id(config)
    entry = cache.get(key)
    if entry is None or entry[0] is not config:
        entry = (config, Machine(config))
        cache[key] = entry
        _machine_instance._cache = cache
    return entry[1]


def transition(machine: dict, state_value: str, event: str) -> str | None:
    """
    Return next state value for (state_value, event), or None if the state
    does not handle the event. A declared self-transition returns the same value.
    """
    node = machine["states"].get(state_value)
    if node is None or event not in ((node or {}).get("on") or {}):
        return None
    instance = _machine_instance(machine)
    state = instance.state_from(state_value)
    return instance.transition(state, event).value


# Module-level cache for config dict (for get_machine)
_machine_cache: dict | None = None


def get_machine(cache: bool = True) -> dict:
    global _machine_cache
    if cache and _machine_cache is not None:
        return _machine_cache
    _machine_cache = load_machine()
    return _machine_cache
