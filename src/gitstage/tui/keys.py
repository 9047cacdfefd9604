"""Key decoding — configured bindings to controller actions."""

from __future__ import annotations

import curses
from typing import Dict, Optional, Union

from gitstage.config.loader import ConfigError
from gitstage.config.schema import KeysConfig
from gitstage.status.controller import Action

KeyCode = Union[int, str]


def key_code(binding: str) -> KeyCode:
    """Resolve a binding to what ``get_wch`` returns: a str, or a KEY_* int."""
    if len(binding) == 1:
        return binding
    code = getattr(curses, binding, None)
    if not isinstance(code, int):
        raise ConfigError(f"unknown curses key name: {binding}")
    return code


class KeyMap:
    """Lookup from a key press to an :class:`Action`."""

    def __init__(self, keys: KeysConfig) -> None:
        self.bindings: Dict[Action, str] = {
            Action(name): binding for name, binding in keys.as_dict().items()
        }
        self._codes: Dict[KeyCode, Action] = {
            key_code(binding): action for action, binding in self.bindings.items()
        }

    def decode(self, key: KeyCode) -> Optional[Action]:
        return self._codes.get(key)

    def label(self, action: Action) -> str:
        binding = self.bindings[action]
        if binding.startswith("KEY_"):
            return binding[4:].lower()
        return binding
