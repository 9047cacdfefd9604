"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Literal

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


@dataclass
class UIConfig:
    tick_rate_ms: int = 250  # input poll timeout per loop iteration
    show_help: bool = True


@dataclass
class KeysConfig:
    """Key bindings: a single character, or a curses key name such as KEY_UP."""

    quit: str = "q"
    move_next: str = "KEY_DOWN"
    move_previous: str = "KEY_UP"
    clear_selection: str = "KEY_LEFT"
    switch_view: str = "t"
    stage: str = "s"
    discard: str = "r"
    unstage: str = "u"

    def as_dict(self) -> Dict[str, str]:
        return {
            "quit": self.quit,
            "move_next": self.move_next,
            "move_previous": self.move_previous,
            "clear_selection": self.clear_selection,
            "switch_view": self.switch_view,
            "stage": self.stage,
            "discard": self.discard,
            "unstage": self.unstage,
        }


@dataclass
class LogConfig:
    level: LogLevel = "WARNING"
    file: str = ""  # empty = no log file


@dataclass
class GitStageConfig:
    ui: UIConfig = field(default_factory=UIConfig)
    keys: KeysConfig = field(default_factory=KeysConfig)
    log: LogConfig = field(default_factory=LogConfig)
