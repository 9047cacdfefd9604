"""Load and merge configuration from .gitstage.toml and env vars."""

from __future__ import annotations

import dataclasses
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from gitstage.config.schema import LOG_LEVELS, GitStageConfig, KeysConfig, LogConfig, UIConfig
from gitstage.errors import GitStageError

CONFIG_FILENAME = ".gitstage.toml"


class ConfigError(GitStageError):
    """Raised when config is malformed or unreadable."""


def find_config_file(repo_root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    candidate = repo_root / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _build_section(data: Dict[str, Any], cls: type, section: str):
    """Build a dataclass from a TOML section dict, ignoring unknown keys."""
    valid_fields = {f.name for f in dataclasses.fields(cls)}
    filtered = {k: v for k, v in data.get(section, {}).items() if k in valid_fields}
    return cls(**filtered)


def _merge_env_overrides(cfg: GitStageConfig) -> None:
    """Apply GITSTAGE_* environment variable overrides."""
    if val := os.environ.get("GITSTAGE_TICK_RATE_MS"):
        try:
            cfg.ui.tick_rate_ms = int(val)
        except ValueError:
            pass
    if val := os.environ.get("GITSTAGE_LOG_LEVEL"):
        if val.upper() in LOG_LEVELS:
            cfg.log.level = val.upper()  # type: ignore[assignment]
    if val := os.environ.get("GITSTAGE_LOG_FILE"):
        cfg.log.file = val


def _validate(cfg: GitStageConfig) -> None:
    if not isinstance(cfg.ui.tick_rate_ms, int) or cfg.ui.tick_rate_ms <= 0:
        raise ConfigError(f"ui.tick_rate_ms must be positive, got {cfg.ui.tick_rate_ms}")
    if str(cfg.log.level).upper() not in LOG_LEVELS:
        raise ConfigError(f"Unknown log level: {cfg.log.level}")
    cfg.log.level = cfg.log.level.upper()  # type: ignore[assignment]

    seen: Dict[str, str] = {}
    for action, key in cfg.keys.as_dict().items():
        if not isinstance(key, str) or not key:
            raise ConfigError(f"keys.{action} must be a non-empty string")
        if len(key) > 1 and not key.startswith("KEY_"):
            raise ConfigError(f"keys.{action}: {key!r} is neither a character nor a KEY_ name")
        if key in seen:
            raise ConfigError(f"keys.{action} and keys.{seen[key]} are both bound to {key!r}")
        seen[key] = action


def load_config(
    repo_root: Path,
    config_override: Optional[str] = None,
) -> GitStageConfig:
    """Load, validate, and return a GitStageConfig."""
    config_path = find_config_file(repo_root, config_override)

    if config_path is None:
        cfg = GitStageConfig()
    else:
        raw = _parse_toml(config_path)
        try:
            cfg = GitStageConfig(
                ui=_build_section(raw, UIConfig, "ui"),
                keys=_build_section(raw, KeysConfig, "keys"),
                log=_build_section(raw, LogConfig, "log"),
            )
        except (TypeError, AttributeError) as exc:
            raise ConfigError(f"Invalid section in {config_path}: {exc}") from exc

    _merge_env_overrides(cfg)
    _validate(cfg)
    return cfg
