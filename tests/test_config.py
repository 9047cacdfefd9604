"""Tests for config loading, validation, and env var overrides."""

from pathlib import Path

import pytest

from gitstage.config.defaults import DEFAULT_TOML
from gitstage.config.loader import ConfigError, load_config


class TestConfigLoading:
    def test_default_config(self, tmp_path: Path):
        cfg = load_config(tmp_path)
        assert cfg.ui.tick_rate_ms == 250
        assert cfg.keys.stage == "s"
        assert cfg.keys.move_next == "KEY_DOWN"
        assert cfg.log.level == "WARNING"
        assert cfg.log.file == ""

    def test_starter_template_matches_defaults(self, tmp_path: Path):
        (tmp_path / ".gitstage.toml").write_text(DEFAULT_TOML)
        cfg = load_config(tmp_path)
        assert cfg.keys.as_dict() == load_config(tmp_path / "nowhere").keys.as_dict()

    def test_custom_toml(self, tmp_path: Path):
        (tmp_path / ".gitstage.toml").write_text(
            '[ui]\n'
            'tick_rate_ms = 100\n'
            'show_help = false\n'
            '[keys]\n'
            'stage = "a"\n'
            'unknown_action = "z"\n'
            '[log]\n'
            'level = "debug"\n'
        )
        cfg = load_config(tmp_path)
        assert cfg.ui.tick_rate_ms == 100
        assert cfg.ui.show_help is False
        assert cfg.keys.stage == "a"
        assert cfg.log.level == "DEBUG"

    def test_config_override_path(self, tmp_path: Path):
        custom = tmp_path / "custom.toml"
        custom.write_text('[keys]\nquit = "x"\n')
        cfg = load_config(tmp_path, config_override=str(custom))
        assert cfg.keys.quit == "x"

    def test_missing_override_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path, config_override="/nonexistent/config.toml")

    def test_invalid_toml_raises(self, tmp_path: Path):
        (tmp_path / ".gitstage.toml").write_text("this is not valid [toml")
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestValidation:
    def test_duplicate_binding(self, tmp_path: Path):
        (tmp_path / ".gitstage.toml").write_text('[keys]\nstage = "q"\n')
        with pytest.raises(ConfigError, match="both bound"):
            load_config(tmp_path)

    def test_empty_binding(self, tmp_path: Path):
        (tmp_path / ".gitstage.toml").write_text('[keys]\ndiscard = ""\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_multichar_binding_must_be_key_name(self, tmp_path: Path):
        (tmp_path / ".gitstage.toml").write_text('[keys]\ndiscard = "del"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_bad_tick_rate(self, tmp_path: Path):
        (tmp_path / ".gitstage.toml").write_text('[ui]\ntick_rate_ms = 0\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)

    def test_bad_log_level(self, tmp_path: Path):
        (tmp_path / ".gitstage.toml").write_text('[log]\nlevel = "LOUD"\n')
        with pytest.raises(ConfigError):
            load_config(tmp_path)


class TestEnvVarOverrides:
    def test_tick_rate_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITSTAGE_TICK_RATE_MS", "50")
        assert load_config(tmp_path).ui.tick_rate_ms == 50

    def test_log_overrides(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITSTAGE_LOG_LEVEL", "info")
        monkeypatch.setenv("GITSTAGE_LOG_FILE", "/tmp/gitstage.log")
        cfg = load_config(tmp_path)
        assert cfg.log.level == "INFO"
        assert cfg.log.file == "/tmp/gitstage.log"

    def test_invalid_env_ignored(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("GITSTAGE_TICK_RATE_MS", "fast")
        monkeypatch.setenv("GITSTAGE_LOG_LEVEL", "LOUD")
        cfg = load_config(tmp_path)
        assert cfg.ui.tick_rate_ms == 250
        assert cfg.log.level == "WARNING"
