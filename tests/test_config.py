"""Tests for configuration loading."""

import pytest
from pathlib import Path

from craifter.config import load_config

_ENV_KEYS = ["CRAIFTER_SESSIONS_DIR", "CRAIFTER_COMMAND_TIMEOUT", "CRAIFTER_LOG_LEVEL"]


@pytest.fixture(autouse=True)
def clean_env(tmp_path: Path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestConfig:
    def test_defaults(self):
        config = load_config()
        assert config.sessions_dir.name == "sessions"
        assert config.sessions_dir.parent.name == ".craifter"
        assert config.playback.timeout is None
        assert config.log_level == "WARNING"

    def test_index_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CRAIFTER_SESSIONS_DIR", str(tmp_path / "s"))
        config = load_config()
        assert config.index_file == tmp_path / "s" / "sessions.txt"

    def test_env_override(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CRAIFTER_SESSIONS_DIR", str(tmp_path / "elsewhere"))
        monkeypatch.setenv("CRAIFTER_COMMAND_TIMEOUT", "30")
        monkeypatch.setenv("CRAIFTER_LOG_LEVEL", "DEBUG")

        config = load_config()
        assert config.sessions_dir == tmp_path / "elsewhere"
        assert config.playback.timeout == 30.0
        assert config.log_level == "DEBUG"

    def test_toml_file(self, tmp_path: Path):
        toml_path = tmp_path / "craifter.toml"
        toml_path.write_text(f"""
sessions_dir = "{(tmp_path / 'from-toml').as_posix()}"
log_level = "INFO"

[playback]
timeout = 12.5
""")
        config = load_config(toml_path)
        assert config.sessions_dir == tmp_path / "from-toml"
        assert config.playback.timeout == 12.5
        assert config.log_level == "INFO"

    def test_toml_discovered_in_cwd(self, tmp_path: Path):
        (tmp_path / "craifter.toml").write_text('log_level = "ERROR"\n')
        config = load_config()
        assert config.log_level == "ERROR"

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("CRAIFTER_COMMAND_TIMEOUT", "5")
        toml_path = tmp_path / "craifter.toml"
        toml_path.write_text("""
[playback]
timeout = 60
""")
        config = load_config(toml_path)
        assert config.playback.timeout == 5.0  # env wins

    def test_zero_timeout_means_none(self, monkeypatch):
        monkeypatch.setenv("CRAIFTER_COMMAND_TIMEOUT", "0")
        config = load_config()
        assert config.playback.timeout is None
