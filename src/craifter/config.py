"""Configuration loading from environment variables and craifter.toml."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

from craifter.sessions.registry import INDEX_FILENAME

_DEFAULT_SESSIONS_DIR = Path.home() / ".craifter" / "sessions"
_CONFIG_FILENAME = "craifter.toml"


@dataclass
class PlaybackConfig:
    """Playback / command execution configuration."""

    timeout: float | None = None


@dataclass
class CraifterConfig:
    """Top-level Craifter configuration."""

    sessions_dir: Path = _DEFAULT_SESSIONS_DIR
    playback: PlaybackConfig = field(default_factory=PlaybackConfig)
    log_level: str = "WARNING"

    @property
    def index_file(self) -> Path:
        return self.sessions_dir / INDEX_FILENAME


def _parse_timeout(value) -> float | None:
    """0, empty or missing means wait forever."""
    if value is None or value == "":
        return None
    timeout = float(value)
    return timeout if timeout > 0 else None


def load_config(config_path: Path | None = None) -> CraifterConfig:
    """Load configuration from environment variables and optional craifter.toml.

    Priority: environment variables > craifter.toml > defaults.
    """
    file_data: dict = {}
    if config_path and config_path.exists():
        file_data = tomllib.loads(config_path.read_text())
    else:
        # Search current dir and ~/.craifter/
        for candidate in [
            Path.cwd() / _CONFIG_FILENAME,
            Path.home() / ".craifter" / _CONFIG_FILENAME,
        ]:
            if candidate.exists():
                file_data = tomllib.loads(candidate.read_text())
                break

    playback_data = file_data.get("playback", {})

    sessions_dir = os.getenv("CRAIFTER_SESSIONS_DIR", file_data.get("sessions_dir"))

    config = CraifterConfig(
        sessions_dir=Path(sessions_dir).expanduser() if sessions_dir else _DEFAULT_SESSIONS_DIR,
        playback=PlaybackConfig(
            timeout=_parse_timeout(
                os.getenv("CRAIFTER_COMMAND_TIMEOUT", playback_data.get("timeout"))
            ),
        ),
        log_level=os.getenv("CRAIFTER_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )
    return config
