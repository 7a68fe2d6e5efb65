"""Tests for the Craifter context, the REPL connector and the entry point."""

import io

import pytest
from pathlib import Path

from craifter.__main__ import main
from craifter.config import CraifterConfig, PlaybackConfig
from craifter.connectors.cli import CLIConnector
from craifter.core import Craifter


@pytest.fixture
def config(tmp_path: Path) -> CraifterConfig:
    return CraifterConfig(
        sessions_dir=tmp_path / "sessions",
        playback=PlaybackConfig(timeout=5),
    )


@pytest.fixture
def craifter(config: CraifterConfig) -> Craifter:
    return Craifter(config)


def feed_stdin(monkeypatch, text: str) -> None:
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(text.encode("utf-8"))))


class TestCraifterCore:
    def test_runner_uses_configured_timeout(self, craifter: Craifter):
        assert craifter.runner.timeout == 5
        assert craifter.router.runner is craifter.runner

    def test_registry_uses_configured_index(self, craifter: Craifter, config: CraifterConfig):
        assert craifter.registry.index_path == config.index_file

    def test_handle(self, craifter: Craifter, capsys):
        assert craifter.handle("newsession alpha") is True
        assert craifter.handle("bogus") is False
        out = capsys.readouterr().out.splitlines()
        assert out == ["Created session: alpha", "Unknown command. Type 'help' for commands."]

    def test_close_persists_index(self, craifter: Craifter, config: CraifterConfig):
        craifter.handle("newsession alpha")
        config.index_file.unlink()
        craifter.close()
        assert config.index_file.read_text(encoding="utf-8") == "alpha\n"

    def test_close_twice(self, craifter: Craifter, config: CraifterConfig):
        craifter.close()
        craifter.close()
        assert config.index_file.exists()

    def test_state_survives_restart(self, config: CraifterConfig, capsys):
        first = Craifter(config)
        first.handle("newsession alpha")
        first.handle("savenote alpha remember this")
        first.close()

        second = Craifter(config)
        second.handle("playback alpha")
        assert "remember this" in capsys.readouterr().out.splitlines()

    def test_todos_not_persisted(self, config: CraifterConfig):
        first = Craifter(config)
        first.handle("addtodo t1 task")
        first.close()
        assert Craifter(config).todos.items == []


class TestCLIConnector:
    def test_routes_until_exit(self, monkeypatch, capsys):
        feed_stdin(monkeypatch, "  help  \n\nexit\nlistsessions\n")
        seen: list[str] = []
        CLIConnector().start(seen.append)
        assert seen == ["help"]
        assert capsys.readouterr().out.count("Craifter> ") == 3

    def test_stops_on_eof(self, monkeypatch, capsys):
        feed_stdin(monkeypatch, "showtodos\n")
        seen: list[str] = []
        CLIConnector().start(seen.append)
        assert seen == ["showtodos"]

    def test_stops_on_ctrl_c(self, monkeypatch, capsys):
        def interrupt(self):
            raise KeyboardInterrupt

        monkeypatch.setattr(CLIConnector, "_read_input", interrupt)
        seen: list[str] = []
        CLIConnector().start(seen.append)
        assert seen == []
        assert capsys.readouterr().out == "\n"


class TestMain:
    @pytest.fixture(autouse=True)
    def env(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path / "home"))
        monkeypatch.setenv("CRAIFTER_SESSIONS_DIR", str(tmp_path / "sessions"))
        monkeypatch.delenv("CRAIFTER_COMMAND_TIMEOUT", raising=False)

    def test_one_shot_joins_args(self, tmp_path: Path, capsys):
        main(["newsession", "alpha"])
        main(["savenote", "alpha", "two", "words"])
        assert (tmp_path / "sessions" / "sessions.txt").read_text(encoding="utf-8") == "alpha\n"
        note = tmp_path / "sessions" / "alpha" / "notes" / "alpha_note.txt"
        assert note.read_text(encoding="utf-8") == "two words\n"

    def test_interactive(self, tmp_path: Path, monkeypatch, capsys):
        feed_stdin(monkeypatch, "newsession beta\nlistsessions\nexit\n")
        main([])
        out = capsys.readouterr().out
        assert "Created session: beta" in out
        assert "  beta" in out
        assert (tmp_path / "sessions" / "sessions.txt").read_text(encoding="utf-8") == "beta\n"
