"""A single session: one folder, four append-only logs, and playback."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path

from craifter.runner import CommandResult, Runner, ShellRunner
from craifter.textio import append_line, printable, read_lines

logger = logging.getLogger(__name__)

_WHITESPACE = " \t\n\r\f\v"


class LogKind(Enum):
    """Log kinds as (folder name, file suffix)."""

    COMMAND = ("commands", "command")
    NOTE = ("notes", "note")
    DATA = ("data", "data")
    RESULT = ("results", "result")

    @property
    def folder(self) -> str:
        return self.value[0]

    @property
    def suffix(self) -> str:
        return self.value[1]


def normalize_command(line: str) -> str:
    """Trim whitespace and drop one pair of enclosing double quotes.

    `"ls -la"` → `ls -la`; `ls -la` and `"ls -la` are returned as-is (trimmed).
    """
    cmd = line.strip(_WHITESPACE)
    if len(cmd) >= 2 and cmd.startswith('"') and cmd.endswith('"'):
        cmd = cmd[1:-1]
    return cmd


class Session:
    """A named folder holding command, note, data and result logs."""

    def __init__(self, name: str, root: Path) -> None:
        self.name = name
        self.base_path = root / name

    def __repr__(self) -> str:
        return f"Session({self.name!r}, base_path={str(self.base_path)!r})"

    # ── Paths & folders ──────────────────────────────────────

    def log_path(self, kind: LogKind) -> Path:
        return self.base_path / kind.folder / f"{self.name}_{kind.suffix}.txt"

    def ensure_folders(self) -> None:
        """Create the four log folders. Idempotent."""
        for kind in LogKind:
            try:
                (self.base_path / kind.folder).mkdir(parents=True, exist_ok=True)
            except (OSError, ValueError) as e:
                logger.warning("Cannot create %s for session %r: %s", kind.folder, self.name, e)

    # ── Append ───────────────────────────────────────────────

    def append(self, kind: LogKind, text: str) -> bool:
        """Append one line to a log. Returns False if the write failed."""
        path = self.log_path(kind)
        try:
            append_line(path, text)
        except (OSError, ValueError) as e:
            logger.warning("Failed to append to %s: %s", path, e)
            return False
        return True

    def save_command(self, command: str) -> bool:
        return self.append(LogKind.COMMAND, command)

    def save_note(self, note: str) -> bool:
        return self.append(LogKind.NOTE, note)

    def save_data(self, data: str) -> bool:
        return self.append(LogKind.DATA, data)

    def save_result(self, result: str) -> bool:
        return self.append(LogKind.RESULT, result)

    def read(self, kind: LogKind) -> list[str]:
        """Return the lines of a log, oldest first. Missing log → []."""
        path = self.log_path(kind)
        if not path.exists():
            return []
        try:
            return read_lines(path)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read %s: %s", path, e)
            return []

    # ── Playback ─────────────────────────────────────────────

    def playback(self, runner: Runner | None = None) -> list[CommandResult]:
        """Print the command log (executing each line) and then the note log.

        Data and result logs are not part of playback.
        """
        runner = runner or ShellRunner()
        results: list[CommandResult] = []

        print(printable(f"Playback for session: {self.name}"))

        print("Commands:")
        for line in self.read(LogKind.COMMAND):
            print(printable(line))
            cmd = normalize_command(line)
            if not cmd:
                continue
            print(printable(f"Executing: {cmd}"), flush=True)
            results.append(runner.run(cmd))

        print("Notes:")
        for line in self.read(LogKind.NOTE):
            print(printable(line))

        failed = sum(1 for r in results if not r.ok)
        logger.info(
            "Played back session %s (%d commands, %d failed)", self.name, len(results), failed
        )
        return results
