"""Shell command runner used by session playback.

Commands run through the host shell, synchronously, with stdout/stderr left
attached to the terminal. Only the exit status comes back.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@dataclass
class CommandResult:
    """Outcome of one executed command."""

    command: str
    returncode: int | None = None
    timed_out: bool = False

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@runtime_checkable
class Runner(Protocol):
    """Anything that can execute a shell command line."""

    def run(self, command: str) -> CommandResult: ...


@dataclass
class ShellRunner:
    """Run a command line with `subprocess.run(..., shell=True)`.

    Blocks until the child exits (or `timeout` seconds pass, if set).
    Failures are logged, never raised.
    """

    timeout: float | None = None

    def run(self, command: str) -> CommandResult:
        logger.debug("Running: %s", command)
        try:
            proc = subprocess.run(command, shell=True, timeout=self.timeout)
        except subprocess.TimeoutExpired:
            logger.warning("Command timed out after %ss: %s", self.timeout, command)
            return CommandResult(command=command, timed_out=True)
        except (OSError, ValueError) as e:
            logger.warning("Failed to launch command %r: %s", command, e)
            return CommandResult(command=command)

        if proc.returncode != 0:
            logger.warning("Command exited with rc=%d: %s", proc.returncode, command)
        return CommandResult(command=command, returncode=proc.returncode)
