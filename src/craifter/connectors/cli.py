"""Interactive REPL connector: reads lines from stdin, routes each one."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

logger = logging.getLogger(__name__)

PROMPT = "Craifter> "
EXIT_COMMAND = "exit"

# Callback type: core.Craifter.handle
LineHandler = Callable[[str], object]


class CLIConnector:
    """Read-eval-print loop until `exit`, EOF or Ctrl+C."""

    def __init__(self, prompt: str = PROMPT) -> None:
        self.prompt = prompt

    def start(self, handler: LineHandler) -> None:
        while True:
            try:
                line = self._read_input()
            except KeyboardInterrupt:
                print()
                break

            if line is None:
                print()
                break

            text = line.strip()
            if text == EXIT_COMMAND:
                break
            if not text:
                continue

            handler(text)
        logger.debug("REPL stopped")

    def _read_input(self) -> str | None:
        sys.stdout.write(self.prompt)
        sys.stdout.flush()
        raw = sys.stdin.buffer.readline()
        if not raw:
            return None
        return raw.decode("utf-8", errors="replace").rstrip("\n")
