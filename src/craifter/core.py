"""Craifter context: owns the registry, todo list and router.

Responsibilities:
1. Build the session registry (loads the index from disk)
2. Hold the in-memory todo list
3. Route input lines from any front end
4. Flush the session index on close
"""

from __future__ import annotations

import logging

from craifter.config import CraifterConfig
from craifter.router import CommandRouter
from craifter.runner import ShellRunner
from craifter.sessions.registry import SessionRegistry
from craifter.todo import TodoList

logger = logging.getLogger(__name__)


class Craifter:
    """Process-wide state, passed explicitly and closed explicitly."""

    def __init__(self, config: CraifterConfig) -> None:
        self.config = config
        self.registry = SessionRegistry(config.sessions_dir, index_path=config.index_file)
        self.todos = TodoList()
        self.runner = ShellRunner(timeout=config.playback.timeout)
        self.router = CommandRouter(self.registry, self.todos, self.runner)
        self._closed = False
        logger.info(
            "Craifter ready (sessions=%s, %d loaded)", config.sessions_dir, len(self.registry)
        )

    def handle(self, line: str) -> bool:
        """Route one line of input. Returns False for an unknown command."""
        return self.router.route(line)

    def close(self) -> None:
        """Persist the session index. Safe to call more than once."""
        if self._closed:
            return
        self.registry.persist()
        self._closed = True
