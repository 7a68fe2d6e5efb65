"""Command router: one line of text in, one operation out.

The first space-delimited word selects the command; the rest of the line is
its argument string. Session commands split that string positionally
(`<session> <text...>`); todo commands tokenize it shell-style so a task
can be quoted. Backslashes are kept literally, and a line with an unbalanced
quote falls back to plain whitespace splitting.
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable
from typing import TYPE_CHECKING

from craifter.sessions.session import LogKind
from craifter.textio import printable
from craifter.todo import Priority, TaskStatus

if TYPE_CHECKING:
    from craifter.runner import Runner
    from craifter.sessions.registry import SessionRegistry
    from craifter.todo import TodoList

logger = logging.getLogger(__name__)

UNKNOWN_COMMAND = "Unknown command. Type 'help' for commands."
PROJECT_NOT_FOUND = "Project not found."

HELP_TEXT = """\
Craifter - Session and Task Management Tool
Manage tasks, sessions, and commands with persistence and playback.
Commands:
  addtodo <id> <task> [priority]  - Add a new todo item. Priority: low/medium/high (default: medium).
                                    Example: craifter addtodo fix_bug "Fix login issue" high
  updatetodo <id> <status>        - Update a todo's status. Status: pending/in_progress/completed.
                                    Example: craifter updatetodo fix_bug completed
  showtodos                       - Display all current todos.
  newsession <name>               - Create a new session (project) for organizing commands and notes.
                                    Example: craifter newsession web_deployment
  savecommand <session> <cmd>     - Save a command to a session for later execution.
                                    Example: craifter savecommand web_deployment "git push origin main"
  savenote <session> <note>       - Save a note or description to a session.
  savedata <session> <text>       - Save a line of data to a session.
  saveresult <session> <text>     - Save a result to a session.
  playback <session>              - Display saved commands and notes, executing the commands.
  listsessions                    - List all available sessions.
  runproject <session>            - Same as playback; reports unknown sessions.
  exit                            - Exit the interactive mode.
Usage: craifter <command> or run interactively."""


def _valid_session_name(name: str) -> bool:
    """A session name must be a single path component."""
    return name not in (".", "..") and not any(c in name for c in "/\\\x00")


class CommandRouter:
    """Dispatches raw input lines to session, registry and todo operations."""

    def __init__(
        self,
        registry: SessionRegistry,
        todos: TodoList,
        runner: Runner | None = None,
    ) -> None:
        self.registry = registry
        self.todos = todos
        self.runner = runner
        self._handlers: dict[str, Callable[[str], None]] = {
            "help": self._help,
            "addtodo": self._add_todo,
            "updatetodo": self._update_todo,
            "showtodos": self._show_todos,
            "listsessions": self._list_sessions,
            "newsession": self._new_session,
            "savecommand": lambda args: self._save(LogKind.COMMAND, args),
            "savenote": lambda args: self._save(LogKind.NOTE, args),
            "savedata": lambda args: self._save(LogKind.DATA, args),
            "saveresult": lambda args: self._save(LogKind.RESULT, args),
            "playback": self._playback,
            "runproject": self._run_project,
        }

    def route(self, line: str) -> bool:
        """Handle one input line. Returns False for an unknown command."""
        keyword, _, args = line.partition(" ")
        handler = self._handlers.get(keyword)
        if handler is None:
            print(UNKNOWN_COMMAND)
            return False
        logger.debug("Routing %s (%d arg chars)", keyword, len(args))
        handler(args)
        return True

    # ── Todo commands ────────────────────────────────────────

    def _tokenize(self, args: str) -> list[str]:
        lexer = shlex.shlex(args, posix=True)
        lexer.whitespace_split = True
        lexer.commenters = ""
        lexer.escape = ""
        try:
            return list(lexer)
        except ValueError as e:
            logger.debug("Cannot tokenize %r (%s); splitting on whitespace", args, e)
            return args.split()

    def _add_todo(self, args: str) -> None:
        tokens = self._tokenize(args)
        if len(tokens) < 2:
            logger.debug("addtodo: expected <id> <task> [priority], got %r", args)
            return
        todo_id, task = tokens[0], tokens[1]
        priority = Priority.parse(" ".join(tokens[2:]) or None)
        self.todos.add(todo_id, task, priority)
        print(printable(f"Added todo: {todo_id}"))

    def _update_todo(self, args: str) -> None:
        tokens = self._tokenize(args)
        if len(tokens) < 2:
            logger.debug("updatetodo: expected <id> <status>, got %r", args)
            return
        todo_id = tokens[0]
        status = TaskStatus.parse(" ".join(tokens[1:]))
        if self.todos.update_status(todo_id, status):
            print(printable(f"Updated todo: {todo_id}"))

    def _show_todos(self, args: str) -> None:
        self.todos.display_all()

    # ── Session commands ─────────────────────────────────────

    def _help(self, args: str) -> None:
        print(HELP_TEXT)

    def _list_sessions(self, args: str) -> None:
        print("Sessions:")
        for name in self.registry.names():
            print(printable(f"  {name}"))

    def _new_session(self, name: str) -> None:
        if not name:
            print("Usage: newsession <name>")
            return
        if not _valid_session_name(name):
            print(printable(f"Invalid session name: {name}"))
            return
        self.registry.create(name)
        print(printable(f"Created session: {name}"))

    def _save(self, kind: LogKind, args: str) -> None:
        session_name, sep, text = args.partition(" ")
        if not sep:
            logger.debug("save %s: missing text after session name", kind.suffix)
            return
        session = self.registry.find_by_name(session_name)
        if session is None:
            logger.debug("save %s: no session named %s", kind.suffix, session_name)
            return
        session.append(kind, text)

    def _playback(self, name: str) -> None:
        session = self.registry.find_by_name(name)
        if session is None:
            logger.debug("playback: no session named %s", name)
            return
        session.playback(self.runner)

    def _run_project(self, name: str) -> None:
        session = self.registry.find_by_name(name)
        if session is None:
            print(PROJECT_NOT_FOUND)
            return
        session.playback(self.runner)
