"""Session registry backed by a plain-text index (one name per line)."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from craifter.sessions.session import Session
from craifter.textio import ENCODING, ERRORS, read_lines

logger = logging.getLogger(__name__)

INDEX_FILENAME = "sessions.txt"


class SessionRegistry:
    """Ordered list of known sessions, persisted by full rewrite of the index."""

    def __init__(self, root: Path, index_path: Path | None = None) -> None:
        self.root = root
        self.index_path = index_path or root / INDEX_FILENAME
        self._sessions: list[Session] = []
        self._ensure_initialized()
        self.load()

    def _ensure_initialized(self) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning("Cannot create sessions root %s: %s", self.root, e)

    def __len__(self) -> int:
        return len(self._sessions)

    def load(self) -> None:
        """Read the index; keep names whose folder still exists."""
        self._sessions.clear()
        if not self.index_path.exists():
            return
        try:
            lines = read_lines(self.index_path)
        except (OSError, ValueError) as e:
            logger.warning("Failed to read session index %s: %s", self.index_path, e)
            return

        for line in lines:
            name = line.strip()
            if not name:
                continue
            if not (self.root / name).is_dir():
                logger.debug("Dropping session %r: folder missing", name)
                continue
            session = Session(name, self.root)
            session.ensure_folders()
            self._sessions.append(session)
        logger.debug("Loaded %d sessions from %s", len(self._sessions), self.index_path)

    def create(self, name: str) -> Session:
        """Create a session, make its folders, and persist the index.

        Names are not deduplicated: a second `create` with the same name
        yields another Session sharing the same folder.
        """
        if self.find_by_name(name) is not None:
            logger.warning("Session %r already exists; adding a duplicate entry", name)
        session = Session(name, self.root)
        session.ensure_folders()
        self._sessions.append(session)
        self.persist()
        logger.info("Created session: %r", name)
        return session

    def find_by_name(self, name: str) -> Session | None:
        for session in self._sessions:
            if session.name == name:
                return session
        return None

    def names(self) -> list[str]:
        return [s.name for s in self._sessions]

    def persist(self) -> bool:
        """Overwrite the index with the current names, in list order.

        Writes a sibling temp file and renames it over the index, so a failed
        write leaves the previous index intact. Returns False on failure.
        """
        content = "".join(f"{name}\n" for name in self.names())
        tmp_path = self.index_path.with_name(f"{self.index_path.name}.tmp")
        try:
            with tmp_path.open("w", encoding=ENCODING, errors=ERRORS, newline="\n") as f:
                f.write(content)
            os.replace(tmp_path, self.index_path)
        except (OSError, ValueError) as e:
            logger.warning("Failed to write session index %s: %s", self.index_path, e)
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError as cleanup_error:
                logger.debug("Cannot remove %s: %s", tmp_path, cleanup_error)
            return False
        logger.debug("Persisted %d sessions to %s", len(self._sessions), self.index_path)
        return True
