"""Line-oriented text I/O for session files.

Files are UTF-8, but undecodable bytes are carried through as surrogate
escapes so a stray byte never stops a read or a write, and command bytes
reach the shell unchanged.
"""

from __future__ import annotations

from pathlib import Path

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only (one append is one line), dropping a trailing "\\r"."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(path: Path) -> list[str]:
    with path.open(encoding=ENCODING, errors=ERRORS, newline="") as f:
        return split_lines(f.read())


def append_line(path: Path, text: str) -> None:
    with path.open("a", encoding=ENCODING, errors=ERRORS) as f:
        f.write(f"{text}\n")


def printable(text: str) -> str:
    """Replace surrogate escapes so the text is safe to print."""
    try:
        data = text.encode(ENCODING, ERRORS)
    except UnicodeEncodeError:
        data = text.encode(ENCODING, "replace")
    return data.decode(ENCODING, "replace")
