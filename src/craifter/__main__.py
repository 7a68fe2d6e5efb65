"""Entry point: python -m craifter [command ...]

- No args:   Interactive REPL (type 'exit' to quit)
- With args: Join args with spaces, run that one command, exit
"""

from __future__ import annotations

import logging
import sys

from craifter.config import load_config


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    config = load_config()
    _setup_logging(config.log_level)

    from craifter.core import Craifter

    craifter = Craifter(config)
    try:
        if args:
            craifter.handle(" ".join(args))
        else:
            from craifter.connectors.cli import CLIConnector

            CLIConnector().start(craifter.handle)
    finally:
        craifter.close()


if __name__ == "__main__":
    main()
