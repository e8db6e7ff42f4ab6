"""Logging configuration for tasktrack."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

# Handlers installed by setup_logging, so repeated calls replace only our own.
_installed: list[logging.Handler] = []


def setup_logging(
    level: int | str = logging.WARNING,
    log_file: str | Path | None = None,
) -> None:
    """Configure the ``tasktrack`` logger.

    Console records go to stderr through rich so they never interleave with
    menu output on stdout. A file handler receiving everything at DEBUG is
    added when ``log_file`` is given.

    Args:
        level: Console log level (name or number)
        log_file: Optional path of a log file to append to
    """
    logger = logging.getLogger("tasktrack")
    logger.setLevel(logging.DEBUG)

    for handler in _installed:
        logger.removeHandler(handler)
        handler.close()
    _installed.clear()

    console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    console_handler.setLevel(level)
    logger.addHandler(console_handler)
    _installed.append(console_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(str(path), encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(
            logging.Formatter(
                fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)
        _installed.append(file_handler)
