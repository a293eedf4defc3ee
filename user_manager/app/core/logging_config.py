"""
Logging configuration shared by the web and console screens.

``setup_logging`` attaches a stderr handler (and optionally a file
handler) to the root logger.  Log records go to stderr so that the
console screen can keep stdout for the user table.  Chatty third-party
loggers such as ``urllib3`` are held at WARNING unless the screen runs
at DEBUG level.
"""

import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

QUIET_LOGGERS = ("urllib3", "httpx")


def setup_logging(
    level: str = "INFO",
    logfile: Optional[str] = None,
    quiet: Iterable[str] = QUIET_LOGGERS,
) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name (e.g. ``"DEBUG"``, ``"INFO"``).  Case
        insensitive; unknown names fall back to INFO.
    logfile : Optional[str]
        Path to a file to log messages to.  Resolved relative to the
        current working directory.
    quiet : Iterable[str]
        Logger names capped at WARNING unless ``level`` is DEBUG.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if numeric_level > logging.DEBUG:
        for name in quiet:
            logging.getLogger(name).setLevel(logging.WARNING)
