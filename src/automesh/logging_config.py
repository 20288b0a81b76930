"""
Logging setup for the automesh host program.

Library modules only create module-level loggers; handlers are installed
here, once, by the program entry point.
"""

import logging
import os
import time
from pathlib import Path

LOG_FORMAT = (
    "%(asctime)s.%(msecs)03d <%(threadName)s> [%(levelname)s] "
    "%(filename)s:%(lineno)d - %(message)s"
)
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# "off" maps to None; "trace" has no stdlib level and falls back to DEBUG
LOG_LEVELS: dict[str, int | None] = {
    "off": None,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}

_installed_handlers: list[logging.Handler] = []


def get_log_path() -> Path:
    """
    Location of the log file, creating its directory if needed.

    Returns:
        ``<cache dir>/automesh/automesh.log`` where the cache dir is
        ``$XDG_CACHE_HOME`` or ``~/.cache``
    """
    cache_home = os.environ.get("XDG_CACHE_HOME")
    log_dir = (Path(cache_home) if cache_home else Path.home() / ".cache") / "automesh"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / "automesh.log"


def installed_handlers() -> list[logging.Handler]:
    """Handlers currently installed by ``configure_logging``."""
    return list(_installed_handlers)


def reset_logging() -> None:
    """Remove and close the handlers installed by ``configure_logging``."""
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()


def configure_logging(level: str = "info", log_file: str | Path | bool | None = None) -> None:
    """
    Install console and file handlers on the root logger.

    Calling this again replaces the handlers installed by the previous call
    and leaves any other handlers alone.

    Params:
        level: One of ``LOG_LEVELS``
        log_file: Log file path; None or True for ``get_log_path()``, False
            to log to the console only

    Raises:
        ValueError: If the level name is unknown
    """
    name = level.lower()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level '{level}'. Valid levels are: {', '.join(LOG_LEVELS)}")

    reset_logging()
    root = logging.getLogger()

    numeric_level = LOG_LEVELS[name]
    if numeric_level is None:
        root.setLevel(logging.CRITICAL + 1)
        return

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    formatter.converter = time.gmtime

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file is not False:
        path = get_log_path() if log_file is None or log_file is True else Path(log_file)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed_handlers.append(handler)
    root.setLevel(numeric_level)
