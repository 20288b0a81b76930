"""
Following the automesh log file.

Lines written with ``LOG_FORMAT`` are parsed back into their fields and
coloured by level for the terminal; anything else is passed through as is.
"""

import os
import re
import time
from collections.abc import Callable, Iterator
from pathlib import Path

from colorama import Fore, Style

LOG_LINE_PATTERN = re.compile(
    r"^(?P<timestamp>\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}\.\d{3})\s+"
    r"<(?P<thread>[^>]+)>\s+\[(?P<level>[A-Z]+)\]\s+"
    r"(?P<source>[^:]+):(?P<line>\d+)\s+-\s+(?P<message>.*)$"
)

LEVEL_COLORS = {
    "CRITICAL": Fore.RED,
    "ERROR": Fore.RED,
    "WARNING": Fore.YELLOW,
    "INFO": Fore.GREEN,
    "DEBUG": Fore.BLUE,
}


def colorize_log_line(line: str) -> str:
    """
    Colour one log line by its level.

    Params:
        line: A line from the log file, without its newline

    Returns:
        The line with ANSI colours, or the line unchanged if it does not
        have the log format
    """
    match = LOG_LINE_PATTERN.match(line)
    if match is None:
        return line

    reset = Style.RESET_ALL
    message_color = LEVEL_COLORS.get(match["level"], "")
    return (
        f"{Fore.WHITE}{match['timestamp']}{reset} "
        f"<{Fore.CYAN}{match['thread']}{reset}> "
        f"[{Style.BRIGHT}{match['level']}{reset}] "
        f"{Fore.MAGENTA}{match['source']}{reset}:{Style.BRIGHT}{match['line']}{reset} - "
        f"{message_color}{match['message']}{reset}"
    )


def follow(
    path: str | Path,
    poll_interval: float = 0.5,
    stop: Callable[[], bool] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Iterator[str]:
    """
    Yield lines appended to a file, starting from its current end.

    A line is only yielded once its newline has been written.

    Params:
        path: File to follow
        poll_interval: Seconds to wait when no new data is available
        stop: Checked whenever the end of the file is reached; following
            ends once it returns True. Without it, following never ends.
        sleep: Wait function, called with ``poll_interval``

    Raises:
        OSError: If the file cannot be opened
    """
    with open(path, encoding="utf-8", errors="replace") as handle:
        handle.seek(0, os.SEEK_END)
        pending = ""
        while True:
            chunk = handle.readline()
            if chunk:
                pending += chunk
                if pending.endswith("\n"):
                    yield pending[:-1]
                    pending = ""
                continue
            if stop is not None and stop():
                return
            sleep(poll_interval)
