from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import IO, Optional

DEFAULT_LOG_PATH = "/var/log/paperless-sshfs-setup.log"

# Between INFO and WARNING: "step finished fine" status lines.
SUCCESS = 25
logging.addLevelName(SUCCESS, "SUCCESS")

_RESET = "\033[0m"
_COLOURS = {
    logging.DEBUG: "",
    logging.INFO: "\033[0;36m",
    SUCCESS: "\033[0;32m",
    logging.WARNING: "\033[1;33m",
    logging.ERROR: "\033[0;31m",
    logging.CRITICAL: "\033[0;31m",
}


def success(logger: logging.Logger, msg: str, *args) -> None:
    logger.log(SUCCESS, msg, *args)


def supports_colour(stream: IO[str]) -> bool:
    """Colour only on a TTY, honouring NO_COLOR and TERM=dumb."""

    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("TERM") == "dumb":
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


class ConsoleFormatter(logging.Formatter):
    """Bare status lines, coloured by level."""

    def __init__(self, colour: bool) -> None:
        super().__init__(fmt="%(message)s")
        self.colour = colour

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        if not self.colour:
            return text
        code = _COLOURS.get(record.levelno, "")
        return f"{code}{text}{_RESET}" if code else text


class _MaxLevelFilter(logging.Filter):
    def __init__(self, max_level: int) -> None:
        super().__init__()
        self.max_level = max_level

    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < self.max_level


def _console_handler(stream: IO[str]) -> logging.Handler:
    h = logging.StreamHandler(stream)
    h.setFormatter(ConsoleFormatter(colour=supports_colour(stream)))
    return h


def configure_logging(
    log_path: str = DEFAULT_LOG_PATH,
    level: int = logging.INFO,
    also_console: bool = True,
    also_file: bool = True,
) -> Optional[str]:
    """Configure logging.

    All commands and decisions are recorded to /var/log/paperless-sshfs-setup.log.

    Notes:
    - If /var/log is not writable we fall back to a file in the working
      directory and report the path actually used.
    - Console output is split: errors go to stderr, everything else to stdout.
    - also_file=False writes nothing to disk (non-root runs, which stop at
      the privilege check).

    Returns the actual file path being used, or None without a file handler.
    """

    logger = logging.getLogger()
    logger.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(logger, "_paperless_sshfs_configured", False):
        return getattr(logger, "_paperless_sshfs_log_path", log_path)

    chosen_path: Optional[str] = log_path
    handlers: list[logging.Handler] = []

    fmt = logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S%z",
    )

    if also_file:
        try:
            Path(os.path.dirname(log_path) or ".").mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path)
        except OSError:
            # Fall back to a writable location.
            chosen_path = str(Path.cwd() / "paperless-sshfs-setup.log")
            file_handler = logging.FileHandler(chosen_path)
        file_handler.setFormatter(fmt)
        handlers.append(file_handler)
    else:
        chosen_path = None

    if also_console:
        out = _console_handler(sys.stdout)
        out.addFilter(_MaxLevelFilter(logging.ERROR))
        handlers.append(out)

        err = _console_handler(sys.stderr)
        err.setLevel(logging.ERROR)
        handlers.append(err)

    for h in handlers:
        logger.addHandler(h)

    setattr(logger, "_paperless_sshfs_configured", True)
    setattr(logger, "_paperless_sshfs_log_path", chosen_path)

    logging.getLogger(__name__).debug(
        "Logging initialized (requested=%s, actual=%s)", log_path, chosen_path
    )
    return chosen_path
