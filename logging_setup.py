"""Root logging configuration for the command-line entry point."""

import logging
from logging.handlers import RotatingFileHandler
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
DEFAULT_DATEFMT = "%H:%M:%S"

_configured = False  # guard against double-initialisation


def setup_logging(
    *,
    level: int = logging.WARNING,
    fmt: str = DEFAULT_FORMAT,
    datefmt: str = DEFAULT_DATEFMT,
    log_file: Optional[str] = None,
    file_max_bytes: int = 1_000_000,
    file_backup_count: int = 3,
) -> None:
    """
    Configure root logging once. Call this from the entry point only.

    - Library modules just use `logging.getLogger(__name__)`.
    - Adds a stderr handler and an optional rotating file handler.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(formatter)
    root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(
            log_file, maxBytes=file_max_bytes, backupCount=file_backup_count
        )
        fh.setLevel(level)
        fh.setFormatter(formatter)
        root.addHandler(fh)

    _configured = True
    logging.getLogger(__name__).debug(
        "Logging initialised (level=%s)", logging.getLevelName(level))
