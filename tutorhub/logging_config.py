"""
Logging setup for the TutorHub API.

``setup_logging`` attaches a console handler (and optionally a file handler)
to the root logger. It is safe to call more than once (tests and
``create_app`` both do).
"""

import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_PREFIX = "tutorhub."


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger once.

    Parameters
    ----------
    level : str
        Logging level name, case insensitive. Unknown names fall back to INFO.
    logfile : Optional[str]
        When given, records are also written to this file (``LOG_FILE``).
    """
    root = logging.getLogger()
    if any((h.get_name() or "").startswith(HANDLER_PREFIX) for h in root.handlers):
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.set_name(HANDLER_PREFIX + "console")
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.set_name(HANDLER_PREFIX + "file")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
