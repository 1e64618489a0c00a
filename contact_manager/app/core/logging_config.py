"""
Process-wide logging setup for the contact manager.

``create_app`` calls ``setup_logging`` before building the store, so
store open/close and every contact write are logged through the same
root handlers.  Records go to stderr and, when ``LOG_FILE`` is set, to
that file as well.
"""

import logging
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the contact manager's handlers to the root logger.

    Does nothing when the root logger already has handlers, so a test
    runner's capture handlers or an earlier ``create_app`` call win.

    Parameters
    ----------
    level : str
        Name of the root level, e.g. ``"DEBUG"``; unrecognised names
        mean ``INFO``.
    logfile : Optional[str]
        Extra destination for the same records.  Missing parent
        directories are created.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
