"""
Logging for the API server and the ``supergooalros-reindex`` command.

Both entry points call ``setup_logging`` with ``LOG_LEVEL`` and
``LOG_FILE`` from the settings.  Records go to stderr and, when
``LOG_FILE`` is set, to that file as well; a relative ``LOG_FILE`` is
placed next to the SQLite files, under the project root.
"""

import logging
from pathlib import Path
from typing import Optional

from .db import resolve_data_path


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the stderr (and optional file) handler to the root logger.

    Does nothing when the root logger already has handlers, so the API
    and the reindex command can both call it in the same process.  An
    unknown ``level`` name falls back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(resolve_data_path(logfile))
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
