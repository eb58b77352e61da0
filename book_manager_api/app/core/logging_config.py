"""
Logging configuration for the Book Manager API.

Everything logs through the root logger: application modules use
``logging.getLogger(__name__)``, requests are logged by the HTTP
middleware on the ``book_manager_api.access`` logger, and uvicorn's
own loggers propagate to root when started from ``run.py``.  A file
handler is added when ``LOG_FILE`` is set.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

ACCESS_LOGGER = "book_manager_api.access"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_configured = False


def build_logging_config(level: str = "INFO", logfile: Optional[str] = None) -> Dict[str, Any]:
    """Return a ``logging.config.dictConfig`` dictionary.

    Unknown level names fall back to ``INFO``.
    """
    level_name = level.upper()
    if not isinstance(logging.getLevelName(level_name), int):
        level_name = "INFO"

    handlers: Dict[str, Dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    }
    if logfile:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(logfile).resolve()),
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "root": {"level": level_name, "handlers": list(handlers)},
    }


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Apply :func:`build_logging_config` once per process."""
    global _configured
    if _configured:
        return
    logging.config.dictConfig(build_logging_config(level, logfile))
    _configured = True
