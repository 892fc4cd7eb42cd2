# settlement_qif/utilities/config_logging.py
from __future__ import annotations

import logging.config
from pathlib import Path
from typing import Any, Dict, Optional

LOG_DIR = Path("logs")
LOG_FILE_NAME = "settlement_qif.log"

LOGGING: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {"format": "%(levelname)s %(name)s: %(message)s"},
        "verbose": {
            "format": "%(asctime)s %(levelname)s %(name)s "
            "[%(process)d:%(threadName)s] %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "INFO",
            "formatter": "simple",
        },
        "file": {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "formatter": "verbose",
            "filename": str(LOG_DIR / LOG_FILE_NAME),
            "maxBytes": 5_000_000,
            "backupCount": 5,
            "encoding": "utf-8",
        },
    },
    "loggers": {
        # root logger
        "": {
            "level": "DEBUG",
            "handlers": ["console", "file"],
        },
    },
}


def configure_logging(verbose: bool = False, log_dir: Optional[Path] = None) -> None:
    """Apply ``LOGGING``, creating the directory the rotating file handler writes to."""
    handlers = {name: dict(h) for name, h in LOGGING["handlers"].items()}
    target = Path(log_dir) if log_dir is not None else LOG_DIR
    target.mkdir(parents=True, exist_ok=True)
    handlers["file"]["filename"] = str(target / LOG_FILE_NAME)
    if verbose:
        handlers["console"]["level"] = "DEBUG"
    logging.config.dictConfig({**LOGGING, "handlers": handlers})
