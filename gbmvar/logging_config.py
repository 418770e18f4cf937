"""Logging setup for command-line use of the simulator."""

import logging
import logging.config
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def build_logging_config(level: str = "INFO", log_file: Optional[str] = None) -> dict:
    """Build a dictConfig mapping with a console handler and an optional file handler.

    Parameters
    ----------
    level : str, default='INFO'
        Level applied to the ``gbmvar`` logger and its console output
    log_file : str, optional
        Path of a rotating log file receiving DEBUG records and above

    Returns
    -------
    dict
        Configuration accepted by ``logging.config.dictConfig``
    """
    level = level.upper()
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
            "level": level,
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": log_file,
            "maxBytes": 10_485_760,
            "backupCount": 5,
            "formatter": "standard",
            "level": "DEBUG",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": LOG_FORMAT,
                "datefmt": LOG_DATEFMT,
            },
        },
        "handlers": handlers,
        "loggers": {
            "gbmvar": {
                "level": "DEBUG" if log_file else level,
                "handlers": list(handlers),
                "propagate": False,
            },
        },
    }


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    logging.config.dictConfig(build_logging_config(level, log_file))
