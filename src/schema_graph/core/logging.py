#!/usr/bin/env python3

import logging
import logging.config
from pythonjsonlogger import jsonlogger


def setup_logging(level: str = "INFO", stream: str = "ext://sys.stderr"):
    """Setup JSON logging configuration

    Logs go to stderr by default so command output on stdout stays parseable.
    """
    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": jsonlogger.JsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(location)s"
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": stream
            }
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level.upper(),
                "propagate": False
            },
            "urllib3": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False
            }
        }
    }

    logging.config.dictConfig(logging_config)
