"""Console logging for the command line tool.

Result lines go to stdout with a bare message format so that the PASS,
FAIL and ERROR prefixes lead each line.
"""

import logging
from logging.config import dictConfig


def _dict_config(level: str) -> dict:
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": "%(message)s"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "plain",
                "stream": "ext://sys.stdout",
            }
        },
        "loggers": {
            "http_header_validator": {"level": level, "handlers": ["console"], "propagate": False},
            "httpx": {"level": "WARNING", "handlers": ["console"], "propagate": False},
            "httpcore": {"level": "WARNING", "handlers": ["console"], "propagate": False},
        },
    }


def configure_logging(verbose: bool = False) -> None:
    """Route package loggers to stdout; DEBUG adds request and response header dumps."""
    dictConfig(_dict_config("DEBUG" if verbose else "INFO"))
