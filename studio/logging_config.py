"""
Logging configuration for the studio.

User-facing output goes through the print helpers in ui.py; logging carries
diagnostics (request sizes, stop reasons, recovered failures) to stderr.
"""
import logging
import logging.config

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def build_logging_config(verbose: bool = False) -> dict:
    level = "DEBUG" if verbose else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {"format": LOG_FORMAT, "datefmt": "%H:%M:%S"},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "plain",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            "studio": {"handlers": ["console"], "level": level, "propagate": False},
            "anthropic": {"handlers": ["console"], "level": "WARNING", "propagate": False},
        },
        "root": {"handlers": ["console"], "level": "WARNING"},
    }


def configure_logging(verbose: bool = False):
    logging.config.dictConfig(build_logging_config(verbose))
