"""Logging configuration for the bunkapp package."""

import logging
import logging.config


def setup_logging(level: str = "INFO", console: bool = True) -> logging.Logger:
    """
    Configure the ``bunkapp`` logger.

    Args:
        level: Logging level name for the project logger
        console: Whether to attach a console handler

    Returns:
        The configured project logger
    """
    name = "bunkapp"
    level = level.upper()
    if not isinstance(logging.getLevelName(level), int):
        level = "INFO"

    handlers = {}
    if console:
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "level": level,
        }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "format": "{asctime} {levelname:<7} {name} - {message}",
                "style": "{",
            },
        },
        "handlers": handlers,
        "loggers": {
            name: {
                "level": level,
                "handlers": list(handlers),
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(config)
    logger = logging.getLogger(name)
    logger.debug("Logging initialised at %s", level)
    return logger
