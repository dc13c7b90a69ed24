"""Logger configuration for the mapops package."""

import logging
import sys

from mapops.config import LOGGER_NAME, Settings

__all__ = ["setup_logger"]


def setup_logger(config: Settings | None = None) -> logging.Logger:
    """
    Configure and return the package logger.

    Handlers are attached only once; later calls just update the level.
    Records still propagate so applications can capture them.

    Args:
        config: Settings to apply (default: Settings.from_env(), read on each call)

    Returns:
        The "mapops" logger

    Raises:
        pydantic.ValidationError: If config is omitted and a MAPOPS_*
            variable holds an invalid value
    """
    config = config or Settings.from_env()
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        formatter = logging.Formatter(fmt=config.log_format, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(getattr(logging, config.log_level))
    return logger
