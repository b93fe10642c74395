"""Logger for updatelift tracing.

The library only emits records on the `updatelift` logger. Handlers are the
host's business; `setup_logger` is an explicit convenience for scripts and
examples and is never called by the library itself.
"""

from __future__ import annotations

import logging
import sys

from updatelift.config import ComposerSettings, get_settings

LOGGER_NAME = "updatelift"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def setup_logger(
    settings: ComposerSettings | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Attach a stderr handler to the updatelift logger and set its level.

    A stream handler is attached only once; later calls just update the level.

    Args:
        settings: Source of the log level. Defaults to `get_settings()`.
        format_string: Custom format string.

    Returns:
        The `updatelift` logger.
    """
    settings = settings or get_settings()
    format_string = format_string or "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S"))
        logger.addHandler(handler)
    logger.setLevel(settings.log_level)

    return logger
