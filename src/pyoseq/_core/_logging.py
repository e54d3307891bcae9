"""Logger helpers for the pyoseq package.

The library only attaches a `NullHandler`; call `setup_logger` to see its DEBUG output.
"""

import logging
import os
import sys

ROOT_NAME = "pyoseq"


def get_logger(name: str) -> logging.Logger:
    """Return the child logger of the `pyoseq` root for a module `__name__`."""
    if name == ROOT_NAME or name.startswith(f"{ROOT_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_NAME}.{name}")


def setup_logger(
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """Configure and return the `pyoseq` root logger.

    Args:
        level (str | None): Log level name. Falls back to the `PYOSEQ_LOG_LEVEL` env var, then `WARNING`.
        format_string (str | None): Custom format string.

    Returns:
        logging.Logger: The configured root logger.
    """
    level = level or os.getenv("PYOSEQ_LOG_LEVEL", "WARNING")
    format_string = format_string or (
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logger = logging.getLogger(ROOT_NAME)
    logger.setLevel(getattr(logging, level.upper()))

    # Only add a stream handler once
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)

    return logger
