"""Package loggers for NTree.

All loggers hang off the ``ntree`` logger. The library never installs
handlers on import; call ``configure_logging`` (or configure the root logger
yourself) to see the DEBUG trail of insertions and queries.
"""

import logging

ROOT_LOGGER_NAME = "ntree"


def get_logger(name: str) -> logging.Logger:
    """Return the ``ntree.<name>`` child logger."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Attach a stream handler to the package logger (idempotent).

    Args:
        level: Logging level name, e.g. "DEBUG" or "WARNING"

    Returns:
        The package logger
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger
