"""
Logging Configuration for the Coordinate Engine.

The engine is pure and keeps no records of its own. Anything a caller may
need to notice about a computation (a substituted default zone, a skipped
vertex, an out-of-range value) is reported through the standard logging
hierarchy under the ``coordinate_engine`` namespace.
"""

import logging
import sys

LOGGER_NAMESPACE = "coordinate_engine"

_FORMAT = '%(asctime)s | %(name)s | %(levelname)s | %(message)s'
_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def get_logger(name: str, level: int = logging.INFO) -> logging.Logger:
    """Get a logger configured for the coordinate engine.

    Parameters
    ----------
    name : str
        Logger name (typically __name__). It is placed under the
        ``coordinate_engine`` namespace so applications can tune the whole
        engine with one logger.
    level : int
        Logging level.

    Returns
    -------
    logging.Logger
        Configured logger instance.
    """
    if not name.startswith(LOGGER_NAMESPACE):
        name = f"{LOGGER_NAMESPACE}.{name}"
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger
