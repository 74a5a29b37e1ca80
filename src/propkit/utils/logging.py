"""
Logger factory used throughout propkit.

Every component requests its logger through `get_logger` so that handler setup and
verbosity are controlled in one place.
"""

import logging
import sys

from propkit.config import LOG_DATE_FORMAT, LOG_FORMAT


def get_logger(name: str, verbose: bool = False) -> logging.Logger:
    """
    Return a configured logger for a propkit component.

    Parameters
    ----------
    name : str
        Logger name, typically ``f"{__name__}.{self.__class__.__name__}"``.
    verbose : bool, optional
        If True, the logger emits DEBUG records. Otherwise a new logger starts at
        WARNING and an already verbose one is left unchanged.

    Returns
    -------
    logging.Logger
        Logger with a single stdout handler attached.
    """
    logger = logging.getLogger(name)

    # loggers are shared by name; a quiet caller never lowers what a verbose one enabled
    if verbose:
        logger.setLevel(logging.DEBUG)
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.WARNING)

    # attach the handler once; the logger level does the filtering
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
