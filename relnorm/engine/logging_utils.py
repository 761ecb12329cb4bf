import logging
import os

LOG_FORMAT = '[%(levelname)s] %(message)s'


def configure_package_logger(name: str = "relnorm") -> logging.Logger:
    """
    Attach a stream handler to the package logger once and set its level from
    the RELNORM_DEBUG environment variable (DEBUG, INFO, WARNING, ...).
    Module loggers below it propagate here.
    """
    logger = logging.getLogger(name)
    log_level_str = os.environ.get("RELNORM_DEBUG", "INFO").upper()
    try:
        logger.setLevel(getattr(logging, log_level_str))
    except AttributeError:
        logger.setLevel(logging.INFO)
    if not logger.hasHandlers():
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def warn_if_large(logger: logging.Logger, operation: str, size: int) -> None:
    """Log a warning before a 2^size enumeration over a large universe."""
    from .config import config
    limit = config.warn_attributes()
    if size > limit:
        logger.warning(
            f"[{operation}] enumerating subsets of {size} attributes "
            f"(2^{size} candidates, warning threshold {limit})"
        )
