import logging

from app.core.config import settings


def get_logger(name: str) -> logging.Logger:
    """
    Return a named logger with a console handler attached once.

    Level comes from LOG_LEVEL so deployments can turn on debug output
    without code changes.
    """
    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL.upper())

    # Console handler for terminal output
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            f"[{name.upper()}] %(levelname)s %(message)s"
        ))
        logger.addHandler(handler)

    return logger
