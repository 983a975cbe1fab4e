"""
Logging configuration.

The library only creates module loggers under the 'hyperdisk' namespace and
never installs handlers on import. Host applications call configure_logging
to print those records to the console.
"""
import logging
import sys


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Attach a console handler to the 'hyperdisk' logger.

    Calling this again replaces the handler instead of adding a second one.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger("hyperdisk")
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    logger.addHandler(handler)
    return logger
