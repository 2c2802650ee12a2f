import logging

from rich.console import Console
from rich.logging import RichHandler


PACKAGE_LOGGER = "dirtree"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Send package log records to stderr through a single Rich handler."""
    logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    return logger
