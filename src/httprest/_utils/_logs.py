import logging
import sys

from .constants import LOGGER_NAME

_handler: logging.Handler | None = None


def setup_logging(debug: bool = False) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling it again only adjusts the level; the handler is added once.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    if _handler is None:
        _handler = logging.StreamHandler(sys.stderr)
        _handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        logger.addHandler(_handler)

    logger.setLevel(logging.DEBUG if debug else logging.WARNING)

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    return logger
