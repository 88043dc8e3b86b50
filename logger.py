import logging
import sys

LOGGER_NAME = "heaps"
FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_logger = logging.getLogger(LOGGER_NAME)


def configure(level=logging.INFO, stream=None):
    """Attach a single stream handler to the heaps logger."""
    if not _logger.handlers:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(FORMAT))
        _logger.addHandler(handler)
    _logger.setLevel(level)
    return _logger


def print_(*args):
    _logger.info(" ".join(str(arg) for arg in args))


def error_(*args):
    _logger.error(" ".join(str(arg) for arg in args))
