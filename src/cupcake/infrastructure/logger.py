import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_ROOT = "cupcake"


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Send every ``cupcake.*`` record to stderr.  Safe to call repeatedly."""
    logger = logging.getLogger(_ROOT)
    logger.setLevel(level.upper())

    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
