import logging

from config import LOG_FORMAT, LOG_LEVEL

_configured = False


def configure_logging(level=None):
    """Configure the root logger once for the whole process."""
    global _configured
    if _configured:
        return
    level_name = (level or LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)
    _configured = True


def get_logger(name):
    """Get a logger with the specified name."""
    configure_logging()
    return logging.getLogger(name)


def log_exception(logger, exception, message=None):
    """Log an exception with stack trace."""
    if message:
        logger.error(f"{message}: {exception}")
    logger.exception(exception)
