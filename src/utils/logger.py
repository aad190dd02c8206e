import logging
import os
import sys
from logging.handlers import RotatingFileHandler

APP_LOGGER_NAME = "AIReadiness"
LOG_DIR = os.path.join(os.path.expanduser("~"), ".ai_readiness", "logs")
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _file_handler(log_file, formatter):
    """Rotating handler under LOG_DIR, or None when the directory is unwritable."""
    try:
        os.makedirs(LOG_DIR, exist_ok=True)
        handler = RotatingFileHandler(
            os.path.join(LOG_DIR, log_file), maxBytes=2*1024*1024, backupCount=3, encoding="utf-8"
        )
    except OSError as e:
        sys.stderr.write(f"File logging disabled ({LOG_DIR}): {e}\n")
        return None
    handler.setFormatter(formatter)
    return handler


def setup_logger(name=APP_LOGGER_NAME, log_file="readiness.log", level=logging.INFO):
    """
    Application logger. Console output goes to stderr so the CLI report on
    stdout stays clean; everything is also written to a rotating file.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    file_handler = _file_handler(log_file, formatter)
    if file_handler is not None:
        logger.addHandler(file_handler)

    return logger


def set_log_level(level):
    """
    Apply a level name from config ("debug", "INFO", ...) to the application logger.

    Raises:
        ValueError: unknown level name
    """
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")
    log.setLevel(getattr(logging, name))


def get_logger(name: str) -> logging.Logger:
    """Child logger of the application logger, e.g. AIReadiness.src.services.scoring_service."""
    return log.getChild(name)


log = setup_logger()
