# backend/core/logging_config.py
import logging
import sys

from config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s - %(message)s"


def setup_logging(level: str = None, log_file: str = None):
    """Logs to the console and appends to ``LOG_FILE``."""
    handlers = [logging.StreamHandler(sys.stdout)]
    log_file = log_file if log_file is not None else settings.LOG_FILE
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))

    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    return logging.getLogger("main")
