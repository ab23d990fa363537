"""Root logger setup for the server process."""

import logging

from src.core.config import Settings

LOG_FORMAT = "%(asctime)s %(filename)s:%(lineno)d %(levelname)s %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"
HANDLER_NAME = "canastra"


def configure_logging(settings: Settings) -> logging.Handler:
    """Send all records to the configured log file (or stderr when no file is set). Safe to call twice."""
    if settings.log_file:
        handler: logging.Handler = logging.FileHandler(settings.log_file, mode="a")
    else:
        handler = logging.StreamHandler()
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
        existing.close()
    root.addHandler(handler)
    root.setLevel(settings.log_level)
    return handler
