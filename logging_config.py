# logging_config.py
import logging
from pathlib import Path

LOG_FORMAT = "%(levelname)s: %(asctime)s %(filename)s:%(lineno)d: %(message)s"
DATE_FORMAT = "%Y/%m/%d %H:%M:%S"


def configure_logging(log_file: str, level: str = "INFO") -> logging.Handler:
    """Send all application logging to an append-only file.

    Opening the file happens here, so an unwritable path raises OSError and
    aborts startup.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handler = logging.FileHandler(Path(log_file), mode="a", encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    handler.setLevel(level)
    root_logger.addHandler(handler)
    return handler
