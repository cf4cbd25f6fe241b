# File: app/core/logging_config.py

"""
Logging for the user service.

Application modules log through ``logging.getLogger(__name__)``. The
uvicorn loggers are pointed at the root logger as well, so server and
request lines share one format and one destination.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def route_server_loggers(level: int) -> None:
    """Drop uvicorn's own handlers and let its records reach the root logger."""
    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
        server_logger.setLevel(level)


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    route_server_loggers(numeric_level)

    root = logging.getLogger()
    # Already configured (second create_application call, pytest capture)
    if root.handlers:
        return
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
