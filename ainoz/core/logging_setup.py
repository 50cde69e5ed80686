"""Logging for the relayer process (`ainoz-relayer` / `python -m ainoz.relayer`)."""
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Send every relayer log record to stdout in one format.

    uvicorn is started with log_config=None, so its "uvicorn.*" loggers have no
    handlers of their own and propagate here too; request lines and the
    router's `logger.exception` tracebacks end up in the same stream.

    Args:
        level: LOG_LEVEL from config, a name like "INFO" or a numeric level.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
