from __future__ import annotations

import logging
import sys
from typing import TextIO

from pythonjsonlogger import jsonlogger


def configure_logging(
    level: str = "INFO",
    *,
    json: bool = True,
    stream: TextIO | None = None,
) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream or sys.stdout)
    if json:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s  %(message)s"
        )
    handler.setFormatter(formatter)

    # Avoid duplicate handlers in reload
    root.handlers = [handler]
