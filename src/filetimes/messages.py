"""Diagnostics written to stderr as ``<prog> <level>: <message>``."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOGGER_NAME = "filetimes"


class ProgramFormatter(logging.Formatter):
    """Prefix each record with the program name and a lower-case level."""

    def __init__(self, prog: str) -> None:
        super().__init__()
        self.prog = prog

    def format(self, record: logging.LogRecord) -> str:
        return f"{self.prog} {record.levelname.lower()}: {record.getMessage()}"


def configure_logging(prog: str, debug: bool = False, stream: Optional[TextIO] = None) -> logging.Logger:
    """Route the package logger to ``stream`` (stderr by default).

    Calling it again replaces the previous handler, so the CLI can raise the
    level once ``--debug`` has been parsed.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(ProgramFormatter(prog))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    logger.propagate = False
    return logger


__all__ = ["LOGGER_NAME", "ProgramFormatter", "configure_logging"]
