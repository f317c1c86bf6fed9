"""
Log sinks for validation failures.

The validator receives a recorder at construction and calls
``record(message)`` for every failed check. The caller owns the
recorder's lifecycle (opening and closing the log file).
"""

import logging
from pathlib import Path
from typing import Optional, Protocol, Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ValidationRecorder(Protocol):
    """Anything that can record a validation message."""

    def record(self, message: str) -> None:
        ...


class NullRecorder:
    """Recorder that drops every message."""

    def record(self, message: str) -> None:
        pass


class LoggerRecorder:
    """Forward messages to a standard library logger."""

    def __init__(self, logger: logging.Logger, level: int = logging.INFO):
        self.logger = logger
        self.level = level

    def record(self, message: str) -> None:
        self.logger.log(self.level, message)


class FileRecorder(LoggerRecorder):
    """
    Append messages to a log file.

    Uses a dedicated logger that does not propagate, so messages end up in
    the file only and never on the console.
    """

    def __init__(
        self,
        path: Union[str, Path],
        level: int = logging.INFO,
        logger_name: Optional[str] = None,
    ):
        self.path = Path(path)
        name = logger_name or f"idcheck.validation.{self.path.resolve()}"
        logger = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate = False

        self.handler = logging.FileHandler(self.path, mode="a", encoding="utf-8")
        self.handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(self.handler)

        super().__init__(logger, level)

    def close(self) -> None:
        """Detach and close the file handler."""
        self.logger.removeHandler(self.handler)
        self.handler.close()

    def __enter__(self) -> "FileRecorder":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
