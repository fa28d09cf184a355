"""Package logger: warnings on stderr, optional debug log file with context."""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_STANDARD_RECORD_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime"}


class StructuredFormatter(logging.Formatter):
    """Formatter with ISO UTC timestamps that appends ``extra=`` fields as JSON."""

    def formatTime(self, record: logging.LogRecord, datefmt: Optional[str] = None) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _STANDARD_RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return message
        return f"{message} | {json.dumps(context, sort_keys=True, default=str)}"


class CatalogLogger:
    """Thin wrapper over the ``modelcatalog`` stdlib logger."""

    def __init__(self, name: str = "modelcatalog"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        self._file_handler: Optional[logging.FileHandler] = None

        if not self.logger.handlers:
            level_name = os.getenv("MODELCATALOG_LOG_LEVEL", "WARNING").upper()
            console = logging.StreamHandler(sys.stderr)
            console.setLevel(getattr(logging, level_name, logging.WARNING))
            console.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
            self.logger.addHandler(console)

    @property
    def log_file(self) -> Optional[Path]:
        if self._file_handler is None:
            return None
        return Path(self._file_handler.baseFilename)

    def attach_file_handler(self, log_file: Path) -> Path:
        """Send debug output to ``log_file``, replacing any previous log file."""
        log_file = log_file.resolve()
        if self.log_file == log_file:
            return log_file
        self.detach_file_handler()
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_file, encoding="utf-8")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(StructuredFormatter("%(asctime)s [%(levelname)s] %(message)s"))
        self.logger.addHandler(handler)
        self._file_handler = handler
        return log_file

    def detach_file_handler(self) -> None:
        if self._file_handler is None:
            return
        self.logger.removeHandler(self._file_handler)
        self._file_handler.close()
        self._file_handler = None

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.debug(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self.logger.warning(message, *args, **kwargs)


_logger: Optional[CatalogLogger] = None


def get_logger() -> CatalogLogger:
    """Get the process-wide logger."""
    global _logger
    if _logger is None:
        _logger = CatalogLogger()
    return _logger


def enable_file_logging(log_file: Path) -> Path:
    """Mirror package logs, including debug lines, into ``log_file``."""
    logger = get_logger()
    log_file = logger.attach_file_handler(log_file)
    logger.debug("[logging] File logging enabled", extra={"path": str(log_file)})
    return log_file
