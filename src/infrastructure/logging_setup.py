import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional


_LOG_FILE_NAME = "todo-app.log"
_MAX_LOG_BYTES = 5 * 1024 * 1024
_BACKUP_COUNT = 5

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
# uvicorn adds color_message to its own records.
_RECORD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    "color_message",
}


class ContextFormatter(logging.Formatter):
    """Appends the fields passed via ``extra=`` as sorted ``key=value`` pairs."""

    def formatMessage(self, record: logging.LogRecord) -> str:
        message = super().formatMessage(record)
        context = {
            key: value
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRS and not key.startswith("_")
        }
        if not context:
            return message
        pairs = " ".join(f"{key}={context[key]}" for key in sorted(context))
        return f"{message} {pairs}"


def setup_logging(log_dir: Optional[Path] = None, debug: Optional[bool] = None) -> None:
    if debug is None:
        debug = os.getenv("TODO_DEBUG") == "1"
    log_level = logging.DEBUG if debug else logging.INFO
    root_logger = logging.getLogger()
    if getattr(root_logger, "_todo_logging_configured", False):
        root_logger.setLevel(log_level)
        for handler in root_logger.handlers:
            handler.setLevel(log_level)
        return

    log_dir = log_dir or Path(os.getenv("TODO_LOG_DIR") or "./data/logs")
    log_dir.mkdir(parents=True, exist_ok=True)

    formatter = ContextFormatter(_LOG_FORMAT)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setLevel(log_level)
    stream_handler.setFormatter(formatter)

    file_handler = RotatingFileHandler(
        log_dir / _LOG_FILE_NAME,
        maxBytes=_MAX_LOG_BYTES,
        backupCount=_BACKUP_COUNT,
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    root_logger.handlers.clear()
    root_logger.setLevel(log_level)
    root_logger.addHandler(stream_handler)
    root_logger.addHandler(file_handler)
    root_logger._todo_logging_configured = True
