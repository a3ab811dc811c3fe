from __future__ import annotations

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fleeting_notes.settings import APP_NAME, LOG_PATH

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"


class SessionFilter(logging.Filter):
    """Stamp every record with the run's session id."""
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


def setup_logging(log_path: Path = LOG_PATH, *, name: str = APP_NAME) -> logging.Logger:
    """
    Rotating file (DEBUG) + stdout (INFO) for the app logger.
    Modules only call logging.getLogger(APP_NAME); main() wires the handlers.
    Calling again returns the already configured logger.
    """
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    log_path.parent.mkdir(parents=True, exist_ok=True)

    fmt = logging.Formatter(LOG_FORMAT)
    for handler, level in (
        (RotatingFileHandler(log_path, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"), logging.DEBUG),
        (logging.StreamHandler(sys.stdout or sys.stderr), logging.INFO),
    ):
        handler.setLevel(level)
        handler.setFormatter(fmt)
        handler.addFilter(SessionFilter())
        logger.addHandler(handler)

    logger.info("Logging initialized. log_file=%s", log_path)
    return logger


def install_exception_hooks(log: logging.Logger) -> None:
    """Route uncaught Python exceptions and Qt warnings into log."""
    def _excepthook(exc_type, exc, tb):
        log.critical("Uncaught exception", exc_info=(exc_type, exc, tb))
        sys.__excepthook__(exc_type, exc, tb)

    sys.excepthook = _excepthook

    from PySide6.QtCore import QtMsgType, qInstallMessageHandler

    levels = {
        QtMsgType.QtDebugMsg: logging.DEBUG,
        QtMsgType.QtInfoMsg: logging.INFO,
        QtMsgType.QtCriticalMsg: logging.ERROR,
        QtMsgType.QtFatalMsg: logging.CRITICAL,
    }

    def _qt_message_handler(mode, context, message):
        log.log(levels.get(mode, logging.WARNING), "Qt: %s | %s:%s", message, context.file, context.line)

    qInstallMessageHandler(_qt_message_handler)
