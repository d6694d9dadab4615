"""
Logging Setup
=============
Routes the application's and Qt's diagnostics into one logger tree.

The 'fibonaccispiral' logger writes to stdout and, optionally, to a file.
At the default INFO level an animation only reports its start and its end;
the per-square messages of the sequencer and renderer show up with --debug.
Qt's own messages (qWarning, missing fonts on the offscreen platform, ...)
go to 'fibonaccispiral.qt' instead of being printed raw to stderr.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOGGER_NAME = "fibonaccispiral"
LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def qt_message_handler(mode: QtMsgType, context, message: str) -> None:
    """Forward a Qt message to the 'fibonaccispiral.qt' logger."""
    level = _QT_LEVELS.get(mode, logging.WARNING)
    logging.getLogger(f"{LOGGER_NAME}.qt").log(level, message)


def setup_logging(
    debug: bool = False,
    log_file: Optional[str] = None,
    capture_qt: bool = True,
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        debug: Log every animation step (DEBUG) instead of run summaries (INFO).
        log_file: Optional path that receives the same records as stdout.
        capture_qt: Install `qt_message_handler` for Qt's own messages.

    Returns:
        The 'fibonaccispiral' logger.
    """
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # setup may run again in the same process (tests, restarts)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    if capture_qt:
        qInstallMessageHandler(qt_message_handler)

    logger.debug(f"Logging at {logging.getLevelName(level)}" + (f", copy in {log_file}" if log_file else ""))
    return logger
