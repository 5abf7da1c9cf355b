"""
Logging configuration for the image spider.

Console output goes through ``colorlog`` with an extra pass that highlights
the inline ``[CATEGORY]`` tags used by the crawler's log lines.  An optional
file handler always records at DEBUG level.
"""

import logging
from pathlib import Path

import colorlog

log = logging.getLogger("image-spider")

_FILE_LOG_FMT = "%(asctime)s [%(levelname)s] %(message)s"
_FILE_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# ── Category colours ───────────────────────────────────────────────
_ANSI_RESET = "\033[0m"
_CATEGORY_STYLES: dict[str, str] = {
    "[PAGE]":  "\033[1;34m",
    "[SAVE]":  "\033[1;32m",
    "[ERR]":   "\033[1;31m",
    "[SKIP]":  "\033[90m",
    "[DUP]":   "\033[90m",
    "[DONE]":  "\033[1;36m",
}


def _apply_category_styles(msg: str) -> str:
    """Inject ANSI colours for known ``[CATEGORY]`` tags in *msg*."""
    for tag, style in _CATEGORY_STYLES.items():
        if tag in msg:
            msg = msg.replace(tag, f"{style}{tag}{_ANSI_RESET}")
    return msg


class _CategoryFormatter(colorlog.ColoredFormatter):
    """Extends ``colorlog.ColoredFormatter`` to also highlight inline
    ``[CATEGORY]`` tags."""

    def format(self, record: logging.LogRecord) -> str:
        return _apply_category_styles(super().format(record))


def setup_logging(debug: bool = False, log_file: str | None = None) -> None:
    """Configure the package logger.

    Parameters
    ----------
    debug : bool
        Enable DEBUG-level console output (default is INFO).
    log_file : str | None
        If given, also write every message to this file path.
    """
    level = logging.DEBUG if debug else logging.INFO
    log.setLevel(logging.DEBUG if log_file else level)
    for handler in list(log.handlers):
        handler.close()
    log.handlers.clear()
    log.propagate = False

    console = colorlog.StreamHandler()
    console.setLevel(level)
    console.setFormatter(_CategoryFormatter(
        "%(log_color)s%(asctime)s [%(levelname)s]%(reset)s %(message)s",
        datefmt="%H:%M:%S",
        log_colors={
            "DEBUG":    "cyan",
            "INFO":     "green",
            "WARNING":  "yellow",
            "ERROR":    "red",
            "CRITICAL": "bold_red",
        },
    ))
    log.addHandler(console)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_path), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(logging.Formatter(_FILE_LOG_FMT, datefmt=_FILE_LOG_DATEFMT))
        log.addHandler(fh)
        log.info("Logging to file: %s", log_path.resolve())
