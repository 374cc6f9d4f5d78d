"""
Logging for the contact book.

All modules log through ``get_logger``, which hangs their loggers under the
``contact_book`` base logger. The base logger gets a rich console handler on
stderr, so log lines stay out of the prompts on stdout. A log file under
``logging.dir`` is added only when ``logging.file`` is set in
``config/contact_book.yml``, and it can rotate.
"""

from __future__ import annotations

import logging
from logging import Logger
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from rich.console import Console
from rich.logging import RichHandler

from contact_book.config import get_config

# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------

PROJECT_ROOT = Path(__file__).resolve().parents[3]
BASE_LOGGER_NAME = "contact_book"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_console_handler: logging.Handler | None = None


# -----------------------------------------------------------------------------
# Handlers
# -----------------------------------------------------------------------------

def _level(name: object, default: int) -> int:
    level = getattr(logging, str(name).upper(), None)
    return level if isinstance(level, int) else default


def _file_level() -> int:
    cfg = get_config()
    return logging.DEBUG if cfg.debug else _level(cfg.logging.get("level"), logging.INFO)


def _console_level() -> int:
    cfg = get_config()
    return logging.DEBUG if cfg.debug else _level(cfg.logging.get("console_level"), logging.WARNING)


def _log_file_path(file_name: str, dir_cfg: str) -> Path:
    log_dir = Path(dir_cfg)
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / file_name


def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """File handler for the contact book log; rotates at 2 MB when asked."""
    if rotate:
        handler: logging.Handler = RotatingFileHandler(
            path,
            maxBytes=2 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _base_logger() -> Logger:
    """The ``contact_book`` logger, given its handlers on first use."""
    global _console_handler

    base = logging.getLogger(BASE_LOGGER_NAME)
    if _console_handler is not None:
        return base

    cfg = get_config()
    level = _file_level()
    base.setLevel(level)
    base.propagate = False

    if cfg.logging.get("file"):
        path = _log_file_path(cfg.logging["file"], cfg.logging.get("dir") or "logs")
        base.addHandler(_build_file_handler(path, level, bool(cfg.logging.get("rotate"))))

    _console_handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    _console_handler.setLevel(_console_level())
    base.addHandler(_console_handler)
    return base


# -----------------------------------------------------------------------------
# Logger access
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger that inherits the contact book handlers.

    Short names are placed under the ``contact_book`` namespace, so
    ``get_logger("grouping")`` and ``get_logger("contact_book.grouping")``
    are the same logger.
    """
    base = _base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    if logger is not base:
        logger.setLevel(logging.NOTSET)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_debug(enabled: bool = True) -> None:
    """Switch every handler to DEBUG for ``--verbose``, or back to the configured levels."""
    base = _base_logger()
    level = logging.DEBUG if enabled else _file_level()
    base.setLevel(level)
    for handler in base.handlers:
        if handler is _console_handler and not enabled:
            handler.setLevel(_console_level())
        else:
            handler.setLevel(level)


def list_active_loggers() -> List[str]:
    """Names of the loggers handed out so far."""
    return list(_logger_cache.keys())
