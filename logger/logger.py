"""
Run logging: one file handler, rotated by strategy, plus a console handler.

Strategies:
- daily: rotates at midnight, keeps a month of files (matchsheet.log.2024-01-15)
- size: rotates at 5MB (matchsheet.log.1, matchsheet.log.2, ...)
- session: a fresh file per run (matchsheet_2024-01-15_14-30-25.log)
"""
import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler, TimedRotatingFileHandler
from pathlib import Path
from typing import Callable, Dict, Iterable, Union

from rich.console import Console
from rich.logging import RichHandler

from .constants import LoggingConstants

PathLike = Union[str, Path]


def _ensure_parent(path: PathLike) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def daily_file_handler(
    log_file: PathLike, days_to_keep: int = LoggingConstants.DAILY_BACKUPS
) -> logging.Handler:
    handler = TimedRotatingFileHandler(
        filename=_ensure_parent(log_file),
        when="midnight",
        backupCount=days_to_keep,
        encoding="utf-8",
    )
    handler.suffix = LoggingConstants.DAILY_SUFFIX
    return handler


def size_file_handler(
    log_file: PathLike,
    max_bytes: int = LoggingConstants.MAX_LOG_BYTES,
    backup_count: int = LoggingConstants.SIZE_BACKUPS,
) -> logging.Handler:
    return RotatingFileHandler(
        filename=_ensure_parent(log_file),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )


def session_file_handler(log_file: PathLike) -> logging.Handler:
    """
    New file beside log_file, named <stem>_<timestamp>.log
    """
    log_file = Path(log_file)
    stamp = datetime.now().strftime(LoggingConstants.SESSION_STAMP)
    session_file = log_file.parent / f"{log_file.stem}_{stamp}.log"
    return logging.FileHandler(_ensure_parent(session_file), encoding="utf-8")


FILE_HANDLERS: Dict[str, Callable[..., logging.Handler]] = {
    "daily": daily_file_handler,
    "size": size_file_handler,
    "session": session_file_handler,
}


def console_handler(rich_output: bool = True) -> logging.Handler:
    """
    Console output goes to stderr so Markdown on stdout stays clean.
    """
    if rich_output:
        return RichHandler(
            console=Console(stderr=True), show_time=False, show_path=False
        )
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            LoggingConstants.CONSOLE_FORMAT,
            datefmt=LoggingConstants.CONSOLE_DATE_FORMAT,
        )
    )
    return handler


def setup_smart_logger(
    name: str,
    log_file: PathLike,
    strategy: str = "daily",
    level: int = logging.INFO,
    rich_output: bool = True,
    **handler_options
) -> logging.Logger:
    """
    Configure a named logger with a file handler for the given strategy.

    Args:
        name: Logger name
        log_file: Base log file path
        strategy: "daily", "size", or "session"
        level: Logging level
        rich_output: Use rich for console output
        **handler_options: Passed to the strategy's file handler factory

    Raises:
        ValueError: If the strategy is unknown
    """
    factory = FILE_HANDLERS.get(strategy)
    if factory is None:
        raise ValueError(f"Unknown strategy: {strategy}")

    file_handler = factory(log_file, **handler_options)
    file_handler.setFormatter(
        logging.Formatter(
            LoggingConstants.FILE_FORMAT, datefmt=LoggingConstants.FILE_DATE_FORMAT
        )
    )

    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.addHandler(file_handler)
    logger.addHandler(console_handler(rich_output))
    logger.propagate = False

    if strategy == "session":
        logger.debug(f"Session log file: {file_handler.baseFilename}")
    return logger


def share_handlers(
    source: logging.Logger, names: Iterable[str] = LoggingConstants.PACKAGE_LOGGERS
) -> None:
    """
    Route the named loggers through the handlers already set up on source.
    """
    for name in names:
        target = logging.getLogger(name)
        target.setLevel(source.level)
        target.handlers = list(source.handlers)
        target.propagate = False
