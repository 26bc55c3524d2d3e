"""
Logging setup for Trend Radar (loguru).

Modules import the shared logger and never configure sinks themselves:

    from utils import logger
    logger.info(f"Matched {len(events)} events")

Entry points call init_logging() once.
"""
import sys
from pathlib import Path
from typing import Optional

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>{extra[app]}</magenta> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {extra[app]} | {name}:{function} - {message}"

logger.remove()
logger.configure(extra={"app": "-"})

_sinks: list[int] = []


def setup_logging(
    log_dir: Optional[Path] = None,
    log_level: str = "INFO",
    app_name: str = "app",
    retention_days: int = 14,
) -> None:
    """
    Install the console sink and, with log_dir, a daily-rotated file sink.

    Calling it again replaces the sinks installed by the previous call.
    """
    for sink_id in _sinks:
        logger.remove(sink_id)
    _sinks.clear()

    logger.configure(extra={"app": app_name})
    _sinks.append(logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT))

    if log_dir is None:
        return

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    _sinks.append(logger.add(
        log_dir / f"{app_name}_{{time:YYYY-MM-DD}}.log",
        level=log_level,
        format=FILE_FORMAT,
        rotation="00:00",
        retention=f"{retention_days} days",
        compression="gz",
        encoding="utf-8",
    ))
    logger.debug(f"File logging to {log_dir}")


def init_logging(app_name: str = "app") -> None:
    """Configure logging from settings (LOG_LEVEL, LOG_TO_FILE, LOG_DIR)."""
    from config import settings, ensure_directories

    log_dir = None
    if settings.LOG_TO_FILE:
        ensure_directories()
        log_dir = settings.LOG_DIR
    setup_logging(
        log_dir=log_dir,
        log_level=settings.LOG_LEVEL,
        app_name=app_name,
        retention_days=settings.LOG_RETENTION_DAYS,
    )


__all__ = ["logger", "setup_logging", "init_logging"]
