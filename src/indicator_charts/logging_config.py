"""
Centralized logging configuration.

Provides a single setup_logging function that configures logging with:
- Console output (user-friendly mode shows warnings and above only)
- Optional file output to logs/{service_name}.log
- Fresh log file on each start unless LOG_APPEND=1
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from indicator_charts.config import env_bool

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_MODULE_LOGGER = logging.getLogger(__name__)

_TECHNICAL_FORMAT = "%(asctime)s.%(msecs)03d - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _close_handlers(logger: logging.Logger) -> None:
    """Close all handlers for a logger, logging any errors."""
    for handler in list(logger.handlers):
        try:
            handler.close()
        except OSError as exc:
            _MODULE_LOGGER.debug("Handler close failed for logger '%s': %s", logger.name, exc)


def _build_console_handler(user_friendly: bool) -> logging.Handler:
    if user_friendly:
        formatter = logging.Formatter("%(message)s")
    else:
        formatter = logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING if user_friendly else logging.DEBUG)
    return console_handler


def _build_file_handler(service_name: Optional[str], log_dir: Path) -> Optional[logging.Handler]:
    if not service_name:
        return None

    log_dir.mkdir(parents=True, exist_ok=True)
    file_mode = "a" if env_bool("LOG_APPEND", or_value=False) else "w"
    file_handler = logging.FileHandler(log_dir / f"{service_name}.log", mode=file_mode)
    file_handler.setFormatter(logging.Formatter(_TECHNICAL_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.INFO)
    return file_handler


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)


def setup_logging(
    service_name: Optional[str] = None,
    user_friendly: bool = False,
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
) -> None:
    """Configure root logging; calling it again replaces the existing handlers."""

    with _config_lock:
        root_logger = logging.getLogger()
        _close_handlers(root_logger)
        root_logger.handlers = []

        root_logger.addHandler(_build_console_handler(user_friendly))
        file_handler = _build_file_handler(service_name, log_dir if log_dir is not None else Path.cwd() / "logs")
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(level)
        _suppress_noisy_third_parties()


__all__ = ["setup_logging"]
