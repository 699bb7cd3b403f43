"""
Centralized logging configuration for the prompt dialog.

Configures the root logger once with:
- Console output on stderr (DEBUG with --debug, WARNING otherwise)
- Optional file output when PROMPT_DIALOG_LOG_FILE is set
- Fresh log file on each launch (no append, no rotation)
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional

from prompt_dialog.config import env_str

# Thread-safe lock for logging configuration
_config_lock = threading.Lock()
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _build_console_handler(debug: bool) -> logging.Handler:
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    console_handler.setLevel(logging.DEBUG if debug else logging.WARNING)
    return console_handler


def _configure_file_handler() -> Optional[logging.Handler]:
    log_file = env_str("PROMPT_DIALOG_LOG_FILE")
    if not log_file:
        return None

    log_path = Path(log_file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_path, mode="w")
    file_handler.setFormatter(logging.Formatter(_LOG_FORMAT, _DATE_FORMAT))
    file_handler.setLevel(logging.DEBUG)
    return file_handler


def _reset_all_handlers(root_logger: logging.Logger) -> None:
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()


def _suppress_noisy_third_parties() -> None:
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)


def setup_logging(debug: bool = False, *, force: bool = False) -> None:
    """Configure logging for the application"""

    with _config_lock:
        root_logger = logging.getLogger()

        if root_logger.handlers and not force:
            return

        _reset_all_handlers(root_logger)

        root_logger.addHandler(_build_console_handler(debug))

        file_handler = _configure_file_handler()
        if file_handler:
            root_logger.addHandler(file_handler)

        root_logger.setLevel(logging.DEBUG)
        _suppress_noisy_third_parties()


__all__ = ["setup_logging"]
