# ## File: propdesk_engine/utils/logging_utils.py
# Version: 1.0.0
# Date: 2026-10-18
# Purpose: Centralized logging configuration for the engine.
#          Handlers live on the package logger; module loggers propagate to it.

import logging
import os
import sys
from pathlib import Path
from typing import Optional, Union

ENGINE_LOGGER_NAME = "propdesk_engine"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _resolve_level(level: Union[int, str, None]) -> int:
    if level is None:
        level = os.getenv("PROPDESK_LOG_LEVEL", "INFO")
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        return resolved if isinstance(resolved, int) else logging.INFO
    return level


def setup_logging(
    level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure the engine's package logger once.

    Hosts that already configure logging can skip this; module loggers
    propagate to the root logger either way.

    Args:
        level: Level as int or name; defaults to ``PROPDESK_LOG_LEVEL`` or INFO
        log_file: Optional log file path; defaults to ``PROPDESK_LOG_FILE``
        format_string: Custom format string

    Returns:
        The package logger
    """
    logger = logging.getLogger(ENGINE_LOGGER_NAME)

    # Avoid duplicate handlers on Streamlit reruns
    if logger.handlers:
        if level is not None:
            logger.setLevel(_resolve_level(level))
        return logger

    logger.setLevel(_resolve_level(level))

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    log_file = log_file or os.getenv("PROPDESK_LOG_FILE")
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_path, encoding="utf-8")
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            logger.warning(f"Could not create file handler for {log_file}: {e}")

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a module logger, configuring the package logger on first use.

    Args:
        name: Logger name (usually __name__)
    """
    setup_logging()
    return logging.getLogger(name)
