# scantiff/logging_setup.py
"""Logging configuration and setup for the scantiff converter."""

import datetime
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from scantiff.config import DEFAULT_LOG_SUBDIR, LOG_BACKUP_COUNT, LOG_DIR_ENV_VAR, LOG_MAX_BYTES

logger = logging.getLogger(__name__)


def get_default_log_directory() -> str:
    """Get the log directory, honouring SCANTIFF_LOG_DIR when it points at a directory.

    Returns:
        Absolute path to the directory log files should go to
    """
    env_dir = os.environ.get(LOG_DIR_ENV_VAR)
    if env_dir and os.path.isdir(env_dir):
        return os.path.abspath(env_dir)
    if env_dir:
        print(f"Warning: {LOG_DIR_ENV_VAR} '{env_dir}' is not a directory. Using default.", file=sys.stderr)
    return str(Path.home() / DEFAULT_LOG_SUBDIR)


def setup_logging(log_directory: str | None = None) -> str | None:
    """Set up logging to file and console.

    The console only shows warnings and errors so that log records do not
    get in the way of the interactive prompts; everything goes to the file.

    Args:
        log_directory: Optional path to log directory. If None, uses get_default_log_directory()

    Returns:
        Path of the log file, or None if only console logging could be set up
    """
    logs_dir = log_directory or get_default_log_directory()
    try:
        os.makedirs(logs_dir, exist_ok=True)
    except OSError as e:
        print(f"ERROR: Cannot create/access log directory '{logs_dir}': {e}", file=sys.stderr)
        logs_dir = None

    log_file = None
    file_handler = None
    if logs_dir:
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_file = os.path.join(logs_dir, f"scantiff_{timestamp}.log")
        try:
            file_handler = RotatingFileHandler(
                log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
            )
            file_handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
            file_handler.setLevel(logging.DEBUG)
        except OSError as e:
            print(f"ERROR: Cannot create log file handler: {e}", file=sys.stderr)
            file_handler = None
            log_file = None

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    console_handler.setLevel(logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers[:]:
        try:
            handler.close()
            root_logger.removeHandler(handler)
        except Exception as e:
            root_logger.debug(f"Error removing handler: {e}")

    if file_handler:
        root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file
