# utxo_ledger/utils/logging_config.py
import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s.%(msecs)03d [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s'
DEFAULT_DATEFMT = '%Y-%m-%d %H:%M:%S'

logger = logging.getLogger("utxo_ledger")


def setup_logging(
    level: str = "INFO",
    log_file: Optional[str] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    fmt: str = DEFAULT_FORMAT,
    enable_console: bool = True
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level name
        log_file: Optional path of a rotating log file
        max_bytes: Maximum log file size before rotation
        backup_count: Number of rotated files to keep
        fmt: Record format string
        enable_console: Whether to log to stdout

    Returns:
        The configured ``utxo_ledger`` logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    logger.setLevel(log_level)

    # Clear existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=fmt, datefmt=DEFAULT_DATEFMT)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.debug(f"Logging configured - Level: {level}, File: {log_file}")
    return logger
