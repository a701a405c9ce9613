"""Logging setup for golfscore."""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    log_dir: Optional[Path] = None,
    level: int = logging.INFO,
    log_to_file: bool = True,
    log_to_console: bool = True,
) -> logging.Logger:
    """
    Configure the golfscore logger.

    Module loggers (golfscore.scoring, golfscore.teams, ...) propagate here.

    Args:
        log_dir: Directory for log files (default: ./logs)
        level: Logging level (default: INFO)
        log_to_file: Whether to write a timestamped log file
        log_to_console: Whether to log to stdout

    Returns:
        The configured 'golfscore' logger
    """
    logger = logging.getLogger('golfscore')
    logger.setLevel(level)
    logger.handlers = []

    if log_to_file:
        log_dir = Path(log_dir) if log_dir is not None else Path('logs')
        log_dir.mkdir(parents=True, exist_ok=True)

        log_file = log_dir / f'golfscore_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(
            logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S',
            )
        )
        logger.addHandler(file_handler)

    if log_to_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

    return logger


def get_logger(name: str = 'golfscore') -> logging.Logger:
    """Get a logger inside the golfscore hierarchy."""
    if name != 'golfscore' and not name.startswith('golfscore.'):
        name = f'golfscore.{name}'
    return logging.getLogger(name)
