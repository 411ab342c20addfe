"""Logging configuration. Standard output carries command results, so logs go to stderr."""

from pathlib import Path
import logging
import sys

from .config import InterpreterSettings


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(settings: InterpreterSettings) -> logging.Logger:
    """Setup application logging configuration"""
    handlers = [logging.StreamHandler(sys.stderr)]
    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        level=settings.numeric_log_level,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )
    return logging.getLogger('parkinglot')
