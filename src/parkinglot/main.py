"""
Main entry point for the parking lot interpreter

Reads commands from standard input and writes results to standard output.
Settings come from PARKINGLOT_* environment variables.
"""

from typing import Mapping, Optional, TextIO
import logging
import sys

from .infrastructure.config import InterpreterSettings
from .infrastructure.logging_setup import setup_logging
from .presentation.console import ConsoleApp


def main(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    environ: Optional[Mapping[str, str]] = None
) -> int:
    """Run one console session; returns the process exit code"""
    try:
        settings = InterpreterSettings.from_env(environ)
        logger = setup_logging(settings)
        logger.debug(f"Settings: {settings.model_dump()}")

        ConsoleApp(settings, stdin, stdout).run()
    except Exception as e:
        sys.stderr.write(f"Fatal error: {e}\n")
        logging.getLogger(__name__).error(f"Fatal error in main: {e}")
        return 1
    return 0
