"""
Console front end

Connects the interpreter to text streams: one command per input line,
one result per output line, flushed as soon as it is written so an
interactive user sees each answer before typing the next command.
"""

from typing import Optional, TextIO
import logging
import sys

from ..application.interpreter import Interpreter, Terminated
from ..infrastructure.config import InterpreterSettings


class ConsoleApp:
    """Runs the interpreter over a pair of text streams"""

    def __init__(
        self,
        settings: Optional[InterpreterSettings] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None
    ):
        self.settings = settings or InterpreterSettings()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.interpreter = Interpreter(self.settings)
        self.logger = logging.getLogger(self.__class__.__name__)

    def _emit(self, line: str) -> None:
        self.stdout.write(line + "\n")
        self.stdout.flush()

    def run(self) -> Terminated:
        self.logger.info("Console session started")
        session = self.interpreter.run(self.stdin, self._emit)
        self.logger.info("Console session finished")
        return session
