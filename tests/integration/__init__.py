"""
Integration Tests Package for the parking lot interpreter

These tests drive whole sessions through the interpreter and the console
front end and compare the exact output lines.
"""

from typing import Iterable, List, Optional, Tuple

from parkinglot.application.interpreter import Interpreter, Terminated
from parkinglot.infrastructure.config import InterpreterSettings


def run_session(
    lines: Iterable[str],
    settings: Optional[InterpreterSettings] = None
) -> Tuple[List[str], Terminated]:
    """Run lines through a fresh interpreter, returning (output, final session)"""
    output: List[str] = []
    session = Interpreter(settings).run(lines, output.append)
    return output, session
