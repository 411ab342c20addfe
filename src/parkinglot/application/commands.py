"""
Commands for the parking lot interpreter

Each input line is parsed into exactly one Command. Commands are small
immutable values carrying only what their handler needs, and each can
render itself back to its canonical text form.

Grammar (keywords are case-sensitive, the line is trimmed first):
    status
    exit
    create <non-negative int>
    park <registration> <color>
    leave <int>
    reg_by_color <color>
    spot_by_color <color>
    spot_by_reg <registration>
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict
import logging
import re

from ..domain.models import Vehicle


logger = logging.getLogger(__name__)

_COUNT_RE = re.compile(r'[0-9]+')
_SPOT_RE = re.compile(r'[+-]?[0-9]+')


class InvalidCommandError(ValueError):
    """Raised when a line matches no command or carries a malformed argument"""

    def __init__(self, line: str, reason: str):
        super().__init__(f"{reason}: {line!r}")
        self.line = line
        self.reason = reason


# ============================================================================
# COMMAND VARIANTS
# ============================================================================

class Command(ABC):
    """Base class for everything the interpreter can be asked to do"""

    keyword: str = ""

    @abstractmethod
    def to_text(self) -> str:
        """Canonical input line for this command"""

    def get_description(self) -> str:
        return self.__class__.__name__


@dataclass(frozen=True)
class CreateLot(Command):
    capacity: int
    keyword = "create"

    def to_text(self) -> str:
        return f"{self.keyword} {self.capacity}"


@dataclass(frozen=True)
class Park(Command):
    vehicle: Vehicle
    keyword = "park"

    def to_text(self) -> str:
        return f"{self.keyword} {self.vehicle.registration} {self.vehicle.color}"


@dataclass(frozen=True)
class Leave(Command):
    spot: int
    keyword = "leave"

    def to_text(self) -> str:
        return f"{self.keyword} {self.spot}"


@dataclass(frozen=True)
class Status(Command):
    keyword = "status"

    def to_text(self) -> str:
        return self.keyword


@dataclass(frozen=True)
class RegistrationsByColor(Command):
    color: str
    keyword = "reg_by_color"

    def to_text(self) -> str:
        return f"{self.keyword} {self.color}"


@dataclass(frozen=True)
class SpotsByColor(Command):
    color: str
    keyword = "spot_by_color"

    def to_text(self) -> str:
        return f"{self.keyword} {self.color}"


@dataclass(frozen=True)
class SpotsByRegistration(Command):
    registration: str
    keyword = "spot_by_reg"

    def to_text(self) -> str:
        return f"{self.keyword} {self.registration}"


@dataclass(frozen=True)
class Exit(Command):
    keyword = "exit"

    def to_text(self) -> str:
        return self.keyword


# ============================================================================
# PARSER
# ============================================================================

def _to_int(line: str, argument: str, reason: str) -> int:
    # int() refuses digit strings longer than sys.get_int_max_str_digits()
    try:
        return int(argument)
    except ValueError:
        raise InvalidCommandError(line, reason) from None


def _parse_create(line: str, argument: str) -> Command:
    reason = "Lot size must be a non-negative integer"
    if not _COUNT_RE.fullmatch(argument):
        raise InvalidCommandError(line, reason)
    return CreateLot(_to_int(line, argument, reason))


def _parse_park(line: str, argument: str) -> Command:
    registration, separator, color = argument.partition(' ')
    color = color.strip()
    if not separator or not registration or not color:
        raise InvalidCommandError(line, "Expected a registration and a color")
    return Park(Vehicle(registration, color))


def _parse_leave(line: str, argument: str) -> Command:
    reason = "Spot must be an integer"
    if not _SPOT_RE.fullmatch(argument):
        raise InvalidCommandError(line, reason)
    return Leave(_to_int(line, argument, reason))


_PARSERS: Dict[str, Callable[[str, str], Command]] = {
    CreateLot.keyword: _parse_create,
    Park.keyword: _parse_park,
    Leave.keyword: _parse_leave,
    RegistrationsByColor.keyword: lambda line, arg: RegistrationsByColor(arg),
    SpotsByColor.keyword: lambda line, arg: SpotsByColor(arg),
    SpotsByRegistration.keyword: lambda line, arg: SpotsByRegistration(arg),
}


def parse_command(line: str) -> Command:
    """
    Parse one input line into a Command

    Raises InvalidCommandError for anything outside the grammar.
    """
    text = line.strip()
    if text == Status.keyword:
        return Status()
    if text == Exit.keyword:
        return Exit()

    keyword, _, argument = text.partition(' ')
    parser = _PARSERS.get(keyword)
    if parser is None:
        raise InvalidCommandError(line, "Unknown command")

    argument = argument.strip()
    if not argument:
        raise InvalidCommandError(line, f"Missing argument for '{keyword}'")

    command = parser(line, argument)
    logger.debug(f"Parsed {command.get_description()} from {text!r}")
    return command
