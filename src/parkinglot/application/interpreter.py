"""
Command interpreter for the parking lot

The interpreter is a small state machine over three session states:

    AwaitingInitialCreate --create n--> Running(lot) --exit--> Terminated
                          --exit-------------------------------^

step() is a pure function of (session, line) returning the next session
and the output lines for that input. run() drives step() over a line
source, hands every output line to a sink, and stops on Terminated or
when the source runs out.
"""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Tuple, Union
import logging

from ..domain import queries
from ..domain.models import LotState
from ..domain.transitions import Left, Parked, leave, park
from ..infrastructure.config import InterpreterSettings, InvalidCommandPolicy
from . import messages
from .commands import (
    Command, CreateLot, Exit, InvalidCommandError, Leave, Park,
    RegistrationsByColor, SpotsByColor, SpotsByRegistration, Status,
    parse_command
)


# ============================================================================
# SESSION STATES
# ============================================================================

@dataclass(frozen=True)
class AwaitingInitialCreate:
    """No lot exists yet"""


@dataclass(frozen=True)
class Running:
    lot: LotState


@dataclass(frozen=True)
class Terminated:
    """Input is finished; lot is the last state, if one was ever created"""
    lot: Optional[LotState] = None


Session = Union[AwaitingInitialCreate, Running, Terminated]


@dataclass(frozen=True)
class StepResult:
    session: Session
    lines: Tuple[str, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, 'lines', tuple(self.lines))


# ============================================================================
# INTERPRETER
# ============================================================================

class Interpreter:
    """Parses lines, applies commands to the current lot and reports outcomes"""

    def __init__(self, settings: Optional[InterpreterSettings] = None):
        self.settings = settings or InterpreterSettings()
        self.logger = logging.getLogger(self.__class__.__name__)

    @staticmethod
    def initial_session() -> Session:
        return AwaitingInitialCreate()

    def step(self, session: Session, line: str) -> StepResult:
        """Process one input line against the given session"""
        if isinstance(session, Terminated):
            return StepResult(session)

        try:
            command = parse_command(line)
        except InvalidCommandError as e:
            self.logger.debug(f"Invalid command: {e}")
            return self._on_invalid(session, e)

        if isinstance(session, AwaitingInitialCreate):
            return self._before_create(command)
        return self._dispatch(session.lot, command)

    def run(self, lines: Iterable[str], emit: Callable[[str], None]) -> Terminated:
        """
        Feed lines through step() until exit or end of input

        Returns the final Terminated session, carrying the last lot state.
        """
        session = self.initial_session()
        for line in lines:
            result = self.step(session, line)
            for output in result.lines:
                emit(output)
            session = result.session
            if isinstance(session, Terminated):
                return session

        self.logger.debug("End of input reached")
        return Terminated(session.lot if isinstance(session, Running) else None)

    # ------------------------------------------------------------------
    # State handlers
    # ------------------------------------------------------------------

    def _before_create(self, command: Command) -> StepResult:
        if isinstance(command, CreateLot):
            return self._create(command)
        if isinstance(command, Exit):
            return StepResult(Terminated())
        return StepResult(AwaitingInitialCreate(), [messages.LOT_NOT_CREATED])

    def _on_invalid(self, session: Session, error: InvalidCommandError) -> StepResult:
        if isinstance(session, AwaitingInitialCreate):
            return StepResult(session, [messages.LOT_NOT_CREATED])

        if self.settings.on_invalid_command == InvalidCommandPolicy.ABORT:
            self.logger.warning(f"Stopping on invalid command: {error}")
            return StepResult(Terminated(session.lot))
        return StepResult(session, [messages.UNKNOWN_COMMAND])

    def _create(self, command: CreateLot) -> StepResult:
        self.logger.info(f"Created lot with {command.capacity} spots")
        return StepResult(
            Running(LotState.empty(command.capacity)),
            [messages.lot_created(command.capacity)]
        )

    def _dispatch(self, lot: LotState, command: Command) -> StepResult:
        """Apply a parsed command to a running lot"""
        if isinstance(command, Exit):
            return StepResult(Terminated(lot))

        if isinstance(command, CreateLot):
            return self._create(command)

        if isinstance(command, Park):
            result = park(lot, command.vehicle)
            new_lot = result.lot if isinstance(result, Parked) else lot
            return StepResult(Running(new_lot), [messages.park_result(result)])

        if isinstance(command, Leave):
            result = leave(lot, command.spot)
            new_lot = result.lot if isinstance(result, Left) else lot
            return StepResult(Running(new_lot), [messages.leave_result(result)])

        if isinstance(command, Status):
            return StepResult(Running(lot), messages.status_lines(queries.status(lot)))

        if isinstance(command, RegistrationsByColor):
            found = queries.registrations_by_color(lot, command.color)
            return StepResult(Running(lot), [messages.by_color(found, command.color)])

        if isinstance(command, SpotsByColor):
            found = queries.spots_by_color(lot, command.color)
            return StepResult(Running(lot), [messages.by_color(found, command.color)])

        if isinstance(command, SpotsByRegistration):
            found = queries.spots_by_registration(lot, command.registration)
            return StepResult(
                Running(lot), [messages.by_registration(found, command.registration)]
            )

        raise TypeError(f"No handler for command {command!r}")
