"""User-facing output lines. Every outcome the interpreter reports is worded here."""

from typing import Iterable, List, Tuple

from ..domain.models import Vehicle
from ..domain.transitions import LeaveResult, Left, ParkResult, Parked


LOT_NOT_CREATED = "Sorry, a parking lot has not been created."
LOT_FULL = "Sorry, the parking lot is full."
LOT_EMPTY = "Parking lot is empty."
UNKNOWN_COMMAND = "Sorry, the command is not recognized."

SEPARATOR = ", "


def lot_created(capacity: int) -> str:
    """Confirmation printed when a lot is (re)created"""
    return f"Created a parking lot with {capacity} spots."


def park_result(result: ParkResult) -> str:
    """Spot assignment, or the full-lot apology"""
    if isinstance(result, Parked):
        return f"{result.vehicle.color} car parked in spot {result.spot}."
    return LOT_FULL


def leave_result(result: LeaveResult) -> str:
    """Freed spot, or the already-empty notice"""
    if isinstance(result, Left):
        return f"Spot {result.spot} is free."
    return f"There is no car in spot {result.spot}."


def status_lines(occupied: List[Tuple[int, Vehicle]]) -> List[str]:
    """One "<spot> <registration> <color>" line per occupied spot"""
    if not occupied:
        return [LOT_EMPTY]
    return [f"{spot} {vehicle.registration} {vehicle.color}" for spot, vehicle in occupied]


def _joined(items: Iterable[object], not_found: str) -> str:
    text = SEPARATOR.join(str(item) for item in items)
    return text or not_found


def by_color(items: Iterable[object], color: str) -> str:
    """Comma-joined matches, or the not-found line for a color query"""
    return _joined(items, f"No cars with color {color} were found.")


def by_registration(items: Iterable[object], registration: str) -> str:
    """Comma-joined matches, or the not-found line for a registration query"""
    return _joined(items, f"No cars with registration number {registration} were found.")
