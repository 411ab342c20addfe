"""
State transitions for the parking lot

park() and leave() are pure: they take a LotState and return an outcome
value. Successful outcomes carry the new state; rejections leave the
caller holding the state it already had.
"""

from dataclasses import dataclass
from typing import Union
import logging

from .models import LotState, Vehicle


logger = logging.getLogger(__name__)


# ============================================================================
# OUTCOMES
# ============================================================================

@dataclass(frozen=True)
class Parked:
    """Vehicle placed; lot is the new state"""
    lot: LotState
    spot: int
    vehicle: Vehicle


@dataclass(frozen=True)
class ParkingFull:
    """No open spot; the state did not change"""
    vehicle: Vehicle


@dataclass(frozen=True)
class Left:
    """Spot freed; lot is the new state"""
    lot: LotState
    spot: int


@dataclass(frozen=True)
class SpotAlreadyEmpty:
    """Nothing parked at the spot; the state did not change"""
    spot: int


ParkResult = Union[Parked, ParkingFull]
LeaveResult = Union[Left, SpotAlreadyEmpty]


# ============================================================================
# TRANSITIONS
# ============================================================================

def park(lot: LotState, vehicle: Vehicle) -> ParkResult:
    """Park a vehicle in the lowest-numbered open spot"""
    if not lot.has_space():
        logger.debug(f"Lot of {lot.capacity} spots is full, rejecting {vehicle}")
        return ParkingFull(vehicle)

    new_lot, spot = lot.with_vehicle_added(vehicle)
    logger.debug(f"Parked {vehicle} in spot {spot}")
    return Parked(new_lot, spot, vehicle)


def leave(lot: LotState, spot: int) -> LeaveResult:
    """
    Free a spot

    The spot is not range checked: a number outside 1..capacity can never
    be occupied, so it is reported as already empty.
    """
    if lot.vehicle_at(spot) is None:
        logger.debug(f"Spot {spot} is already empty")
        return SpotAlreadyEmpty(spot)

    logger.debug(f"Vehicle left spot {spot}")
    return Left(lot.with_vehicle_removed(spot), spot)
