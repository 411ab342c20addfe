"""
Domain Models for the parking lot interpreter

This module contains the value objects the rest of the system works on:
1. Vehicle: an immutable registration/color pair
2. LotState: an immutable snapshot of a fixed-capacity lot

Every derivation on LotState returns a new value; nothing here mutates in
place.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


class LotFullError(RuntimeError):
    """Raised when a spot is requested from a lot with no space left"""


# ============================================================================
# VALUE OBJECTS
# ============================================================================

@dataclass(frozen=True)
class Vehicle:
    """
    Value Object: a parked car
    Two vehicles with equal fields are indistinguishable
    """
    registration: str
    color: str

    def __post_init__(self):
        """Validate vehicle fields"""
        if not self.registration:
            raise ValueError("Registration cannot be empty")
        if not self.color:
            raise ValueError("Color cannot be empty")

    def __str__(self) -> str:
        return f"{self.registration} {self.color}"


@dataclass(frozen=True)
class LotState:
    """
    Value Object: occupancy of a fixed-capacity parking lot

    Spots are numbered 1..capacity. The occupancy mapping is copied on
    construction and exposed read-only.
    """
    capacity: int
    occupancy: Mapping[int, Vehicle] = field(default_factory=dict)

    def __post_init__(self):
        """Validate capacity and spot assignments"""
        if isinstance(self.capacity, bool) or not isinstance(self.capacity, int):
            raise ValueError(f"Capacity must be an integer, got: {self.capacity!r}")
        if self.capacity < 0:
            raise ValueError(f"Capacity cannot be negative: {self.capacity}")

        spots = dict(self.occupancy)
        if len(spots) > self.capacity:
            raise ValueError(
                f"{len(spots)} vehicles do not fit in a lot of {self.capacity} spots"
            )
        for spot, vehicle in spots.items():
            if isinstance(spot, bool) or not isinstance(spot, int):
                raise ValueError(f"Spot must be an integer, got: {spot!r}")
            if not 1 <= spot <= self.capacity:
                raise ValueError(f"Spot {spot} is outside 1..{self.capacity}")
            if not isinstance(vehicle, Vehicle):
                raise ValueError(f"Spot {spot} holds {vehicle!r}, not a Vehicle")

        object.__setattr__(self, 'occupancy', MappingProxyType(spots))

    @classmethod
    def empty(cls, capacity: int) -> 'LotState':
        """Create a lot with no vehicles parked"""
        return cls(capacity=capacity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LotState):
            return NotImplemented
        return (
            self.capacity == other.capacity
            and dict(self.occupancy) == dict(other.occupancy)
        )

    def __hash__(self) -> int:
        return hash((self.capacity, frozenset(self.occupancy.items())))

    def __repr__(self) -> str:
        return f"LotState(capacity={self.capacity}, occupancy={dict(self.occupancy)!r})"

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def has_space(self) -> bool:
        """True while at least one spot is free"""
        return len(self.occupancy) < self.capacity

    def is_empty(self) -> bool:
        return not self.occupancy

    def free_spots(self) -> int:
        return self.capacity - len(self.occupancy)

    def vehicle_at(self, spot: int) -> Optional[Vehicle]:
        return self.occupancy.get(spot)

    def occupied(self) -> List[Tuple[int, Vehicle]]:
        """Occupied spots as (spot, vehicle) pairs in ascending spot order"""
        return sorted(self.occupancy.items(), key=lambda item: item[0])

    # ------------------------------------------------------------------
    # Derivations
    # ------------------------------------------------------------------

    def first_open_spot(self) -> int:
        """
        Smallest spot number in 1..capacity that is not occupied

        Raises LotFullError when the lot is full; check has_space() first.
        """
        for spot in range(1, self.capacity + 1):
            if spot not in self.occupancy:
                return spot
        raise LotFullError(f"No open spot in a full lot of {self.capacity} spots")

    def with_vehicle_removed(self, spot: int) -> 'LotState':
        """New state without the given spot, whether or not it was occupied"""
        spots = dict(self.occupancy)
        spots.pop(spot, None)
        return LotState(self.capacity, spots)

    def with_vehicle_added(self, vehicle: Vehicle) -> Tuple['LotState', int]:
        """New state with the vehicle in the first open spot, plus that spot"""
        spot = self.first_open_spot()
        spots = dict(self.occupancy)
        spots[spot] = vehicle
        return LotState(self.capacity, spots), spot
