"""Read-only projections over a LotState, all in ascending spot order."""

from typing import List, Tuple

from .models import LotState, Vehicle


def _same(left: str, right: str) -> bool:
    return left.casefold() == right.casefold()


def status(lot: LotState) -> List[Tuple[int, Vehicle]]:
    return lot.occupied()


def registrations_by_color(lot: LotState, color: str) -> List[str]:
    """Registrations of vehicles with the given color, case-insensitively"""
    return [
        vehicle.registration
        for _, vehicle in lot.occupied()
        if _same(vehicle.color, color)
    ]


def spots_by_color(lot: LotState, color: str) -> List[int]:
    """Spots holding vehicles with the given color, case-insensitively"""
    return [spot for spot, vehicle in lot.occupied() if _same(vehicle.color, color)]


def spots_by_registration(lot: LotState, registration: str) -> List[int]:
    """Spots holding vehicles with the given registration, case-insensitively"""
    return [
        spot
        for spot, vehicle in lot.occupied()
        if _same(vehicle.registration, registration)
    ]
