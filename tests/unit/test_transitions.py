#!/usr/bin/env python3
"""
Transition and Query Unit Tests

Tests for park/leave and the read-only queries over a lot.
"""

import unittest

from parkinglot.domain import queries
from parkinglot.domain.models import LotState, Vehicle
from parkinglot.domain.transitions import (
    Left, Parked, ParkingFull, SpotAlreadyEmpty, leave, park
)


class TestPark(unittest.TestCase):
    """Unit tests for park()"""

    def test_assigns_smallest_open_spot(self):
        lot = LotState.empty(3)
        for expected in (1, 2, 3):
            result = park(lot, Vehicle(f"REG{expected}", "Red"))
            self.assertIsInstance(result, Parked)
            self.assertEqual(result.spot, expected)
            lot = result.lot

    def test_reuses_freed_spot_first(self):
        lot = LotState(3, {
            1: Vehicle("A1", "Red"),
            3: Vehicle("C3", "Blue"),
        })
        result = park(lot, Vehicle("B2", "Green"))
        self.assertEqual(result.spot, 2)
        self.assertEqual(result.lot.vehicle_at(2), Vehicle("B2", "Green"))

    def test_full_lot_is_rejected_without_change(self):
        lot = LotState(1, {1: Vehicle("A1", "Red")})
        result = park(lot, Vehicle("B2", "Green"))
        self.assertEqual(result, ParkingFull(Vehicle("B2", "Green")))
        self.assertEqual(lot, LotState(1, {1: Vehicle("A1", "Red")}))

    def test_zero_capacity_lot_is_always_full(self):
        self.assertIsInstance(park(LotState.empty(0), Vehicle("A1", "Red")), ParkingFull)

    def test_original_state_untouched(self):
        lot = LotState.empty(2)
        park(lot, Vehicle("A1", "Red"))
        self.assertTrue(lot.is_empty())


class TestLeave(unittest.TestCase):
    """Unit tests for leave()"""

    def setUp(self):
        self.lot = LotState(2, {
            1: Vehicle("KA01HH1234", "White"),
            2: Vehicle("KA01HH9999", "Red"),
        })

    def test_frees_occupied_spot(self):
        result = leave(self.lot, 1)
        self.assertIsInstance(result, Left)
        self.assertEqual(result.spot, 1)
        self.assertEqual(result.lot, LotState(2, {2: Vehicle("KA01HH9999", "Red")}))

    def test_second_leave_reports_empty_but_state_matches(self):
        first = leave(self.lot, 1)
        second = leave(first.lot, 1)

        self.assertIsInstance(first, Left)
        self.assertEqual(second, SpotAlreadyEmpty(1))
        self.assertEqual(first.lot.with_vehicle_removed(1), first.lot)

    def test_out_of_range_spot_is_already_empty(self):
        for spot in (0, -1, 3, 100):
            self.assertEqual(leave(self.lot, spot), SpotAlreadyEmpty(spot))


class TestQueries(unittest.TestCase):
    """Unit tests for the read-only queries"""

    def setUp(self):
        lot = LotState.empty(4)
        # Park out of order: spots 1..4, then free 1 and refill it
        for registration, color in [
            ("KA01HH1234", "White"),
            ("KA01HH9999", "Red"),
            ("KA01BB0001", "white"),
            ("KA01P333", "Black"),
        ]:
            lot = park(lot, Vehicle(registration, color)).lot
        lot = leave(lot, 1).lot
        self.lot = park(lot, Vehicle("KA02ZZ0002", "WHITE")).lot

    def test_status_ascending(self):
        spots = [spot for spot, _ in queries.status(self.lot)]
        self.assertEqual(spots, [1, 2, 3, 4])

    def test_registrations_by_color_case_insensitive(self):
        self.assertEqual(
            queries.registrations_by_color(self.lot, "white"),
            ["KA02ZZ0002", "KA01BB0001"]
        )
        self.assertEqual(
            queries.registrations_by_color(self.lot, "WHITE"),
            queries.registrations_by_color(self.lot, "White")
        )

    def test_spots_by_color(self):
        self.assertEqual(queries.spots_by_color(self.lot, "White"), [1, 3])
        self.assertEqual(queries.spots_by_color(self.lot, "RED"), [2])
        self.assertEqual(queries.spots_by_color(self.lot, "Blue"), [])

    def test_spots_by_registration(self):
        self.assertEqual(queries.spots_by_registration(self.lot, "ka01p333"), [4])
        self.assertEqual(queries.spots_by_registration(self.lot, "KA01HH1234"), [])

    def test_queries_on_empty_lot(self):
        lot = LotState.empty(2)
        self.assertEqual(queries.status(lot), [])
        self.assertEqual(queries.spots_by_color(lot, "Red"), [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
