#!/usr/bin/env python3
"""
Strategy Unit Tests

Tests for spot allocation and pricing strategies.
"""

import unittest
import sys
from pathlib import Path
from datetime import datetime, timedelta
from decimal import Decimal

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from parksim.domain.models import ParkingSpot, Vehicle, VehicleCategory
from parksim.domain.strategies import FirstAvailableSpotStrategy, HourlyPricingStrategy


ENTRY = datetime(2024, 1, 15, 10, 0, 0)


class TestFirstAvailableSpotStrategy(unittest.TestCase):
    """Unit tests for first-fit allocation"""

    def setUp(self):
        self.strategy = FirstAvailableSpotStrategy()
        self.spots = [ParkingSpot(n) for n in range(1, 5)]

    def _occupy(self, *numbers):
        for number in numbers:
            self.spots[number - 1].park(Vehicle(f"P{number}", ENTRY, VehicleCategory.CAR))

    def test_lowest_number_wins(self):
        self.assertEqual(self.strategy.select_spot(self.spots).number, 1)

    def test_skips_occupied_spots(self):
        self._occupy(1, 2)
        self.assertEqual(self.strategy.select_spot(self.spots).number, 3)

    def test_reuses_gap(self):
        self._occupy(1, 3, 4)
        self.assertEqual(self.strategy.select_spot(self.spots).number, 2)

    def test_full_returns_none(self):
        self._occupy(1, 2, 3, 4)
        self.assertIsNone(self.strategy.select_spot(self.spots))

    def test_strategy_name(self):
        self.assertEqual(str(self.strategy), "FirstAvailableSpot Strategy")


class TestHourlyPricingStrategy(unittest.TestCase):
    """Unit tests for hourly pricing"""

    def setUp(self):
        self.strategy = HourlyPricingStrategy()
        self.car = Vehicle("CAR1", ENTRY, VehicleCategory.CAR)
        self.van = Vehicle("VAN1", ENTRY, VehicleCategory.DELIVERY_VAN)

    def test_billed_hours(self):
        cases = [
            (timedelta(0), 0),
            (timedelta(seconds=1), 1),
            (timedelta(minutes=59), 1),
            (timedelta(hours=1), 1),
            (timedelta(hours=1, minutes=1), 2),
            (timedelta(hours=2), 2),
            (timedelta(hours=25, seconds=30), 26),
        ]
        for elapsed, expected in cases:
            with self.subTest(elapsed=elapsed):
                self.assertEqual(self.strategy.billed_hours(ENTRY, ENTRY + elapsed), expected)

    def test_car_fee_for_partial_hour(self):
        hours, fee = self.strategy.calculate(self.car, ENTRY + timedelta(seconds=1))
        self.assertEqual(hours, 1)
        self.assertEqual(fee, Decimal('5.00'))

    def test_car_fee_for_two_hours(self):
        hours, fee = self.strategy.calculate(self.car, datetime(2024, 1, 15, 12, 0, 0))
        self.assertEqual(hours, 2)
        self.assertEqual(fee, Decimal('10.00'))

    def test_van_rate(self):
        hours, fee = self.strategy.calculate(self.van, ENTRY + timedelta(hours=2, minutes=30))
        self.assertEqual(hours, 3)
        self.assertEqual(fee, Decimal('24.00'))

    def test_exit_before_entry_is_clamped(self):
        hours, fee = self.strategy.calculate(self.car, ENTRY - timedelta(hours=3))
        self.assertEqual(hours, 0)
        self.assertEqual(fee, Decimal('0'))

    def test_zero_elapsed_is_free(self):
        hours, fee = self.strategy.calculate(self.car, ENTRY)
        self.assertEqual(hours, 0)
        self.assertEqual(fee, 0)


if __name__ == '__main__':
    unittest.main()
