#!/usr/bin/env python3
"""
DTO Unit Tests
"""

import unittest
import sys
from pathlib import Path
from datetime import datetime
from decimal import Decimal

from pydantic import ValidationError

# Add the src directory to the Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from parksim.application.dtos import (
    EntryRequestDTO, ExitResultDTO, SessionDTO, OccupiedSpotDTO,
    AvailabilityDTO, TimeAdvanceDTO, VehicleCategoryDTO, MAX_PLATE_LENGTH
)
from parksim.domain.models import (
    ParkingSession, ParkingPayment, OccupiedSpot, VehicleCategory
)


ENTRY = datetime(2024, 1, 15, 10, 0, 0)
EXIT = datetime(2024, 1, 15, 12, 0, 0)


class TestEntryRequestDTO(unittest.TestCase):
    """Validation of entry requests"""

    def test_plate_is_normalized(self):
        request = EntryRequestDTO(license_plate="  abc123 ", category="car")

        self.assertEqual(request.license_plate, "ABC123")
        self.assertEqual(request.category, VehicleCategoryDTO.CAR)

    def test_blank_plate_rejected(self):
        with self.assertRaises(ValidationError):
            EntryRequestDTO(license_plate="   ", category="car")

    def test_unknown_category_rejected(self):
        with self.assertRaises(ValidationError):
            EntryRequestDTO(license_plate="ABC123", category="bus")

    def test_plate_length_limit(self):
        EntryRequestDTO(license_plate="A" * MAX_PLATE_LENGTH, category="car")
        with self.assertRaises(ValidationError):
            EntryRequestDTO(license_plate="A" * (MAX_PLATE_LENGTH + 1), category="car")

    def test_category_maps_to_domain(self):
        for dto_value in VehicleCategoryDTO:
            with self.subTest(category=dto_value):
                self.assertIsInstance(dto_value.to_domain(), VehicleCategory)
        self.assertIs(VehicleCategoryDTO.DELIVERY_VAN.to_domain(), VehicleCategory.DELIVERY_VAN)

    def test_json_round_trip(self):
        request = EntryRequestDTO(license_plate="ABC123", category="delivery_van")
        self.assertEqual(EntryRequestDTO.from_json(request.to_json()), request)


class TestTimeAdvanceDTO(unittest.TestCase):

    def test_defaults_to_zero(self):
        dto = TimeAdvanceDTO()
        self.assertEqual((dto.hours, dto.minutes), (0, 0))

    def test_negative_values_rejected(self):
        with self.assertRaises(ValidationError):
            TimeAdvanceDTO(hours=-1)
        with self.assertRaises(ValidationError):
            TimeAdvanceDTO(minutes=-5)


class TestResultDTOs(unittest.TestCase):
    """Output DTOs built from domain objects"""

    def test_exit_result_from_payment(self):
        session = ParkingSession("ABC123", "Car", ENTRY, EXIT, Decimal('10.00'))
        result = ExitResultDTO.from_payment(ParkingPayment(session, 2, Decimal('10.00')))

        self.assertTrue(result.success)
        self.assertEqual(result.billed_hours, 2)
        self.assertEqual(result.fee, Decimal('10.00'))
        self.assertEqual(result.session, SessionDTO.from_domain(session))

    def test_occupied_spot_display(self):
        dto = OccupiedSpotDTO.from_domain(OccupiedSpot(2, "Car", "ABC123", ENTRY))
        self.assertEqual(dto.display(), "Spot #2: Car [Plate: ABC123], Entry: 2024-01-15 10:00:00")

    def test_occupied_spot_display_matches_domain(self):
        spot = OccupiedSpot(1, "Delivery Van", "VAN1", ENTRY)
        dto = OccupiedSpotDTO.from_domain(spot)

        self.assertEqual(dto.to_domain(), spot)
        self.assertEqual(dto.display(), str(spot))

    def test_availability(self):
        dto = AvailabilityDTO(available=15, capacity=20)
        self.assertEqual(dto.occupied, 5)
        self.assertAlmostEqual(dto.occupancy_rate, 0.25)

    def test_to_dict_exclude_none(self):
        result = ExitResultDTO(success=False, license_plate="X1", message="not found")
        data = result.to_dict(exclude_none=True)

        self.assertNotIn("session", data)
        self.assertEqual(data["message"], "not found")

    def test_dtos_are_frozen(self):
        dto = AvailabilityDTO(available=1, capacity=2)
        with self.assertRaises(ValidationError):
            dto.available = 0


if __name__ == '__main__':
    unittest.main()
