# File: src/parksim/application/parking_service.py
"""
Parking Simulator Application Service

This module implements the application service layer of the simulator.
It orchestrates the facility aggregate, the simulation clock and the event
bus, and exposes the use cases the console (or any other front end) drives.

Responsibilities:
1. Build domain objects from validated request DTOs
2. Stamp entries and exits with the simulation time
3. Publish the facility's domain events
4. Translate domain results into output DTOs
"""

from typing import List, Optional, Union
from datetime import datetime
import logging

from pydantic import ValidationError

from ..domain.models import Vehicle
from ..domain.aggregates import ParkingFacility
from ..infrastructure.messaging import EventBus
from .clock import SimulationClock
from .dtos import (
    EntryRequestDTO, EntryResultDTO, ExitResultDTO, SessionDTO,
    OccupiedSpotDTO, AvailabilityDTO, DailySummaryDTO, TimeAdvanceDTO,
    VehicleCategoryDTO
)


# ============================================================================
# EXCEPTIONS
# ============================================================================

class ParkingServiceError(Exception):
    """Base exception for parking service errors"""
    pass


class VehicleValidationError(ParkingServiceError):
    """Exception for invalid entry requests"""
    pass


class InvalidTimeAdvanceError(ParkingServiceError):
    """Exception for attempts to move the clock backwards or out of range"""
    pass


# ============================================================================
# MAIN PARKING SERVICE
# ============================================================================

class ParkingService:
    """
    Main application service for the parking simulator

    Use cases:
    1. Vehicle entry and exit
    2. Availability and occupancy listing
    3. Daily report and new-day reset
    4. Simulation time control
    """

    def __init__(
        self,
        facility: ParkingFacility,
        clock: Optional[SimulationClock] = None,
        event_bus: Optional[EventBus] = None
    ):
        self.logger = logging.getLogger(self.__class__.__name__)
        self.facility = facility
        self.clock = clock or SimulationClock()
        self.event_bus = event_bus or EventBus()

        self.logger.info(f"ParkingService initialized (capacity {facility.capacity})")

    @property
    def current_time(self) -> datetime:
        return self.clock.now()

    @property
    def capacity(self) -> int:
        return self.facility.capacity

    def _publish_events(self) -> None:
        self.event_bus.publish_all(self.facility.clear_events())

    # ========================================================================
    # ENTRY / EXIT
    # ========================================================================

    def register_entry(
        self,
        request: Union[EntryRequestDTO, dict]
    ) -> EntryResultDTO:
        """
        Register a vehicle entry at the current simulation time

        Raises: VehicleValidationError if the request is malformed
        Returns: EntryResultDTO, unsuccessful when the facility is full or
        the plate is already parked
        """
        if not isinstance(request, EntryRequestDTO):
            try:
                request = EntryRequestDTO.model_validate(request)
            except ValidationError as e:
                raise VehicleValidationError(f"Invalid entry request: {e}") from e

        plate = request.license_plate
        self.logger.info(f"Processing entry request for {plate}")

        if self.facility.is_parked(plate):
            return EntryResultDTO(
                success=False,
                license_plate=plate,
                message="This vehicle is already parked."
            )

        if self.facility.available_count() == 0:
            return EntryResultDTO(
                success=False,
                license_plate=plate,
                message="Sorry, the car park is full. No spaces available."
            )

        entry_time = self.current_time
        vehicle = Vehicle(
            license_plate=plate,
            entry_time=entry_time,
            category=VehicleCategoryDTO(request.category).to_domain()
        )

        if not self.facility.enter(vehicle):
            return EntryResultDTO(
                success=False,
                license_plate=plate,
                message="The vehicle could not be parked."
            )

        self._publish_events()
        spot = self.facility.find_spot(plate)
        return EntryResultDTO(
            success=True,
            license_plate=plate,
            spot_number=spot.number,
            entry_time=entry_time,
            message=f"Vehicle parked in spot #{spot.number}."
        )

    def register_exit(self, license_plate: str) -> ExitResultDTO:
        """Register a vehicle exit at the current simulation time"""
        plate = license_plate.strip().upper()
        self.logger.info(f"Processing exit request for {plate}")

        payment = self.facility.exit(plate, self.current_time)
        if payment is None:
            return ExitResultDTO(
                success=False,
                license_plate=plate,
                message=f"Vehicle with plate '{plate}' was not found in the car park."
            )

        self._publish_events()
        return ExitResultDTO.from_payment(payment)

    # ========================================================================
    # QUERIES
    # ========================================================================

    def get_availability(self) -> AvailabilityDTO:
        return AvailabilityDTO(
            available=self.facility.available_count(),
            capacity=self.facility.capacity
        )

    def list_parked_vehicles(self) -> List[OccupiedSpotDTO]:
        return [OccupiedSpotDTO.from_domain(spot) for spot in self.facility.list_occupied()]

    def get_last_session(self, license_plate: str) -> Optional[SessionDTO]:
        session = self.facility.last_session(license_plate)
        if session is None:
            return None
        return SessionDTO.from_domain(session)

    def get_daily_summary(self) -> DailySummaryDTO:
        summary = self.facility.ledger_summary()
        return DailySummaryDTO(
            sessions=[SessionDTO.from_domain(s) for s in self.facility.ledger],
            total_vehicles=summary.session_count,
            total_income=summary.total_fee
        )

    def generate_daily_report(self) -> str:
        return self.facility.daily_report()

    # ========================================================================
    # DAY AND TIME CONTROL
    # ========================================================================

    def clear_daily_report(self) -> None:
        """Simulate a new day"""
        self.facility.reset_day()

    def advance_time(self, hours: int = 0, minutes: int = 0) -> datetime:
        """
        Move the simulation clock forward

        Raises: InvalidTimeAdvanceError for negative amounts, or when the
        new time would fall past the end of the calendar
        """
        try:
            request = TimeAdvanceDTO(hours=hours, minutes=minutes)
        except ValidationError as e:
            raise InvalidTimeAdvanceError(f"Invalid time advance: {e}") from e

        try:
            return self.clock.advance(request.hours, request.minutes)
        except OverflowError as e:
            self.logger.warning(f"Rejected time advance of {hours}h {minutes}m: {e}")
            raise InvalidTimeAdvanceError(
                "Cannot advance the simulation time that far."
            ) from e
