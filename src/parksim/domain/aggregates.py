# File: src/parksim/domain/aggregates.py
"""
Aggregate Roots for the Parking Simulator
Following Domain-Driven Design (DDD) Aggregate Pattern

Aggregates:
1. ParkingFacility - Root aggregate owning spots, the daily ledger and the
   per-plate history

Key Concepts:
- Aggregate Roots enforce business invariants
- Spots are only mutated through the root's enter/exit methods
- Domain events are raised for entries and exits
- Callers receive snapshots or read-only views, never internal collections
"""

from collections import deque
from types import MappingProxyType
from typing import Deque, List, Optional, Dict, Iterator, Mapping, Tuple
from datetime import datetime
import uuid
import logging

from .models import (
    ParkingSpot, Vehicle, ParkingSession, ParkingPayment, OccupiedSpot,
    DomainEvent, VehicleEnteredEvent, VehicleExitedEvent,
    normalize_plate
)
from .reports import DailyReportFormatter, LedgerSummary
from .strategies import (
    SpotAllocationStrategy, PricingStrategy,
    FirstAvailableSpotStrategy, HourlyPricingStrategy
)


# ============================================================================
# BASE AGGREGATE ROOT
# ============================================================================

class AggregateRoot:
    """
    Base class for all aggregate roots
    Provides identity, domain event collection and versioning

    Pending events are held in a bounded buffer: when nobody drains them
    with clear_events(), the oldest are dropped first.
    """

    MAX_PENDING_EVENTS = 1000

    def __init__(self, id: Optional[str] = None):
        self._id = id or str(uuid.uuid4())
        self._version: int = 1
        self._changes: Deque[DomainEvent] = deque(maxlen=self.MAX_PENDING_EVENTS)
        self._logger = logging.getLogger(self.__class__.__name__)

    @property
    def id(self) -> str:
        return self._id

    @property
    def version(self) -> int:
        """Get current aggregate version"""
        return self._version

    def _increment_version(self) -> None:
        self._version += 1

    def _add_domain_event(self, event: DomainEvent) -> None:
        """Add a domain event to the list of changes"""
        self._changes.append(event)
        self._logger.debug(f"Added domain event: {event.__class__.__name__}")

    def clear_events(self) -> List[DomainEvent]:
        """Clear and return all domain events"""
        events = list(self._changes)
        self._changes.clear()
        return events

    @property
    def has_changes(self) -> bool:
        """Check if aggregate has pending domain events"""
        return len(self._changes) > 0


# ============================================================================
# OCCUPANCY VIEW
# ============================================================================

class OccupiedSpotsView:
    """
    Lazy view over the occupied spots of a facility
    Each iteration walks the spots afresh, so the view can be re-iterated
    and always reflects current occupancy.
    """

    def __init__(self, spots: Tuple[ParkingSpot, ...]):
        self._spots = spots

    def __iter__(self) -> Iterator[OccupiedSpot]:
        for spot in self._spots:
            vehicle = spot.occupant
            if vehicle is None:
                continue
            yield OccupiedSpot(
                spot_number=spot.number,
                vehicle_type=vehicle.label,
                license_plate=vehicle.license_plate,
                entry_time=vehicle.entry_time
            )

    def __len__(self) -> int:
        return sum(1 for spot in self._spots if spot.is_occupied)

    def __bool__(self) -> bool:
        return any(spot.is_occupied for spot in self._spots)


# ============================================================================
# PARKING FACILITY AGGREGATE
# ============================================================================

class ParkingFacility(AggregateRoot):
    """
    Aggregate Root: A single parking facility
    Tracks spot occupancy, prices stays on exit and keeps the daily ledger

    Invariants:
    - exactly `capacity` spots, numbered 1..capacity
    - a plate occupies at most one spot (case-insensitive)
    - exit is the only producer of sessions
    """

    def __init__(
        self,
        capacity: int,
        allocation_strategy: Optional[SpotAllocationStrategy] = None,
        pricing_strategy: Optional[PricingStrategy] = None,
        report_formatter: Optional[DailyReportFormatter] = None,
        id: Optional[str] = None
    ):
        super().__init__(id)
        if capacity <= 0:
            raise ValueError(f"Capacity must be greater than 0, got {capacity}")

        self.capacity = capacity
        self.allocation_strategy = allocation_strategy or FirstAvailableSpotStrategy()
        self.pricing_strategy = pricing_strategy or HourlyPricingStrategy()
        self.report_formatter = report_formatter or DailyReportFormatter()

        self._spots: Tuple[ParkingSpot, ...] = tuple(
            ParkingSpot(number) for number in range(1, capacity + 1)
        )
        self._ledger: List[ParkingSession] = []
        self._history: Dict[str, ParkingSession] = {}

        self._logger.info(f"Created ParkingFacility with {capacity} spots (ID: {self.id})")

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def spots(self) -> Tuple[ParkingSpot, ...]:
        return self._spots

    @property
    def ledger(self) -> Tuple[ParkingSession, ...]:
        """Snapshot of the sessions recorded since the last reset"""
        return tuple(self._ledger)

    @property
    def history(self) -> Mapping[str, ParkingSession]:
        """Read-only view of the most recent session per normalized plate"""
        return MappingProxyType(self._history)

    def available_count(self) -> int:
        return sum(1 for spot in self._spots if not spot.is_occupied)

    def occupied_count(self) -> int:
        return self.capacity - self.available_count()

    def find_spot(self, license_plate: str) -> Optional[ParkingSpot]:
        """Find the spot holding the given plate (case-insensitive)"""
        for spot in self._spots:
            if spot.occupant is not None and spot.occupant.has_plate(license_plate):
                return spot
        return None

    def is_parked(self, license_plate: str) -> bool:
        return self.find_spot(license_plate) is not None

    def last_session(self, license_plate: str) -> Optional[ParkingSession]:
        """Most recent completed session for a plate, surviving day resets"""
        return self._history.get(normalize_plate(license_plate))

    def list_occupied(self) -> OccupiedSpotsView:
        """Occupied spots in spot-number order"""
        return OccupiedSpotsView(self._spots)

    def ledger_summary(self) -> LedgerSummary:
        return LedgerSummary.from_sessions(self._ledger)

    def daily_report(self) -> str:
        return self.report_formatter.format(self.ledger)

    # ========================================================================
    # PUBLIC BUSINESS METHODS
    # ========================================================================

    def enter(self, vehicle: Vehicle) -> bool:
        """
        Park a vehicle in the spot chosen by the allocation strategy
        Returns: True if parked, False if the facility is full or the plate
        is already parked
        """
        if self.is_parked(vehicle.license_plate):
            self._logger.warning(f"Vehicle {vehicle.license_plate} is already parked")
            return False

        spot = self.allocation_strategy.select_spot(self._spots)
        if spot is None:
            self._logger.warning(f"Facility full, rejected {vehicle.license_plate}")
            return False

        spot.park(vehicle)
        self._increment_version()
        self._add_domain_event(VehicleEnteredEvent(self.id, spot.number, vehicle))

        self._logger.info(
            f"{vehicle} parked in spot {spot.number} at {vehicle.entry_time}"
        )
        return True

    def exit(self, license_plate: str, exit_time: datetime) -> Optional[ParkingPayment]:
        """
        Release the vehicle with the given plate and record its session
        Returns: ParkingPayment, or None if no such vehicle is parked
        """
        spot = self.find_spot(license_plate)
        if spot is None:
            self._logger.info(f"Vehicle {license_plate} not found")
            return None

        vehicle = spot.occupant
        billed_hours, fee = self.pricing_strategy.calculate(vehicle, exit_time)
        spot.vacate()

        session = ParkingSession(
            license_plate=vehicle.license_plate,
            vehicle_type=vehicle.label,
            entry_time=vehicle.entry_time,
            exit_time=exit_time,
            fee=fee
        )
        self._ledger.append(session)
        self._history[normalize_plate(vehicle.license_plate)] = session

        payment = ParkingPayment(session=session, billed_hours=billed_hours, fee=fee)
        self._increment_version()
        self._add_domain_event(VehicleExitedEvent(self.id, spot.number, payment))

        self._logger.info(
            f"{vehicle} left spot {spot.number}: {billed_hours} h, fee {fee:.2f}"
        )
        return payment

    def reset_day(self) -> None:
        """Start a new day: clear the ledger, keep the history"""
        cleared = len(self._ledger)
        self._ledger.clear()
        self._logger.info(f"Daily ledger cleared ({cleared} sessions)")

    def __repr__(self) -> str:
        return (
            f"ParkingFacility(id={self.id}, capacity={self.capacity}, "
            f"available={self.available_count()})"
        )
