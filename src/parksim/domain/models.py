# File: src/parksim/domain/models.py
"""
Domain Models for the Parking Simulator
Following Domain-Driven Design (DDD) principles with rich domain models

This module contains:
1. Enums: the closed vehicle catalog with rates and labels
2. Entities: vehicles and numbered parking spots
3. Value Objects: completed parking sessions and exit payments
4. Domain Events: events representing entries and exits

Time is never read from the system clock here; every timestamp is supplied
by the caller.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Dict, Any
from datetime import datetime
from decimal import Decimal
import uuid
from enum import Enum


DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def normalize_plate(license_plate: str) -> str:
    """Canonical form of a plate used for case-insensitive comparison"""
    return license_plate.strip().upper()


def format_timestamp(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


# ============================================================================
# VEHICLE CATALOG
# ============================================================================

class VehicleCategory(Enum):
    """
    Enumeration of vehicle categories
    Each category carries a fixed hourly rate and a display label
    """
    CAR = "car"
    DELIVERY_VAN = "delivery_van"

    @property
    def hourly_rate(self) -> Decimal:
        """Get hourly parking rate for this category"""
        return _HOURLY_RATES[self]

    @property
    def label(self) -> str:
        """Get human-readable label for this category"""
        return _LABELS[self]

    def __str__(self) -> str:
        return self.label


_HOURLY_RATES = {
    VehicleCategory.CAR: Decimal('5.00'),
    VehicleCategory.DELIVERY_VAN: Decimal('8.00'),
}

_LABELS = {
    VehicleCategory.CAR: "Car",
    VehicleCategory.DELIVERY_VAN: "Delivery Van",
}


# ============================================================================
# DOMAIN ENTITIES
# ============================================================================

@dataclass
class Vehicle:
    """
    Entity: A vehicle identified by its license plate
    The plate and category are fixed; entry_time may be reassigned
    """
    license_plate: str
    entry_time: datetime
    category: VehicleCategory

    def __post_init__(self):
        """Validate vehicle attributes"""
        if not self.license_plate or not self.license_plate.strip():
            raise ValueError("License plate cannot be empty")

        if not isinstance(self.category, VehicleCategory):
            raise ValueError(f"Unknown vehicle category: {self.category!r}")

    @property
    def hourly_rate(self) -> Decimal:
        return self.category.hourly_rate

    @property
    def label(self) -> str:
        return self.category.label

    def has_plate(self, license_plate: str) -> bool:
        """Case-insensitive plate comparison"""
        return normalize_plate(self.license_plate) == normalize_plate(license_plate)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "license_plate": self.license_plate,
            "entry_time": self.entry_time.isoformat(),
            "category": self.category.value,
            "label": self.label,
            "hourly_rate": float(self.hourly_rate)
        }

    def __str__(self) -> str:
        return f"{self.label} [Plate: {self.license_plate}]"


class ParkingSpot:
    """
    Entity: Numbered parking space holding at most one vehicle
    State machine: Empty -> Occupied (park) -> Empty (vacate)
    """

    def __init__(self, number: int):
        if number <= 0:
            raise ValueError("Spot number must be positive")

        self.number = number
        self._occupant: Optional[Vehicle] = None

    @property
    def occupant(self) -> Optional[Vehicle]:
        return self._occupant

    @property
    def is_occupied(self) -> bool:
        return self._occupant is not None

    def park(self, vehicle: Vehicle) -> None:
        """
        Place a vehicle in the spot
        Raises: ValueError if spot is already occupied
        """
        if self.is_occupied:
            raise ValueError(f"Spot {self.number} is already occupied")

        self._occupant = vehicle

    def vacate(self) -> Optional[Vehicle]:
        """Remove and return the parked vehicle, if any"""
        vehicle = self._occupant
        self._occupant = None
        return vehicle

    def __repr__(self) -> str:
        return f"ParkingSpot(number={self.number}, occupant={self._occupant!r})"

    def __str__(self) -> str:
        if self._occupant is None:
            return f"Spot #{self.number}: (Available)"
        return (
            f"Spot #{self.number}: {self._occupant} "
            f"since {format_timestamp(self._occupant.entry_time)}"
        )


# ============================================================================
# VALUE OBJECTS
# ============================================================================

@dataclass(frozen=True)
class ParkingSession:
    """
    Value Object: One completed park-and-pay cycle
    Created only when a vehicle exits; immutable thereafter
    """
    license_plate: str
    vehicle_type: str
    entry_time: datetime
    exit_time: datetime
    fee: Decimal

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "license_plate": self.license_plate,
            "vehicle_type": self.vehicle_type,
            "entry_time": self.entry_time.isoformat(),
            "exit_time": self.exit_time.isoformat(),
            "fee": float(self.fee)
        }


@dataclass(frozen=True)
class ParkingPayment:
    """Value Object: Result of a vehicle exit, returned to the caller only"""
    session: ParkingSession
    billed_hours: int
    fee: Decimal


@dataclass(frozen=True)
class OccupiedSpot:
    """Value Object: Read-only descriptor of an occupied spot"""
    spot_number: int
    vehicle_type: str
    license_plate: str
    entry_time: datetime

    def __str__(self) -> str:
        return (
            f"Spot #{self.spot_number}: {self.vehicle_type} "
            f"[Plate: {self.license_plate}], Entry: {format_timestamp(self.entry_time)}"
        )


# ============================================================================
# DOMAIN EVENTS
# ============================================================================

class DomainEvent(ABC):
    """
    Base class for all domain events
    Events represent something that happened in the domain
    """

    event_type = "domain.event"

    def __init__(self, timestamp: datetime):
        self.event_id = str(uuid.uuid4())
        self.timestamp = timestamp
        self.version = "1.0"

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Convert event to dictionary for serialization"""
        pass

    def __str__(self) -> str:
        return f"{self.__class__.__name__} at {self.timestamp}"


class VehicleEnteredEvent(DomainEvent):
    """Event raised when a vehicle is parked"""

    event_type = "vehicle.entered"

    def __init__(self, facility_id: str, spot_number: int, vehicle: Vehicle):
        super().__init__(vehicle.entry_time)
        self.facility_id = facility_id
        self.spot_number = spot_number
        self.license_plate = vehicle.license_plate
        self.category = vehicle.category

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "version": self.version,
            "data": {
                "facility_id": self.facility_id,
                "spot_number": self.spot_number,
                "license_plate": self.license_plate,
                "category": self.category.value
            }
        }


class VehicleExitedEvent(DomainEvent):
    """Event raised when a vehicle leaves and its session is recorded"""

    event_type = "vehicle.exited"

    def __init__(self, facility_id: str, spot_number: int, payment: ParkingPayment):
        super().__init__(payment.session.exit_time)
        self.facility_id = facility_id
        self.spot_number = spot_number
        self.license_plate = payment.session.license_plate
        self.billed_hours = payment.billed_hours
        self.fee = payment.fee

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "event_id": self.event_id,
            "timestamp": self.timestamp.isoformat(),
            "version": self.version,
            "data": {
                "facility_id": self.facility_id,
                "spot_number": self.spot_number,
                "license_plate": self.license_plate,
                "billed_hours": self.billed_hours,
                "fee_amount": float(self.fee)
            }
        }
