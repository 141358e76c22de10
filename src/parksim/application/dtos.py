# File: src/parksim/application/dtos.py
"""
Data Transfer Objects (DTOs) for the Parking Simulator

This module defines DTOs for data transfer between the application service
and its callers (the console, tests, any future API):
1. Input DTOs - validated requests
2. Output DTOs - results carrying a success flag and a message

DTO Principles:
- Validation at creation
- No business logic, only data
- Built from domain objects through `from_domain` constructors
"""

from typing import Dict, List, Optional, Any
from datetime import datetime
from decimal import Decimal
from enum import Enum
import json
from pydantic import BaseModel, Field, field_validator
from pydantic import ConfigDict

from ..domain.models import (
    VehicleCategory, ParkingSession, ParkingPayment, OccupiedSpot
)


# ============================================================================
# BASE DTO CLASSES
# ============================================================================

class BaseDTO(BaseModel):
    """Base DTO with common functionality"""

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        frozen=True
    )

    def to_dict(self, exclude_none: bool = False, **kwargs) -> Dict[str, Any]:
        """Convert DTO to dictionary"""
        data = self.model_dump(**kwargs)
        if exclude_none:
            data = {k: v for k, v in data.items() if v is not None}
        return data

    def to_json(self, **kwargs) -> str:
        """Convert DTO to JSON string"""
        return self.model_dump_json(**kwargs)

    @classmethod
    def from_json(cls, json_str: str) -> 'BaseDTO':
        """Create DTO from JSON string"""
        return cls(**json.loads(json_str))


# ============================================================================
# ENUM DTOs
# ============================================================================

class VehicleCategoryDTO(str, Enum):
    """Vehicle category DTO"""
    CAR = "car"
    DELIVERY_VAN = "delivery_van"

    def to_domain(self) -> VehicleCategory:
        return VehicleCategory(self.value)


# ============================================================================
# INPUT DTOs
# ============================================================================

MAX_PLATE_LENGTH = 20


class EntryRequestDTO(BaseDTO):
    """Request to register a vehicle entry"""
    license_plate: str = Field(
        min_length=1, max_length=MAX_PLATE_LENGTH, description="License plate number"
    )
    category: VehicleCategoryDTO = Field(description="Vehicle category")

    @field_validator('license_plate', mode='before')
    @classmethod
    def normalize_license_plate(cls, v):
        """Trim whitespace and convert to uppercase"""
        if isinstance(v, str):
            v = v.strip().upper()
        return v


class TimeAdvanceDTO(BaseDTO):
    """Request to move the simulation clock forward"""
    hours: int = Field(default=0, ge=0, description="Hours to advance")
    minutes: int = Field(default=0, ge=0, description="Minutes to advance")


# ============================================================================
# OUTPUT DTOs
# ============================================================================

class EntryResultDTO(BaseDTO):
    """Result of an entry request"""
    success: bool
    license_plate: str
    spot_number: Optional[int] = None
    entry_time: Optional[datetime] = None
    message: str = ""


class SessionDTO(BaseDTO):
    """Completed parking session"""
    license_plate: str
    vehicle_type: str
    entry_time: datetime
    exit_time: datetime
    fee: Decimal

    @classmethod
    def from_domain(cls, session: ParkingSession) -> 'SessionDTO':
        return cls(
            license_plate=session.license_plate,
            vehicle_type=session.vehicle_type,
            entry_time=session.entry_time,
            exit_time=session.exit_time,
            fee=session.fee
        )


class ExitResultDTO(BaseDTO):
    """Result of an exit request"""
    success: bool
    license_plate: str
    session: Optional[SessionDTO] = None
    billed_hours: Optional[int] = None
    fee: Optional[Decimal] = None
    message: str = ""

    @classmethod
    def from_payment(cls, payment: ParkingPayment) -> 'ExitResultDTO':
        return cls(
            success=True,
            license_plate=payment.session.license_plate,
            session=SessionDTO.from_domain(payment.session),
            billed_hours=payment.billed_hours,
            fee=payment.fee,
            message="Vehicle exited successfully."
        )


class OccupiedSpotDTO(BaseDTO):
    """Occupied spot as shown in the parked-vehicles list"""
    spot_number: int
    vehicle_type: str
    license_plate: str
    entry_time: datetime

    @classmethod
    def from_domain(cls, spot: OccupiedSpot) -> 'OccupiedSpotDTO':
        return cls(
            spot_number=spot.spot_number,
            vehicle_type=spot.vehicle_type,
            license_plate=spot.license_plate,
            entry_time=spot.entry_time
        )

    def to_domain(self) -> OccupiedSpot:
        return OccupiedSpot(
            spot_number=self.spot_number,
            vehicle_type=self.vehicle_type,
            license_plate=self.license_plate,
            entry_time=self.entry_time
        )

    def display(self) -> str:
        return str(self.to_domain())


class AvailabilityDTO(BaseDTO):
    """Current facility availability"""
    available: int = Field(ge=0)
    capacity: int = Field(gt=0)

    @property
    def occupied(self) -> int:
        return self.capacity - self.available

    @property
    def occupancy_rate(self) -> float:
        return self.occupied / self.capacity


class DailySummaryDTO(BaseDTO):
    """Totals of the current daily ledger"""
    sessions: List[SessionDTO] = Field(default_factory=list)
    total_vehicles: int = 0
    total_income: Decimal = Decimal('0.00')
