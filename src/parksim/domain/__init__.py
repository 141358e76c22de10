"""Domain layer: vehicle catalog, facility aggregate and ledger reporting"""

from .models import (
    VehicleCategory, Vehicle, ParkingSpot, ParkingSession, ParkingPayment,
    OccupiedSpot, DomainEvent, VehicleEnteredEvent, VehicleExitedEvent
)
from .aggregates import ParkingFacility, OccupiedSpotsView
from .reports import DailyReportFormatter, LedgerSummary

__all__ = [
    "VehicleCategory", "Vehicle", "ParkingSpot", "ParkingSession",
    "ParkingPayment", "OccupiedSpot", "DomainEvent", "VehicleEnteredEvent",
    "VehicleExitedEvent", "ParkingFacility", "OccupiedSpotsView",
    "DailyReportFormatter", "LedgerSummary",
]
