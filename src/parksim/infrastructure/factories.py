# File: src/parksim/infrastructure/factories.py
"""
Factories for the Parking Simulator

Encapsulates object creation:
1. VehicleFactory - vehicles from menu choices or category names
2. ParkingServiceFactory - a fully wired service (facility, clock, event bus)
"""

from datetime import datetime
from typing import Dict, Optional, Union
import logging

from ..config import Settings
from ..domain.models import Vehicle, VehicleCategory
from ..domain.aggregates import ParkingFacility
from ..application.clock import SimulationClock
from ..application.parking_service import ParkingService
from .messaging import EventBus, LoggingEventHandler


logger = logging.getLogger(__name__)


class VehicleFactory:
    """
    Factory for creating Vehicle instances
    Maps console menu choices and category names to the closed catalog
    """

    MENU_CHOICES: Dict[int, VehicleCategory] = {
        1: VehicleCategory.CAR,
        2: VehicleCategory.DELIVERY_VAN,
    }

    @classmethod
    def category_for_choice(cls, choice: int) -> Optional[VehicleCategory]:
        """Category for a numbered menu choice, None if out of range"""
        return cls.MENU_CHOICES.get(choice)

    @staticmethod
    def parse_category(value: Union[str, VehicleCategory]) -> VehicleCategory:
        """
        Resolve a category from its value or member name
        Raises: ValueError for unknown categories
        """
        if isinstance(value, VehicleCategory):
            return value

        key = value.strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return VehicleCategory(key)
        except ValueError:
            raise ValueError(f"Invalid vehicle category: {value}")

    @classmethod
    def create(
        cls,
        license_plate: str,
        category: Union[str, VehicleCategory],
        entry_time: datetime
    ) -> Vehicle:
        """Create a Vehicle with a normalized (upper-case) plate"""
        return Vehicle(
            license_plate=license_plate.strip().upper(),
            entry_time=entry_time,
            category=cls.parse_category(category)
        )


class ParkingServiceFactory:
    """Builds a ParkingService wired with its collaborators"""

    @staticmethod
    def create_service(settings: Settings) -> ParkingService:
        facility = ParkingFacility(capacity=settings.capacity)
        clock = SimulationClock(settings.start_time)
        event_bus = EventBus()
        event_bus.subscribe_all(LoggingEventHandler())

        logger.debug(f"Created parking service for {settings.capacity} spots")
        return ParkingService(facility=facility, clock=clock, event_bus=event_bus)

    @classmethod
    def create_default_service(cls) -> ParkingService:
        """Service configured from the environment"""
        return cls.create_service(Settings.from_env())
