# File: src/parksim/domain/strategies.py
"""
Strategy Pattern Implementation for the Parking Simulator

This module implements the Strategy Pattern to encapsulate the algorithms the
facility delegates to: choosing a free spot on entry and pricing a stay on
exit. The facility is configured with one strategy of each kind.

Key Strategies:
1. Spot Allocation Strategies - which free spot a new vehicle gets
2. Pricing Strategies - billed hours and fee for a finished stay
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence, Tuple
from datetime import datetime, timedelta
from decimal import Decimal
import logging

from .models import ParkingSpot, Vehicle


# ============================================================================
# STRATEGY INTERFACES
# ============================================================================

class SpotAllocationStrategy(ABC):
    """
    Abstract base class for spot allocation strategies
    Defines the interface for choosing a free spot
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def select_spot(self, spots: Sequence[ParkingSpot]) -> Optional[ParkingSpot]:
        """
        Choose a spot for an arriving vehicle
        Returns: ParkingSpot if one is free, None otherwise
        """
        pass

    def get_strategy_name(self) -> str:
        """Get human-readable strategy name"""
        return self.__class__.__name__.replace("Strategy", "")

    def __str__(self) -> str:
        return f"{self.get_strategy_name()} Strategy"


class PricingStrategy(ABC):
    """
    Abstract base class for pricing strategies
    Defines the interface for fee calculation algorithms
    """

    def __init__(self):
        self.logger = logging.getLogger(self.__class__.__name__)

    @abstractmethod
    def calculate(
        self,
        vehicle: Vehicle,
        exit_time: datetime
    ) -> Tuple[int, Decimal]:
        """
        Price a stay from the vehicle's entry time to exit_time
        Returns: (billed_hours, fee)
        """
        pass


# ============================================================================
# CONCRETE STRATEGIES
# ============================================================================

class FirstAvailableSpotStrategy(SpotAllocationStrategy):
    """
    First-fit allocation: the lowest-numbered free spot wins
    Deterministic, not load-balanced
    """

    def select_spot(self, spots: Sequence[ParkingSpot]) -> Optional[ParkingSpot]:
        for spot in spots:
            if not spot.is_occupied:
                return spot
        return None


class HourlyPricingStrategy(PricingStrategy):
    """
    Bills every started hour at the vehicle's category rate
    Negative elapsed time (exit before entry) is clamped to zero
    """

    BILLING_UNIT = timedelta(hours=1)

    def billed_hours(self, entry_time: datetime, exit_time: datetime) -> int:
        elapsed = exit_time - entry_time
        if elapsed < timedelta(0):
            self.logger.debug(f"Exit {exit_time} precedes entry {entry_time}; clamping to zero")
            elapsed = timedelta(0)

        hours, remainder = divmod(elapsed, self.BILLING_UNIT)
        if remainder:
            hours += 1
        return hours

    def calculate(
        self,
        vehicle: Vehicle,
        exit_time: datetime
    ) -> Tuple[int, Decimal]:
        hours = self.billed_hours(vehicle.entry_time, exit_time)
        fee = vehicle.hourly_rate * hours
        return hours, fee
