# File: src/parksim/application/clock.py
"""
Simulation clock

The facility never reads wall-clock time. The clock holds the current
simulation time, which only moves when advanced explicitly.
"""

from datetime import datetime, timedelta
from typing import Optional
import logging


class SimulationClock:
    """Manually advanced simulation time"""

    def __init__(self, start_time: Optional[datetime] = None):
        self._now = (start_time or datetime.now()).replace(microsecond=0)
        self._logger = logging.getLogger(self.__class__.__name__)

    def now(self) -> datetime:
        return self._now

    def advance(self, hours: int = 0, minutes: int = 0) -> datetime:
        """
        Move the clock forward
        Raises: ValueError if hours or minutes is negative,
        OverflowError if the result is past datetime.max (the clock is left unchanged)
        """
        if hours < 0 or minutes < 0:
            raise ValueError("Time can only be advanced by non-negative amounts")

        self._now += timedelta(hours=hours, minutes=minutes)
        self._logger.info(f"Simulation time advanced by {hours}h {minutes}m to {self._now}")
        return self._now
