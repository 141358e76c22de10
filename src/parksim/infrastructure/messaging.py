# File: src/parksim/infrastructure/messaging.py
"""
Messaging Infrastructure for the Parking Simulator

Provides an in-memory publish/subscribe bus for the domain events raised by
the facility aggregate. Handlers run synchronously in the publisher's thread;
a failing handler is logged and never breaks the publishing operation.

Components:
1. EventHandler - interface for event subscribers
2. EventBus - in-process publish/subscribe
3. LoggingEventHandler - writes every event to the log
4. EventRecorder - keeps published events in memory (auditing, tests)
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List
import logging

from ..domain.models import DomainEvent


class EventType(str, Enum):
    """Event types published by the facility"""
    VEHICLE_ENTERED = "vehicle.entered"
    VEHICLE_EXITED = "vehicle.exited"


# ============================================================================
# EVENT HANDLERS
# ============================================================================

class EventHandler(ABC):
    """Abstract base class for event handlers"""

    @abstractmethod
    def handle(self, event: DomainEvent) -> None:
        """Handle a domain event"""
        pass

    def can_handle(self, event: DomainEvent) -> bool:
        """Check if this handler can handle the event"""
        return True


class LoggingEventHandler(EventHandler):
    """Logs every event it receives"""

    def __init__(self, level: int = logging.DEBUG):
        self.level = level
        self._logger = logging.getLogger(self.__class__.__name__)

    def handle(self, event: DomainEvent) -> None:
        self._logger.log(self.level, f"{event.event_type}: {event.to_dict()['data']}")


class EventRecorder(EventHandler):
    """Keeps every handled event in publication order"""

    def __init__(self):
        self.events: List[DomainEvent] = []

    def handle(self, event: DomainEvent) -> None:
        self.events.append(event)

    def clear(self) -> None:
        self.events.clear()


# ============================================================================
# EVENT BUS (In-memory)
# ============================================================================

class EventBus:
    """
    In-memory event bus for intra-process event publishing

    Implements publish/subscribe pattern within the same process.
    """

    def __init__(self):
        self._subscribers: Dict[EventType, List[EventHandler]] = {}
        self._logger = logging.getLogger(self.__class__.__name__)

    def subscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Subscribe to events of a specific type"""
        handlers = self._subscribers.setdefault(EventType(event_type), [])
        if handler not in handlers:
            handlers.append(handler)
            self._logger.debug(f"Subscribed {handler.__class__.__name__} to {event_type}")

    def subscribe_all(self, handler: EventHandler) -> None:
        """Subscribe a handler to every event type"""
        for event_type in EventType:
            self.subscribe(event_type, handler)

    def unsubscribe(self, event_type: EventType, handler: EventHandler) -> None:
        """Unsubscribe handler from events"""
        handlers = self._subscribers.get(EventType(event_type), [])
        if handler in handlers:
            handlers.remove(handler)
            self._logger.debug(f"Unsubscribed {handler.__class__.__name__} from {event_type}")

    def publish(self, event: DomainEvent) -> None:
        """Publish an event to all subscribers"""
        self._logger.debug(f"Publishing event: {event.event_type} (ID: {event.event_id})")

        handlers = self._subscribers.get(EventType(event.event_type), [])
        for handler in list(handlers):
            if not handler.can_handle(event):
                continue
            try:
                handler.handle(event)
            except Exception as e:
                self._logger.error(
                    f"Error handling event {event.event_type} with "
                    f"{handler.__class__.__name__}: {e}",
                    exc_info=True
                )

    def publish_all(self, events: List[DomainEvent]) -> None:
        for event in events:
            self.publish(event)

    def clear_subscribers(self) -> None:
        """Clear all subscribers (for testing)"""
        self._subscribers.clear()
