"""Event service - catalog business logic lives here.

Services:
- Depend only on interfaces (stores) and a clock
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from datetime import date

import structlog

from event_registration.clock import Clock
from event_registration.domain import Event, EventData, EventId
from event_registration.domain.errors import EventNotFoundError, InvalidEventIdError
from event_registration.stores.interfaces import EventStore

logger = structlog.get_logger(__name__)


def parse_event_id(event_id: str | int | EventId) -> EventId:
    """Coerce a raw identifier to an EventId.

    Raises:
        InvalidEventIdError: If the value is not a positive integer.
    """
    if isinstance(event_id, EventId):
        return event_id
    try:
        return EventId.from_string(str(event_id))
    except ValueError as exc:
        raise InvalidEventIdError() from exc


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def create_event(self, data: EventData) -> EventId:
        """Store a new event.

        The registration window ordering is not checked here; callers validate
        input before it reaches the catalog.
        """
        event_id = self._store.create_event(data, now=self._clock.now())
        logger.info("event_created", event_id=event_id.value, category=data.category.value)
        return event_id

    def update_event(self, event_id: str | int | EventId, data: EventData) -> bool:
        """Update an event. Returns False if it does not exist."""
        parsed = parse_event_id(event_id)
        updated = self._store.update_event(parsed, data, now=self._clock.now())
        if updated:
            logger.info("event_updated", event_id=parsed.value)
        return updated

    def delete_event(self, event_id: str | int | EventId) -> bool:
        """Delete an event. Returns False if it does not exist.

        Raises:
            InvalidEventIdError: If the event_id is malformed.
            EventHasRegistrationsError: If registrations reference the event.
        """
        parsed = parse_event_id(event_id)
        deleted = self._store.delete_event(parsed)
        if deleted:
            logger.info("event_deleted", event_id=parsed.value)
        return deleted

    def get_event(self, event_id: str | int | EventId) -> Event | None:
        """Return an event by ID, or None if not found.

        Raises:
            InvalidEventIdError: If the event_id is malformed.
        """
        return self._store.get_event(parse_event_id(event_id))

    def require_event(self, event_id: str | int | EventId) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is malformed.
            EventNotFoundError: If the event does not exist.
        """
        event = self.get_event(event_id)
        if event is None:
            raise EventNotFoundError()
        return event

    def list_events(self) -> list[Event]:
        """Return all events, soonest first."""
        return self._store.list_events()

    def list_active_events(self) -> list[Event]:
        """Return events currently open for registration, soonest first."""
        return self._store.list_active_events(self._clock.today())

    def today(self) -> date:
        """Return the current local date used to compute event status."""
        return self._clock.today()
