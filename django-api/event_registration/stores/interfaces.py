"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. They persist what they
are given; input rules are enforced before data reaches them.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import date, datetime

from event_registration.domain import (
    Category,
    Event,
    EventData,
    EventId,
    Registration,
    RegistrationData,
    RegistrationFilters,
    RegistrationId,
)


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def create_event(self, data: EventData, now: datetime) -> EventId:
        """Insert an event stamped with ``now`` and return its ID."""
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, data: EventData, now: datetime) -> bool:
        """Update an event, returning False if it does not exist."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event, returning False if it does not exist.

        Raises:
            EventHasRegistrationsError: If any registration references the event.
        """
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by event_date ascending."""
        ...

    @abstractmethod
    def list_active_events(self, today: date) -> list[Event]:
        """Return events whose registration window contains ``today``, by event_date."""
        ...

    @abstractmethod
    def active_categories(self, today: date) -> set[str]:
        """Return the distinct categories of events active on ``today``."""
        ...

    @abstractmethod
    def active_event_dates(self, category: Category, today: date) -> list[date]:
        """Return distinct event dates of active events in a category, ascending."""
        ...

    @abstractmethod
    def active_events_on(
        self, category: Category, event_date: date, today: date
    ) -> list[tuple[EventId, str]]:
        """Return (id, name) of active events in a category on a date, by name."""
        ...


class RegistrationStore(ABC):
    """Interface for registration persistence operations."""

    @abstractmethod
    def registration_exists(self, email: str, event_date: date) -> bool:
        """Check if the email is registered for any event on ``event_date``."""
        ...

    @abstractmethod
    def create_registration(
        self, data: RegistrationData, event: Event, now: datetime
    ) -> RegistrationId:
        """Insert a registration carrying a snapshot of ``event``.

        Raises:
            DuplicateRegistrationError: If the (email, event_date) pair already exists.
        """
        ...

    @abstractmethod
    def list_registrations(self, filters: RegistrationFilters) -> list[Registration]:
        """Return matching registrations ordered by created_at descending."""
        ...

    @abstractmethod
    def iter_registrations(self, filters: RegistrationFilters) -> Iterator[Registration]:
        """Yield matching registrations in list order without loading them all."""
        ...

    @abstractmethod
    def count_registrations(self, filters: RegistrationFilters) -> int:
        """Return the number of matching registrations."""
        ...

    @abstractmethod
    def registration_event_dates(self) -> list[date]:
        """Return distinct event dates across registrations, descending."""
        ...

    @abstractmethod
    def registration_event_names(self, event_date: date) -> list[str]:
        """Return distinct event names registered on ``event_date``, ascending."""
        ...
