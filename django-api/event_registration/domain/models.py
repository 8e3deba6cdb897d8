"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in event_registration/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime

from event_registration.domain.value_objects import (
    Category,
    EventId,
    RegistrationId,
    RegistrationStatus,
)


@dataclass(frozen=True)
class EventData:
    """Writable fields of an Event, as supplied by create and update."""

    name: str
    category: Category
    event_date: date
    registration_start_date: date
    registration_end_date: date


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    category: Category
    event_date: date
    registration_start_date: date
    registration_end_date: date
    created_at: datetime
    updated_at: datetime

    def is_active(self, today: date) -> bool:
        return self.registration_start_date <= today <= self.registration_end_date

    def registration_status(self, today: date) -> RegistrationStatus:
        if self.is_active(today):
            return RegistrationStatus.OPEN
        if self.registration_start_date > today:
            return RegistrationStatus.UPCOMING
        return RegistrationStatus.CLOSED


@dataclass(frozen=True)
class RegistrationData:
    """Fields submitted through the public registration flow."""

    full_name: str
    email: str
    college_name: str
    department: str
    event_id: EventId


@dataclass(frozen=True)
class Registration:
    """Domain representation of a Registration.

    ``category``, ``event_date`` and ``event_name`` are copied from the event
    when the registration is created and never looked up again.
    """

    id: RegistrationId
    full_name: str
    email: str
    college_name: str
    department: str
    event_id: EventId
    category: str
    event_date: date
    event_name: str
    created_at: datetime
