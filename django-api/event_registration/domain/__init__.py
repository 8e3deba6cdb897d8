from event_registration.domain.models import Event, EventData, Registration, RegistrationData
from event_registration.domain.value_objects import (
    Category,
    EventId,
    RegistrationFilters,
    RegistrationId,
    RegistrationStatus,
    RegistrationWindow,
)

__all__ = [
    "Event",
    "EventData",
    "Registration",
    "RegistrationData",
    "Category",
    "EventId",
    "RegistrationId",
    "RegistrationFilters",
    "RegistrationStatus",
    "RegistrationWindow",
]
