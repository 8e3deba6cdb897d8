from event_registration.clock import SystemClock
from event_registration.services.availability_service import AvailabilityService
from event_registration.services.event_service import EventService
from event_registration.services.export_service import ExportService
from event_registration.services.registration_service import RegistrationService
from event_registration.stores.django_store import DjangoEventStore, DjangoRegistrationStore


def build_event_service() -> EventService:
    return EventService(DjangoEventStore(), SystemClock())


def build_availability_service() -> AvailabilityService:
    return AvailabilityService(DjangoEventStore(), SystemClock())


def build_registration_service() -> RegistrationService:
    return RegistrationService(DjangoRegistrationStore(), DjangoEventStore(), SystemClock())


def build_export_service() -> ExportService:
    return ExportService(DjangoRegistrationStore())


__all__ = [
    "AvailabilityService",
    "EventService",
    "ExportService",
    "RegistrationService",
    "build_availability_service",
    "build_event_service",
    "build_export_service",
    "build_registration_service",
]
