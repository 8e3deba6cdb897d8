"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest
from rest_framework.test import APIClient

from event_registration.services import (
    AvailabilityService,
    EventService,
    ExportService,
    RegistrationService,
)
from event_registration.stores.django_store import DjangoEventStore, DjangoRegistrationStore
from tests.factories import SteppingClock


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def admin_api_client(admin_user) -> APIClient:
    client = APIClient()
    client.force_authenticate(user=admin_user)
    return client


@pytest.fixture
def clock() -> SteppingClock:
    """Clock pinned to 2026-01-20."""
    return SteppingClock(datetime(2026, 1, 20, 9, 0, tzinfo=timezone.utc))


@pytest.fixture
def event_store() -> DjangoEventStore:
    return DjangoEventStore()


@pytest.fixture
def registration_store() -> DjangoRegistrationStore:
    return DjangoRegistrationStore()


@pytest.fixture
def event_service(event_store, clock) -> EventService:
    return EventService(event_store, clock)


@pytest.fixture
def availability_service(event_store, clock) -> AvailabilityService:
    return AvailabilityService(event_store, clock)


@pytest.fixture
def registration_service(registration_store, event_store, clock) -> RegistrationService:
    return RegistrationService(registration_store, event_store, clock)


@pytest.fixture
def export_service(registration_store) -> ExportService:
    return ExportService(registration_store)
