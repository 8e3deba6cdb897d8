"""Django ORM implementation of the event and registration stores."""

from collections.abc import Iterator
from datetime import date, datetime

from django.db import IntegrityError, transaction
from django.db.models import QuerySet

from event_registration import models
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
from event_registration.domain.errors import (
    DuplicateRegistrationError,
    EventHasRegistrationsError,
)
from event_registration.stores.interfaces import EventStore, RegistrationStore

EXPORT_CHUNK_SIZE = 500


def _to_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.pk),
        name=row.name,
        category=Category(row.category),
        event_date=row.event_date,
        registration_start_date=row.registration_start_date,
        registration_end_date=row.registration_end_date,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _to_registration(row: models.Registration) -> Registration:
    return Registration(
        id=RegistrationId(row.pk),
        full_name=row.full_name,
        email=row.email,
        college_name=row.college_name,
        department=row.department,
        event_id=EventId(row.event_id),
        category=row.category,
        event_date=row.event_date,
        event_name=row.event_name,
        created_at=row.created_at,
    )


def _active(today: date) -> QuerySet[models.Event]:
    return models.Event.objects.filter(
        registration_start_date__lte=today,
        registration_end_date__gte=today,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def create_event(self, data: EventData, now: datetime) -> EventId:
        row = models.Event.objects.create(
            name=data.name,
            category=data.category.value,
            event_date=data.event_date,
            registration_start_date=data.registration_start_date,
            registration_end_date=data.registration_end_date,
            created_at=now,
            updated_at=now,
        )
        return EventId(row.pk)

    def update_event(self, event_id: EventId, data: EventData, now: datetime) -> bool:
        updated = models.Event.objects.filter(pk=event_id.value).update(
            name=data.name,
            category=data.category.value,
            event_date=data.event_date,
            registration_start_date=data.registration_start_date,
            registration_end_date=data.registration_end_date,
            updated_at=now,
        )
        return updated > 0

    def delete_event(self, event_id: EventId) -> bool:
        with transaction.atomic():
            row = models.Event.objects.select_for_update().filter(pk=event_id.value).first()
            if row is None:
                return False
            if models.Registration.objects.filter(event_id=row.pk).exists():
                raise EventHasRegistrationsError()
            row.delete()
        return True

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in models.Event.objects.order_by("event_date", "pk")]

    def list_active_events(self, today: date) -> list[Event]:
        return [_to_event(row) for row in _active(today).order_by("event_date", "pk")]

    def active_categories(self, today: date) -> set[str]:
        return set(_active(today).order_by().values_list("category", flat=True).distinct())

    def active_event_dates(self, category: Category, today: date) -> list[date]:
        return list(
            _active(today)
            .filter(category=category.value)
            .order_by("event_date")
            .values_list("event_date", flat=True)
            .distinct()
        )

    def active_events_on(
        self, category: Category, event_date: date, today: date
    ) -> list[tuple[EventId, str]]:
        rows = (
            _active(today)
            .filter(category=category.value, event_date=event_date)
            .order_by("name", "pk")
            .values_list("pk", "name")
        )
        return [(EventId(pk), name) for pk, name in rows]


class DjangoRegistrationStore(RegistrationStore):
    """Relational registration store using Django ORM."""

    def _filtered(self, filters: RegistrationFilters) -> QuerySet[models.Registration]:
        queryset = models.Registration.objects.all()
        if filters.event_date:
            queryset = queryset.filter(event_date=filters.event_date)
        if filters.event_name:
            queryset = queryset.filter(event_name=filters.event_name)
        return queryset

    def registration_exists(self, email: str, event_date: date) -> bool:
        return models.Registration.objects.filter(email=email, event_date=event_date).exists()

    def create_registration(
        self, data: RegistrationData, event: Event, now: datetime
    ) -> RegistrationId:
        try:
            with transaction.atomic():
                row = models.Registration.objects.create(
                    full_name=data.full_name,
                    email=data.email,
                    college_name=data.college_name,
                    department=data.department,
                    event_id=event.id.value,
                    category=event.category.value,
                    event_date=event.event_date,
                    event_name=event.name,
                    created_at=now,
                )
        except IntegrityError as exc:
            if self.registration_exists(data.email, event.event_date):
                raise DuplicateRegistrationError() from exc
            raise
        return RegistrationId(row.pk)

    def list_registrations(self, filters: RegistrationFilters) -> list[Registration]:
        return list(self.iter_registrations(filters))

    def iter_registrations(self, filters: RegistrationFilters) -> Iterator[Registration]:
        queryset = self._filtered(filters).order_by("-created_at", "-pk")
        for row in queryset.iterator(chunk_size=EXPORT_CHUNK_SIZE):
            yield _to_registration(row)

    def count_registrations(self, filters: RegistrationFilters) -> int:
        return self._filtered(filters).count()

    def registration_event_dates(self) -> list[date]:
        return list(
            models.Registration.objects.order_by("-event_date")
            .values_list("event_date", flat=True)
            .distinct()
        )

    def registration_event_names(self, event_date: date) -> list[str]:
        return list(
            models.Registration.objects.filter(event_date=event_date)
            .order_by("event_name")
            .values_list("event_name", flat=True)
            .distinct()
        )
