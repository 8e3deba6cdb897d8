"""Integration tests for the Django ORM stores."""

from datetime import date, datetime, timezone
from unittest import mock

import pytest
from django.db.models.query import QuerySet

from event_registration import models
from event_registration.domain import Category, EventId, RegistrationFilters
from event_registration.domain.errors import (
    DuplicateRegistrationError,
    EventHasRegistrationsError,
)
from event_registration.stores.django_store import EXPORT_CHUNK_SIZE
from tests.factories import event_data, registration_data

pytestmark = pytest.mark.django_db

NOW = datetime(2026, 1, 20, 9, 0, tzinfo=timezone.utc)
TODAY = date(2026, 1, 20)


class TestDjangoEventStore:
    def test_create_and_get_round_trip(self, event_store):
        event_id = event_store.create_event(event_data(), now=NOW)

        event = event_store.get_event(event_id)

        assert event is not None
        assert event.name == "Intro to Go"
        assert event.category is Category.ONLINE_WORKSHOP
        assert event.created_at == event.updated_at == NOW

    def test_get_missing_event_returns_none(self, event_store):
        assert event_store.get_event(EventId(404)) is None

    def test_stores_inconsistent_window_without_complaint(self, event_store):
        data = event_data(start=date(2026, 3, 1), end=date(2026, 1, 1), event_date=date(2025, 1, 1))
        event_id = event_store.create_event(data, now=NOW)
        assert event_store.get_event(event_id).registration_start_date == date(2026, 3, 1)

    def test_update_restamps_changed_only(self, event_store):
        event_id = event_store.create_event(event_data(), now=NOW)
        later = datetime(2026, 1, 21, tzinfo=timezone.utc)

        assert event_store.update_event(event_id, event_data(name="Advanced Go"), now=later)

        event = event_store.get_event(event_id)
        assert event.name == "Advanced Go"
        assert event.created_at == NOW
        assert event.updated_at == later

    def test_update_missing_event_returns_false(self, event_store):
        assert event_store.update_event(EventId(404), event_data(), now=NOW) is False

    def test_list_events_ordered_by_event_date(self, event_store):
        event_store.create_event(event_data(name="Later", event_date=date(2026, 5, 1)), now=NOW)
        event_store.create_event(event_data(name="Sooner", event_date=date(2026, 2, 20)), now=NOW)

        assert [e.name for e in event_store.list_events()] == ["Sooner", "Later"]

    def test_list_active_events_uses_inclusive_window(self, event_store):
        event_store.create_event(event_data(name="Opens today", start=TODAY), now=NOW)
        event_store.create_event(event_data(name="Closes today", end=TODAY), now=NOW)
        event_store.create_event(
            event_data(name="Closed", start=date(2025, 12, 1), end=date(2026, 1, 19)), now=NOW
        )
        event_store.create_event(event_data(name="Upcoming", start=date(2026, 1, 21)), now=NOW)

        names = {e.name for e in event_store.list_active_events(TODAY)}

        assert names == {"Opens today", "Closes today"}

    def test_delete_event_without_registrations(self, event_store):
        event_id = event_store.create_event(event_data(), now=NOW)

        assert event_store.delete_event(event_id) is True
        assert event_store.get_event(event_id) is None

    def test_delete_missing_event_returns_false(self, event_store):
        assert event_store.delete_event(EventId(404)) is False

    def test_delete_event_with_registrations_is_rejected(self, event_store, registration_store):
        event_id = event_store.create_event(event_data(), now=NOW)
        event = event_store.get_event(event_id)
        registration_store.create_registration(registration_data(event_id), event, now=NOW)

        with pytest.raises(EventHasRegistrationsError):
            event_store.delete_event(event_id)
        assert event_store.get_event(event_id) is not None


class TestDjangoRegistrationStore:
    @pytest.fixture
    def event(self, event_store):
        return event_store.get_event(event_store.create_event(event_data(), now=NOW))

    def test_snapshot_survives_event_edit(self, event_store, registration_store, event):
        registration_store.create_registration(registration_data(event.id), event, now=NOW)
        event_store.update_event(event.id, event_data(name="Renamed", event_date=date(2026, 4, 1)), now=NOW)

        [registration] = registration_store.list_registrations(RegistrationFilters())

        assert registration.event_name == "Intro to Go"
        assert registration.event_date == date(2026, 3, 1)
        assert registration.category == "online_workshop"

    def test_registration_exists(self, registration_store, event):
        registration_store.create_registration(registration_data(event.id), event, now=NOW)

        assert registration_store.registration_exists("a@x.com", date(2026, 3, 1))
        assert not registration_store.registration_exists("b@x.com", date(2026, 3, 1))
        assert not registration_store.registration_exists("a@x.com", date(2026, 3, 2))

    def test_unique_constraint_maps_to_duplicate_error(self, registration_store, event):
        registration_store.create_registration(registration_data(event.id), event, now=NOW)

        with pytest.raises(DuplicateRegistrationError):
            registration_store.create_registration(registration_data(event.id), event, now=NOW)
        assert models.Registration.objects.count() == 1

    def test_filters_are_conjunctive_and_newest_first(self, event_store, registration_store):
        go = event_store.get_event(event_store.create_event(event_data(), now=NOW))
        rust = event_store.get_event(event_store.create_event(event_data(name="Rust Day"), now=NOW))
        other_day = event_store.get_event(
            event_store.create_event(event_data(event_date=date(2026, 3, 2)), now=NOW)
        )
        for hour, (event, email) in enumerate(
            [(go, "first@x.com"), (rust, "second@x.com"), (other_day, "third@x.com")], start=9
        ):
            registration_store.create_registration(
                registration_data(event.id, email=email),
                event,
                now=datetime(2026, 1, 20, hour, tzinfo=timezone.utc),
            )

        everything = registration_store.list_registrations(RegistrationFilters())
        on_day = registration_store.list_registrations(RegistrationFilters(event_date=date(2026, 3, 1)))
        both = RegistrationFilters(event_date=date(2026, 3, 1), event_name="Intro to Go")

        assert [r.email for r in everything] == ["third@x.com", "second@x.com", "first@x.com"]
        assert [r.email for r in on_day] == ["second@x.com", "first@x.com"]
        assert [r.email for r in registration_store.list_registrations(both)] == ["first@x.com"]
        assert registration_store.count_registrations(RegistrationFilters()) == 3
        assert registration_store.count_registrations(both) == 1

    def test_distinct_dates_and_names(self, event_store, registration_store):
        march_1 = event_store.get_event(event_store.create_event(event_data(name="Zig Night"), now=NOW))
        march_1b = event_store.get_event(event_store.create_event(event_data(name="Ada Hour"), now=NOW))
        march_2 = event_store.get_event(
            event_store.create_event(event_data(event_date=date(2026, 3, 2)), now=NOW)
        )
        for index, event in enumerate([march_1, march_1b, march_2]):
            registration_store.create_registration(
                registration_data(event.id, email=f"p{index}@x.com"), event, now=NOW
            )
        registration_store.create_registration(
            registration_data(march_1.id, email="p9@x.com"), march_1, now=NOW
        )

        assert registration_store.registration_event_dates() == [date(2026, 3, 2), date(2026, 3, 1)]
        assert registration_store.registration_event_names(date(2026, 3, 1)) == ["Ada Hour", "Zig Night"]
        assert registration_store.registration_event_names(date(2027, 1, 1)) == []

    def test_iter_registrations_streams_in_chunks(self, registration_store, event):
        for index in range(3):
            registration_store.create_registration(
                registration_data(event.id, email=f"p{index}@x.com"), event, now=NOW
            )
        original = QuerySet.iterator

        with mock.patch.object(QuerySet, "iterator", autospec=True, side_effect=original) as spy:
            rows = registration_store.iter_registrations(RegistrationFilters())
            spy.assert_not_called()
            first = next(rows)
            rest = list(rows)

        assert spy.call_count == 1
        assert spy.call_args.kwargs == {"chunk_size": EXPORT_CHUNK_SIZE}
        assert [r.email for r in [first, *rest]] == ["p2@x.com", "p1@x.com", "p0@x.com"]

    def test_iter_registrations_queries_only_when_consumed(
        self, registration_store, event, django_assert_num_queries
    ):
        registration_store.create_registration(registration_data(event.id), event, now=NOW)

        with django_assert_num_queries(0):
            rows = registration_store.iter_registrations(RegistrationFilters())
        with django_assert_num_queries(1):
            first = next(rows)

        assert first.email == "a@x.com"
