"""Cascading option sets for the public registration flow.

Each level is an independent query over currently active events:
category -> event dates -> events. Every level returns an empty mapping
when nothing matches.
"""

from datetime import date

from event_registration.clock import Clock
from event_registration.domain import Category
from event_registration.domain.value_objects import date_label
from event_registration.stores.interfaces import EventStore


def _as_category(category: str | Category) -> Category | None:
    try:
        return Category(category)
    except ValueError:
        return None


class AvailabilityService:
    """Service for the active-event option cascade."""

    def __init__(self, store: EventStore, clock: Clock) -> None:
        self._store = store
        self._clock = clock

    def active_categories(self) -> dict[str, str]:
        """Return machine name -> label for categories with an active event."""
        present = self._store.active_categories(self._clock.today())
        return {category.value: category.label for category in Category if category.value in present}

    def active_dates_for_category(self, category: str | Category) -> dict[date, str]:
        """Return active event dates in a category, ascending, with display labels."""
        parsed = _as_category(category)
        if parsed is None:
            return {}
        dates = self._store.active_event_dates(parsed, self._clock.today())
        return {event_date: date_label(event_date) for event_date in dates}

    def active_events_for_category_and_date(
        self, category: str | Category, event_date: date
    ) -> dict[int, str]:
        """Return event id -> name for active events in a category on a date."""
        parsed = _as_category(category)
        if parsed is None:
            return {}
        events = self._store.active_events_on(parsed, event_date, self._clock.today())
        return {event_id.value: name for event_id, name in events}
