"""Tabular export of registrations for bulk download."""

from collections.abc import Iterator

from django.utils import timezone

from event_registration.domain import Registration, RegistrationFilters
from event_registration.domain.value_objects import category_label
from event_registration.stores.interfaces import RegistrationStore

EXPORT_HEADER = (
    "ID",
    "Full Name",
    "Email",
    "College Name",
    "Department",
    "Event Name",
    "Event Date",
    "Category",
    "Registration Date",
)


def export_row(registration: Registration) -> tuple[str, ...]:
    created = timezone.localtime(registration.created_at)
    return (
        str(registration.id.value),
        registration.full_name,
        registration.email,
        registration.college_name,
        registration.department,
        registration.event_name,
        registration.event_date.strftime("%Y-%m-%d"),
        category_label(registration.category),
        created.strftime("%Y-%m-%d %H:%M:%S"),
    )


class ExportService:
    """Service for registration exports."""

    def __init__(self, store: RegistrationStore) -> None:
        self._store = store

    def export_registrations(self, filters: RegistrationFilters) -> Iterator[tuple[str, ...]]:
        """Yield the header row, then one row per matching registration.

        Rows are produced as the store yields them, in listing order.
        """
        yield EXPORT_HEADER
        for registration in self._store.iter_registrations(filters):
            yield export_row(registration)
