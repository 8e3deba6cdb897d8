"""Registration service: public sign-up and admin listing queries."""

from datetime import date

import structlog

from event_registration.clock import Clock
from event_registration.domain import (
    Registration,
    RegistrationData,
    RegistrationFilters,
    RegistrationId,
)
from event_registration.domain.errors import (
    DuplicateRegistrationError,
    EventNotFoundError,
    RegistrationClosedError,
)
from event_registration.domain.value_objects import date_label
from event_registration.stores.interfaces import EventStore, RegistrationStore

logger = structlog.get_logger(__name__)


class RegistrationService:
    """Service for registration operations."""

    def __init__(
        self,
        store: RegistrationStore,
        event_store: EventStore,
        clock: Clock,
    ) -> None:
        self._store = store
        self._event_store = event_store
        self._clock = clock

    def check_duplicate(self, email: str, event_date: date) -> bool:
        """Return True if ``email`` already holds a registration on ``event_date``."""
        return self._store.registration_exists(email, event_date)

    def register(self, data: RegistrationData) -> RegistrationId:
        """Register a participant for an event.

        The event's name, category and date are copied onto the registration.
        The duplicate check runs right before the insert; a concurrent insert
        that slips past it is caught by the (email, event_date) unique
        constraint and reported the same way.

        Besides the duplicate rule, the event must be open for registration
        today; registering for an upcoming or past event is declined.

        Raises:
            EventNotFoundError: If the event does not exist.
            RegistrationClosedError: If the event is not open for registration today.
            DuplicateRegistrationError: If the email is already registered on the event date.
        """
        event = self._event_store.get_event(data.event_id)
        if event is None:
            raise EventNotFoundError()
        if not event.is_active(self._clock.today()):
            logger.info("registration_rejected_closed", event_id=event.id.value)
            raise RegistrationClosedError()
        if self.check_duplicate(data.email, event.event_date):
            logger.info(
                "registration_rejected_duplicate",
                event_id=event.id.value,
                event_date=event.event_date.isoformat(),
            )
            raise DuplicateRegistrationError()

        registration_id = self._store.create_registration(data, event, now=self._clock.now())
        logger.info(
            "registration_created",
            registration_id=registration_id.value,
            event_id=event.id.value,
        )
        return registration_id

    def list_registrations(self, filters: RegistrationFilters) -> list[Registration]:
        """Return registrations matching all given filters, newest first."""
        return self._store.list_registrations(filters)

    def count_registrations(self, filters: RegistrationFilters) -> int:
        return self._store.count_registrations(filters)

    def registration_dates(self) -> dict[date, str]:
        """Return event dates that have registrations, newest first, with labels."""
        return {
            event_date: date_label(event_date)
            for event_date in self._store.registration_event_dates()
        }

    def event_names_for_date(self, event_date: date) -> list[str]:
        """Return event names with registrations on ``event_date``, ascending."""
        return self._store.registration_event_names(event_date)
