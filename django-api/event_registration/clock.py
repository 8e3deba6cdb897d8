"""Clock capability used for active-window checks and timestamps."""

from abc import ABC, abstractmethod
from datetime import date, datetime

from django.utils import timezone


class Clock(ABC):
    """Interface for the current date and time."""

    @abstractmethod
    def today(self) -> date:
        """Return the current local calendar date."""
        ...

    @abstractmethod
    def now(self) -> datetime:
        """Return the current aware timestamp."""
        ...


class SystemClock(Clock):
    """Clock backed by Django's configured time zone."""

    def today(self) -> date:
        return timezone.localdate()

    def now(self) -> datetime:
        return timezone.now()


class FixedClock(Clock):
    """Clock pinned to a given instant."""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def today(self) -> date:
        return timezone.localdate(self._moment)

    def now(self) -> datetime:
        return self._moment
