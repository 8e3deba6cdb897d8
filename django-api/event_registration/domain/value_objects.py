"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Self

EVENT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9\s\-_.,&]+$")
PERSON_NAME_PATTERN = re.compile(r"^[A-Za-z0-9\s.\-]+$")
INSTITUTION_PATTERN = re.compile(r"^[A-Za-z0-9\s.\-,&']+$")
EVENT_ID_PATTERN = re.compile(r"^[1-9][0-9]*\Z")


class Category(str, Enum):
    """Closed set of event categories: machine name and display label."""

    ONLINE_WORKSHOP = "online_workshop"
    HACKATHON = "hackathon"
    CONFERENCE = "conference"
    ONE_DAY_WORKSHOP = "one_day_workshop"

    @property
    def label(self) -> str:
        return CATEGORY_LABELS[self.value]

    @classmethod
    def choices(cls) -> list[tuple[str, str]]:
        return [(category.value, category.label) for category in cls]


CATEGORY_LABELS = {
    "online_workshop": "Online Workshop",
    "hackathon": "Hackathon",
    "conference": "Conference",
    "one_day_workshop": "One-day Workshop",
}


def category_label(value: str) -> str:
    """Return the display label for a machine name, or the value itself if unknown."""
    return CATEGORY_LABELS.get(value, value)


def date_label(value: date) -> str:
    """Format a date for screen display, e.g. ``February 1, 2026``."""
    return f"{value:%B} {value.day}, {value.year}"


class RegistrationStatus(Enum):
    """Registration window state of an event relative to a given day."""

    OPEN = "open"
    UPCOMING = "upcoming"
    CLOSED = "closed"


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    @classmethod
    def from_string(cls, value: str) -> Self:
        if not EVENT_ID_PATTERN.match(value):
            raise ValueError("Event ID must be a positive integer")
        return cls(value=int(value))


@dataclass(frozen=True)
class RegistrationId:
    """Unique identifier for a Registration."""

    value: int


@dataclass(frozen=True)
class RegistrationWindow:
    """Registration period of an event.

    Registration must open on or before it closes, and close on or before
    the event itself.
    """

    start: date
    end: date
    event_date: date

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError("Registration end date must be on or after the start date.")
        if self.end > self.event_date:
            raise ValueError("Registration must close on or before the event date.")

    def contains(self, today: date) -> bool:
        return self.start <= today <= self.end


@dataclass(frozen=True)
class RegistrationFilters:
    """Optional listing filters; ``None`` means no constraint on that field."""

    event_date: date | None = None
    event_name: str | None = None
