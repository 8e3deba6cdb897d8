"""Domain error codes for the event registration module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    EVENT_HAS_REGISTRATIONS = "EVENT_HAS_REGISTRATIONS"
    DUPLICATE_REGISTRATION = "DUPLICATE_REGISTRATION"
    REGISTRATION_CLOSED = "REGISTRATION_CLOSED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class EventHasRegistrationsError(DomainError):
    """Raised when deleting an event that registrations still reference."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_HAS_REGISTRATIONS,
            message="Event has registrations and cannot be deleted",
        )


class DuplicateRegistrationError(DomainError):
    """Raised when the email is already registered for an event on the same date."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_REGISTRATION,
            message=(
                "You have already registered for an event on this date. "
                "Each email can only be registered once per event date."
            ),
        )


class RegistrationClosedError(DomainError):
    """Raised when registering for an event outside its registration window."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.REGISTRATION_CLOSED,
            message="Registration for this event is not open",
        )
