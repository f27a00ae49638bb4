"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    SECTION_NOT_FOUND = "SECTION_NOT_FOUND"
    SIGNUP_NOT_FOUND = "SIGNUP_NOT_FOUND"
    SCHEDULE_ITEM_NOT_FOUND = "SCHEDULE_ITEM_NOT_FOUND"
    UNAUTHORIZED = "UNAUTHORIZED"
    RATE_LIMITED = "RATE_LIMITED"
    EVENT_INACTIVE = "EVENT_INACTIVE"
    SIGNUPS_CLOSED = "SIGNUPS_CLOSED"
    EVENT_FULL = "EVENT_FULL"
    ALREADY_SCHEDULED = "ALREADY_SCHEDULED"
    NO_RECIPIENTS = "NO_RECIPIENTS"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


# Not frozen: context managers assign __traceback__ on exceptions they re-raise.
@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(code=ErrorCode.VALIDATION_ERROR, message=message)
        self.field = field


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class SectionNotFoundError(DomainError):
    """Raised when a section is not found."""

    def __init__(self, section_id: str) -> None:
        super().__init__(
            code=ErrorCode.SECTION_NOT_FOUND,
            message="Section not found",
        )
        self.section_id = section_id


class SignupNotFoundError(DomainError):
    """Raised when a signup is not found."""

    def __init__(self, signup_id: str) -> None:
        super().__init__(
            code=ErrorCode.SIGNUP_NOT_FOUND,
            message="Signup not found",
        )
        self.signup_id = signup_id


class ScheduleItemNotFoundError(DomainError):
    """Raised when an event has no schedule item."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.SCHEDULE_ITEM_NOT_FOUND,
            message="Event is not in the schedule",
        )
        self.event_id = event_id


class UnauthorizedError(DomainError):
    """Raised when an admin-only operation has no valid session."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message="Unauthorized")


class RateLimitedError(DomainError):
    """Raised when a client submits signups too quickly."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.RATE_LIMITED,
            message="Too many signup attempts. Please try again later.",
        )


class InactiveEventError(DomainError):
    """Raised when signing up for an inactive event."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EVENT_INACTIVE, message="Event is not active")


class SignupsClosedError(DomainError):
    """Raised when an event does not accept signups."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SIGNUPS_CLOSED,
            message="This event is not accepting signups",
        )


class EventFullError(DomainError):
    """Raised when a signup would exceed the event's capacity."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.EVENT_FULL, message="Event is full")


class AlreadyScheduledError(DomainError):
    """Raised when adding an event that is already on the schedule."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ALREADY_SCHEDULED,
            message="Event already in schedule",
        )


class NoRecipientsError(DomainError):
    """Raised when a bulk email has nobody to go to."""

    def __init__(self, message: str = "No participants found for this event") -> None:
        super().__init__(code=ErrorCode.NO_RECIPIENTS, message=message)


class UpstreamError(DomainError):
    """Raised when persistence or an external collaborator fails."""

    def __init__(self, message: str = "Upstream service failed") -> None:
        super().__init__(code=ErrorCode.UPSTREAM_ERROR, message=message)
