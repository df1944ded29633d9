"""Domain error codes for the events module."""

from enum import Enum

from accounts.domain.errors import DomainError


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"


class EventNotFoundError(DomainError):
    """Raised when an event exists in neither storage location."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )


class EventAccessDeniedError(DomainError):
    """Raised when the event exists but belongs to another host."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.FORBIDDEN,
            message="You do not have permission to access this event",
        )


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )
