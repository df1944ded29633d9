"""Domain error codes for host accounts and sessions."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    INVALID_TOKEN = "INVALID_TOKEN"
    SESSION_NOT_FOUND = "SESSION_NOT_FOUND"
    INVALID_SESSION_KEY = "INVALID_SESSION_KEY"
    NO_ACTIVE_SESSIONS = "NO_ACTIVE_SESSIONS"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"
    IDENTITY_UNAVAILABLE = "IDENTITY_UNAVAILABLE"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    NOT_A_HOST_ACCOUNT = "NOT_A_HOST_ACCOUNT"
    ACCOUNT_ALREADY_CUSTOMER = "ACCOUNT_ALREADY_CUSTOMER"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: Enum
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class AuthenticationError(DomainError):
    """Base class for every credential failure. Maps to 401."""


class MissingCredentialsError(AuthenticationError):
    """Raised when neither a token nor a session id + key pair is supplied."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_CREDENTIALS,
            message="Invalid or missing session credentials",
        )


class InvalidTokenError(AuthenticationError):
    """Raised when the identity provider rejects a token."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TOKEN,
            message="Invalid or expired identity token",
        )


class SessionNotFoundError(AuthenticationError):
    """Raised when no session exists with the given id."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.SESSION_NOT_FOUND,
            message="Session not found",
        )


class InvalidSessionKeyError(AuthenticationError):
    """Raised when a session key does not match the stored hash."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_SESSION_KEY,
            message="Invalid session key",
        )


class NoActiveSessionError(AuthenticationError):
    """Raised when a token-authenticated caller holds no host session."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_ACTIVE_SESSIONS,
            message="No active host sessions found",
        )


class HostAccountError(DomainError):
    """Base class for callers whose identity is valid but who may not host. Maps to 403."""


class UserNotFoundError(HostAccountError):
    """Raised when the identity has no account on the platform."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="No account exists for this identity",
        )


class NotAHostAccountError(HostAccountError):
    """Raised when the account is not registered as a host, or is a customer account."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NOT_A_HOST_ACCOUNT,
            message="This account is not a host account",
        )


class AccountConflictError(DomainError):
    """Raised when a customer account tries to register as a host. Maps to 409."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.ACCOUNT_ALREADY_CUSTOMER,
            message="This account is already registered as a customer",
        )


class RetryableError(DomainError):
    """Base class for transient failures the caller may retry. Maps to 503."""


class StoreUnavailableError(RetryableError):
    """Raised when the backing store fails or times out."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Storage is temporarily unavailable",
        )


class IdentityServiceUnavailableError(RetryableError):
    """Raised when the identity provider cannot be reached."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.IDENTITY_UNAVAILABLE,
            message="Identity service is temporarily unavailable",
        )
