"""
Domain exceptions - Semantic error types for registration.

This module defines domain-specific exceptions that communicate
business rule violations and collaborator failures without leaking
infrastructure details.
"""


class DustError(Exception):
    """Base class for all dustweb errors."""

    pass


class RegistrationError(DustError):
    """Base class for registration domain errors."""

    pass


class InvalidCredentials(RegistrationError):
    """A submitted credential field failed validation."""

    field: str = ""
    message: str = ""

    def __init__(self) -> None:
        super().__init__(self.message)


class InvalidEmail(InvalidCredentials):
    """Email is not a syntactically valid address."""

    field = "email"
    message = "Please enter a valid email address."


class InvalidPassword(InvalidCredentials):
    """Password length is outside the accepted bounds."""

    field = "password"
    message = "Please enter a valid password of at least 8 characters."


class CredentialHashingError(RegistrationError):
    """Password could not be hashed."""

    pass


class PersistenceError(DustError):
    """The persistence collaborator failed; str(exc) is client-facing."""

    pass


class UserAlreadyExists(PersistenceError):
    """Email is already registered."""

    pass


class LoggingFailure(DustError):
    """A log record could not be appended. Never fails a request."""

    pass
