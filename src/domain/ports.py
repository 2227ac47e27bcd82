"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure. Adapters implement these protocols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol


class LogLevel(str, Enum):
    """Severity of a request/response log record."""

    INFO = "INFO"
    ERROR = "ERROR"


class LogDistinction(str, Enum):
    """
    Classification of a log record.

    Sinks use the distinction to route records, e.g. one file per value.
    """

    REQUEST = "request"
    RESPONSE = "response"


@dataclass(frozen=True)
class SanitizedCredential:
    """
    Credential ready for storage.

    Only built after email and password validation both pass:
    - email: stripped and lowercased
    - password_hash: bcrypt hash, never the plaintext
    """

    email: str
    password_hash: str

    def __repr__(self) -> str:
        return f"SanitizedCredential(email={self.email!r}, password_hash='***')"


class UserRepository(Protocol):
    """Port interface for user persistence."""

    def create_user(self, credential: SanitizedCredential) -> None:
        """
        Persist a new user.

        Args:
            credential: Sanitized email and hashed password

        Raises:
            UserAlreadyExists: If the email is already registered
            PersistenceError: On any other storage failure
        """
        ...

    def health_check(self) -> None:
        """
        Verify the storage backend is reachable.

        Raises:
            PersistenceError: If the backend cannot be reached
        """
        ...


class LogSink(Protocol):
    """Port interface for durable request/response log records."""

    def append(self, record: str, distinction: LogDistinction) -> None:
        """
        Append one already-redacted, formatted record.

        Raises:
            LoggingFailure: If the record could not be written
        """
        ...
