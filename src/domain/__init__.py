"""
Domain layer - Pure business logic with zero framework imports.

This package contains the registration rules, credential handling and
log record shapes. It defines its own port interfaces for infrastructure
abstraction, so persistence and log sinks stay swappable.
"""

from .exceptions import (
    CredentialHashingError,
    DustError,
    InvalidCredentials,
    InvalidEmail,
    InvalidPassword,
    LoggingFailure,
    PersistenceError,
    RegistrationError,
    UserAlreadyExists,
)
from .ports import LogDistinction, LogLevel, LogSink, SanitizedCredential, UserRepository
from .registration import RegistrationService

__all__ = [
    "CredentialHashingError",
    "DustError",
    "InvalidCredentials",
    "InvalidEmail",
    "InvalidPassword",
    "LogDistinction",
    "LogLevel",
    "LogSink",
    "LoggingFailure",
    "PersistenceError",
    "RegistrationError",
    "RegistrationService",
    "SanitizedCredential",
    "UserAlreadyExists",
    "UserRepository",
]
