"""
Registration domain service.

This module contains the core business logic for user registration.
Checks run in a fixed order and the first failure wins:

1. Email syntax           -> InvalidEmail
2. Password length        -> InvalidPassword
3. Sanitize + hash        -> CredentialHashingError (unexpected)
4. Persist, exactly once  -> UserAlreadyExists / PersistenceError

Nothing reaches the repository unless steps 1-3 succeed.
"""

from dataclasses import dataclass

from .credentials import hash_password, is_valid_email, is_valid_password, sanitize_email
from .exceptions import InvalidEmail, InvalidPassword
from .ports import SanitizedCredential, UserRepository


@dataclass
class RegistrationService:
    """
    Domain service for user registration.

    Orchestrates the registration flow: validation, email normalization,
    password hashing, and persistence.
    """

    repository: UserRepository

    def register(self, email: str, password: str) -> SanitizedCredential:
        """
        Register a new user.

        Args:
            email: User's email address as submitted
            password: User's plaintext password

        Returns:
            The credential handed to the repository

        Raises:
            InvalidEmail: If the email is malformed
            InvalidPassword: If the password length is out of bounds
            CredentialHashingError: If hashing fails
            UserAlreadyExists: If the email is already registered
            PersistenceError: On any other repository failure
        """
        if not is_valid_email(email):
            raise InvalidEmail()
        if not is_valid_password(password):
            raise InvalidPassword()

        credential = SanitizedCredential(
            email=sanitize_email(email),
            password_hash=hash_password(password),
        )
        self.repository.create_user(credential)
        return credential

    def health_check(self) -> None:
        """Delegate liveness to the repository; raises PersistenceError."""
        self.repository.health_check()
