"""
Credential validation, sanitization and hashing.

Pure functions used by the registration service:
- is_valid_email / is_valid_password: input checks
- sanitize_email: strip + lowercase
- hash_password / verify_password: bcrypt, cost factor 10
"""

import bcrypt
import email_validator
from email_validator import EmailNotValidError, validate_email

from .exceptions import CredentialHashingError

PASSWORD_MIN_BYTES = 8
PASSWORD_MAX_BYTES = 255

# Fixed work factor, not configurable.
BCRYPT_COST = 10

# bcrypt only consumes the first 72 bytes of its input.
_BCRYPT_MAX_INPUT = 72

# Syntax only: special-use domains such as localhost are well-formed addresses.
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def is_valid_email(email: str) -> bool:
    """
    Check RFC 5322 style address syntax.

    No deliverability policy: DNS, dotless domains, reserved TLDs, quoted
    local parts and domain literals are all accepted.
    """
    try:
        validate_email(
            email,
            check_deliverability=False,
            globally_deliverable=False,
            test_environment=True,
            allow_quoted_local=True,
            allow_domain_literal=True,
        )
    except EmailNotValidError:
        return False
    return True


def is_valid_password(password: str) -> bool:
    """Password length, in UTF-8 bytes, must be within [8, 255]."""
    return PASSWORD_MIN_BYTES <= len(password.encode()) <= PASSWORD_MAX_BYTES


def sanitize_email(email: str) -> str:
    """
    Normalize email address for consistent storage and lookup.

    Applies: strip whitespace + lowercase
    """
    return email.strip().lower()


def hash_password(password: str) -> str:
    """
    Hash password using bcrypt with a fresh salt.

    Input beyond 72 bytes is truncated explicitly, matching classic bcrypt.

    Raises:
        CredentialHashingError: If bcrypt rejects the input
    """
    try:
        hashed = bcrypt.hashpw(_bcrypt_input(password), bcrypt.gensalt(rounds=BCRYPT_COST))
    except ValueError as e:
        raise CredentialHashingError(str(e)) from e
    return hashed.decode()


def verify_password(password: str, password_hash: str) -> bool:
    """Check a plaintext password against a stored bcrypt hash."""
    try:
        return bcrypt.checkpw(_bcrypt_input(password), password_hash.encode())
    except ValueError:
        return False


def _bcrypt_input(password: str) -> bytes:
    return password.encode()[:_BCRYPT_MAX_INPUT]
