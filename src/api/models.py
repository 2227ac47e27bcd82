"""
API request and response models.

Pydantic models for request parsing and response serialization.
Field validation (email syntax, password length) is a domain concern and
is not expressed here: a RegistrationRequest only guarantees that both
fields are present and are strings.
"""

from dataclasses import dataclass
from http import HTTPStatus

from pydantic import BaseModel, ConfigDict, Field


class RegistrationRequest(BaseModel):
    """Request body for user registration. Unknown keys are ignored."""

    model_config = ConfigDict(strict=True)

    email: str
    password: str = Field(..., repr=False)


class ErrorResponse(BaseModel):
    """Uniform error body for every non-success outcome."""

    error_field: str
    error_message: str


@dataclass(frozen=True)
class HttpOutcome:
    """Result of a pipeline run: status plus optional error body."""

    status: HTTPStatus
    body: ErrorResponse | None = None

    @classmethod
    def ok(cls) -> "HttpOutcome":
        return cls(HTTPStatus.OK)

    @classmethod
    def error(cls, status: HTTPStatus, field: str, message: str) -> "HttpOutcome":
        return cls(status, ErrorResponse(error_field=field, error_message=message))


@dataclass(frozen=True)
class RequestMetadata:
    """Per-request details recorded in request logs."""

    remote_addr: str | None
    method: str
    path: str
