"""
Request pipeline for the registration and health-check endpoints.

handle_create_user runs these steps, stopping at the first failure:

1. Size guard   -> 413 (ERROR request record, body not shown)
2. UTF-8 decode -> 400 server (ERROR request record)
3. JSON parse   -> 400 server (ERROR request record)
4. INFO request record with credentials redacted
5. Registration service: validate, sanitize + hash, persist
   -> 400 email / 400 password / 409 email / 500 server

Every failure becomes an HttpOutcome here; no exception leaves this module.
Validation failures get no ERROR request record, only the ERROR response
record written by the response builder.
"""

import logging
from dataclasses import dataclass
from http import HTTPStatus

from pydantic import ValidationError

from src.api.audit import AuditLog
from src.api.models import HttpOutcome, RegistrationRequest, RequestMetadata
from src.config.settings import MAX_INCOMING_PAYLOAD_SIZE
from src.domain.exceptions import (
    CredentialHashingError,
    DustError,
    InvalidCredentials,
    PersistenceError,
    UserAlreadyExists,
)
from src.domain.logs import CREDENTIALS_REDACTED, PAYLOAD_TOO_LARGE
from src.domain.ports import LogLevel
from src.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

DECODE_FAILED_MESSAGE = "Error occurred deserializing the requested payload"
PARSE_FAILED_MESSAGE = "Error occurred parsing the request into JSON"
HASH_FAILED_MESSAGE = "Error occurred securing the user credentials"


class PipelineError(DustError):
    """A request rejected before reaching the domain."""

    status = HTTPStatus.BAD_REQUEST
    field = "server"

    def __init__(self, message: str, log_body: str) -> None:
        super().__init__(message)
        self.message = message
        self.log_body = log_body  # Request record body; never the raw payload


class PayloadTooLarge(PipelineError):
    status = HTTPStatus.REQUEST_ENTITY_TOO_LARGE


class DecodeFailure(PipelineError):
    pass


class ParseFailure(PipelineError):
    pass


@dataclass
class RequestPipeline:
    """Turns raw request bytes into an HttpOutcome."""

    service: RegistrationService
    audit: AuditLog
    max_payload_bytes: int = MAX_INCOMING_PAYLOAD_SIZE

    def handle_create_user(
        self, raw_body: bytes, metadata: RequestMetadata, payload_size: int | None = None
    ) -> HttpOutcome:
        """
        Run the create-user steps over raw_body.

        payload_size is the number of bytes the client sent when raw_body is
        only a bounded prefix of the payload.
        """
        if payload_size is None:
            payload_size = len(raw_body)
        try:
            request = self._parse(self._decode(self._guard_size(raw_body, payload_size)))
        except PipelineError as e:
            self.audit.request(LogLevel.ERROR, metadata, payload_size, e.log_body)
            return HttpOutcome.error(e.status, e.field, e.message)

        self.audit.request(LogLevel.INFO, metadata, payload_size, CREDENTIALS_REDACTED)

        try:
            self.service.register(request.email, request.password)
        except InvalidCredentials as e:
            return HttpOutcome.error(HTTPStatus.BAD_REQUEST, e.field, e.message)
        except CredentialHashingError:
            logger.exception("Password hashing failed for %s %s", metadata.method, metadata.path)
            return HttpOutcome.error(
                HTTPStatus.INTERNAL_SERVER_ERROR, "server", HASH_FAILED_MESSAGE
            )
        except UserAlreadyExists as e:
            return HttpOutcome.error(HTTPStatus.CONFLICT, "email", str(e))
        except PersistenceError as e:
            return HttpOutcome.error(HTTPStatus.INTERNAL_SERVER_ERROR, "server", str(e))

        return HttpOutcome.ok()

    def handle_health_check(self, metadata: RequestMetadata) -> HttpOutcome:
        self.audit.request(LogLevel.INFO, metadata)

        try:
            self.service.health_check()
        except PersistenceError as e:
            return HttpOutcome.error(HTTPStatus.INTERNAL_SERVER_ERROR, "server", str(e))

        return HttpOutcome.ok()

    def _guard_size(self, raw_body: bytes, payload_size: int) -> bytes:
        if payload_size > self.max_payload_bytes:
            raise PayloadTooLarge(
                f"Request payload exceeds {self.max_payload_bytes} bytes", PAYLOAD_TOO_LARGE
            )
        return raw_body

    def _decode(self, raw_body: bytes) -> str:
        try:
            return raw_body.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeFailure(DECODE_FAILED_MESSAGE, str(e)) from e

    def _parse(self, text: str) -> RegistrationRequest:
        try:
            return RegistrationRequest.model_validate_json(text)
        except ValidationError as e:
            raise ParseFailure(PARSE_FAILED_MESSAGE, _describe(e)) from e


def _describe(exc: ValidationError) -> str:
    """Summarize parse errors by location and message, without input values."""
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}"
        for err in exc.errors(include_url=False, include_input=False)
    )
