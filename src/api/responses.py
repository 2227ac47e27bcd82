"""
Response builder - HttpOutcome to HTTP response.

Error bodies are serialized as JSON and copied verbatim into the response
record; they carry no credentials, so no redaction is applied here.
Success responses have an empty body.
"""

from dataclasses import dataclass

from fastapi import Response
from fastapi.responses import JSONResponse

from src.api.audit import AuditLog
from src.api.models import HttpOutcome


@dataclass
class ResponseBuilder:
    """Builds responses and records each one."""

    audit: AuditLog

    def build_response(self, outcome: HttpOutcome) -> Response:
        status_code = int(outcome.status)

        if outcome.body is None:
            response = Response(status_code=status_code)
            self.audit.response(status_code)
            return response

        response = JSONResponse(status_code=status_code, content=outcome.body.model_dump())
        self.audit.response(status_code, outcome.body.model_dump_json())
        return response
