"""
Request/response audit records.

Builds HttpRequestLog / HttpResponseLog records and hands them to the
configured LogSink. A sink failure is reported on the operational logger
and dropped; it never changes the response.
"""

import logging
from dataclasses import dataclass

from src.api.models import RequestMetadata
from src.domain.exceptions import LoggingFailure
from src.domain.logs import UNKNOWN_ADDR, HttpRequestLog, HttpResponseLog, log_level_for_status
from src.domain.ports import LogLevel, LogSink

logger = logging.getLogger(__name__)


@dataclass
class AuditLog:
    """Writes request and response records to a LogSink."""

    sink: LogSink
    server_addr: str

    def request(
        self,
        log_level: LogLevel,
        metadata: RequestMetadata,
        payload_size_in_bytes: int | None = None,
        body_as_utf8_str: str | None = None,
    ) -> None:
        """Record an incoming request. `body_as_utf8_str` must already be redacted."""
        remote_addr = metadata.remote_addr
        if not remote_addr:
            logger.warning(
                "Could not resolve client address for %s %s", metadata.method, metadata.path
            )
            remote_addr = UNKNOWN_ADDR

        self._write(
            HttpRequestLog(
                log_level=log_level,
                originating_ip_addr=remote_addr,
                api=metadata.path,
                restful_method=metadata.method,
                payload_size_in_bytes=payload_size_in_bytes,
                body_as_utf8_str=body_as_utf8_str,
            )
        )

    def response(self, status_code: int, body_as_utf8_str: str | None = None) -> None:
        """Record an outgoing response; severity follows the status code."""
        self._write(
            HttpResponseLog(
                log_level=log_level_for_status(status_code),
                originating_ip_addr=self.server_addr,
                response_status_code=status_code,
                body_as_utf8_str=body_as_utf8_str,
            )
        )

    def _write(self, record: HttpRequestLog | HttpResponseLog) -> None:
        try:
            self.sink.append(record.as_log_str(), record.distinction)
        except LoggingFailure as e:
            logger.error("Dropped %s log record: %s", record.distinction.value, e)
