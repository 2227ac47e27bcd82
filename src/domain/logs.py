"""
Request/response log records.

Records are rendered as one JSON object per line. Bodies are summaries,
never raw credentials: accepted registration payloads are always replaced
with CREDENTIALS_REDACTED before a record is built.
"""

import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone

from .ports import LogDistinction, LogLevel

CREDENTIALS_REDACTED = "User credentials redacted . . ."
PAYLOAD_TOO_LARGE = "Payload too large to display . . ."
UNKNOWN_ADDR = "unknown"

# Explicit table; unlisted codes fall back to INFO.
_STATUS_LOG_LEVELS = {
    200: LogLevel.INFO,
    400: LogLevel.ERROR,
    409: LogLevel.ERROR,
    413: LogLevel.ERROR,
    500: LogLevel.ERROR,
}


def log_level_for_status(status_code: int) -> LogLevel:
    """Map a response status code to the severity of its log record."""
    return _STATUS_LOG_LEVELS.get(status_code, LogLevel.INFO)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class HttpRequestLog:
    """Log record for an incoming request."""

    log_level: LogLevel
    originating_ip_addr: str
    api: str
    restful_method: str
    payload_size_in_bytes: int | None = None
    body_as_utf8_str: str | None = None
    timestamp: datetime = field(default_factory=_utcnow)

    distinction = LogDistinction.REQUEST

    def as_log_str(self) -> str:
        return _render(self)


@dataclass(frozen=True)
class HttpResponseLog:
    """Log record for an outgoing response."""

    log_level: LogLevel
    originating_ip_addr: str
    response_status_code: int
    body_as_utf8_str: str | None = None
    timestamp: datetime = field(default_factory=_utcnow)

    distinction = LogDistinction.RESPONSE

    def as_log_str(self) -> str:
        return _render(self)


def _render(record: HttpRequestLog | HttpResponseLog) -> str:
    data = asdict(record)
    data["timestamp"] = record.timestamp.isoformat()
    data["log_level"] = record.log_level.value
    return json.dumps(data, separators=(",", ":"))
