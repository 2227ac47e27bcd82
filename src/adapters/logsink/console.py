"""
Console log sink adapter - Implements LogSink protocol.

This module provides a console-based implementation of the domain's
log sink port, emitting request/response records through stdlib logging.
"""

import logging

from src.domain.ports import LogDistinction

logger = logging.getLogger(__name__)


class ConsoleLogSink:
    """
    Implements LogSink protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Used when no log directory is configured (development, containers).
    """

    def append(self, record: str, distinction: LogDistinction) -> None:
        """
        Emit one record at INFO level, tagged with its distinction.

        Records arrive already redacted and formatted.

        Args:
            record: Formatted log record
            distinction: Record classification (request/response)
        """
        logger.info("[%s] %s", distinction.value.upper(), record)
