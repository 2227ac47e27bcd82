"""
File log sink adapter - Implements LogSink protocol.

Appends each record as one line to <log_dir>/<distinction>.log, e.g.
request.log and response.log. Files are opened in append mode per write,
so external rotation (logrotate) needs no signal handling.
"""

import threading
from pathlib import Path

from src.domain.exceptions import LoggingFailure
from src.domain.ports import LogDistinction


class FileLogSink:
    """
    Implements LogSink protocol via append-only files.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Appends are serialized with a lock; requests run in a threadpool.
    """

    def __init__(self, log_dir: Path) -> None:
        """
        Initialize sink, creating the log directory if needed.

        Args:
            log_dir: Directory holding one file per record distinction
        """
        self._log_dir = log_dir
        self._lock = threading.Lock()
        log_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, distinction: LogDistinction) -> Path:
        return self._log_dir / f"{distinction.value}.log"

    def append(self, record: str, distinction: LogDistinction) -> None:
        """
        Append one record line.

        Raises:
            LoggingFailure: If the file cannot be written
        """
        path = self.path_for(distinction)
        try:
            with self._lock, path.open("a", encoding="utf-8") as f:
                f.write(record + "\n")
        except OSError as e:
            raise LoggingFailure(f"Failed to append to {path}: {e}") from e
