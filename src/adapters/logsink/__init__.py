"""Log sink adapters - Request/response record destinations."""

from .console import ConsoleLogSink
from .file import FileLogSink

__all__ = ["ConsoleLogSink", "FileLogSink"]
