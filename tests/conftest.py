"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings pointing at a temporary chat directory
- A recording log sink
- A mocked user repository
- Pipeline and response builder wired to the fakes
"""

from pathlib import Path
from unittest.mock import Mock

import pytest

from src.api.audit import AuditLog
from src.api.models import RequestMetadata
from src.api.pipeline import RequestPipeline
from src.api.responses import ResponseBuilder
from src.config.settings import Settings
from src.domain.ports import UserRepository
from src.domain.registration import RegistrationService
from tests.fakes import CLIENT_ADDR, INDEX_HTML, SERVER_ADDR, RecordingLogSink


@pytest.fixture
def chat_dir(tmp_path: Path) -> Path:
    """Static front-end directory with an index page."""
    path = tmp_path / "chat"
    path.mkdir()
    (path / "index.html").write_text(INDEX_HTML)
    return path


@pytest.fixture
def settings(chat_dir: Path) -> Settings:
    """Settings independent of the process environment and .env files."""
    return Settings(
        _env_file=None,
        server_addr=SERVER_ADDR,
        server_port=8080,
        chat_path=chat_dir,
    )


@pytest.fixture
def log_sink() -> RecordingLogSink:
    return RecordingLogSink()


@pytest.fixture
def repository() -> Mock:
    """Repository that accepts every user and is always healthy."""
    return Mock(spec=UserRepository)


@pytest.fixture
def audit(log_sink: RecordingLogSink) -> AuditLog:
    return AuditLog(sink=log_sink, server_addr=SERVER_ADDR)


@pytest.fixture
def pipeline(repository: Mock, audit: AuditLog) -> RequestPipeline:
    return RequestPipeline(service=RegistrationService(repository=repository), audit=audit)


@pytest.fixture
def response_builder(audit: AuditLog) -> ResponseBuilder:
    return ResponseBuilder(audit=audit)


@pytest.fixture
def create_user_metadata() -> RequestMetadata:
    return RequestMetadata(remote_addr=CLIENT_ADDR, method="POST", path="/api/create_user")


@pytest.fixture
def health_check_metadata() -> RequestMetadata:
    return RequestMetadata(remote_addr=CLIENT_ADDR, method="GET", path="/api/health_check")
