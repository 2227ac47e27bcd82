"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the request
pipeline, the response builder and per-request metadata into routes.
"""

from fastapi import Request

from src.api.models import RequestMetadata
from src.api.pipeline import RequestPipeline
from src.api.responses import ResponseBuilder


def get_pipeline(request: Request) -> RequestPipeline:
    """
    Get request pipeline from app state.

    The pipeline is wired during app lifespan startup and stored in app.state.
    """
    return request.app.state.pipeline


def get_response_builder(request: Request) -> ResponseBuilder:
    """Get response builder from app state."""
    return request.app.state.response_builder


def get_request_metadata(request: Request) -> RequestMetadata:
    """Capture client address, method and path for request records."""
    return RequestMetadata(
        remote_addr=resolve_client_addr(request),
        method=request.method,
        path=request.url.path,
    )


def resolve_client_addr(request: Request) -> str | None:
    """
    Best-effort client address.

    Checks, in order:
    - First entry of X-Forwarded-For
    - "for=" parameter of the first Forwarded element
    - Socket peer address

    Returns None when nothing is available (e.g. unix sockets).
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    forwarded = request.headers.get("forwarded")
    if forwarded:
        for pair in forwarded.split(",")[0].split(";"):
            key, _, value = pair.strip().partition("=")
            if key.lower() == "for" and value:
                return value.strip('"')

    if request.client is not None and request.client.host:
        return request.client.host
    return None
