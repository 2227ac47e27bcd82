"""
API routes - Registration and health-check endpoints.

Endpoint paths come from Settings, so the router is built per app:
- POST <create_user_path>  - Register a new user
- GET  <health_check_path> - Database liveness

The body is read on the event loop and reading stops once it exceeds the
payload limit; the pipeline (bcrypt, blocking database calls) runs in
the threadpool.
"""

from fastapi import APIRouter, Depends, Request, Response
from fastapi.concurrency import run_in_threadpool

from src.api.dependencies import get_pipeline, get_request_metadata, get_response_builder
from src.api.models import ErrorResponse, RequestMetadata
from src.api.pipeline import RequestPipeline
from src.api.responses import ResponseBuilder
from src.config.settings import Settings

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Malformed payload or invalid credentials"},
    409: {"model": ErrorResponse, "description": "Email already registered"},
    413: {"model": ErrorResponse, "description": "Payload too large"},
    500: {"model": ErrorResponse, "description": "Server or database failure"},
}


async def read_bounded_body(request: Request, limit: int) -> tuple[bytes, int]:
    """
    Read the request body, stopping once more than limit bytes arrive.

    Returns at most limit + 1 bytes and the payload size seen so far. A declared
    Content-Length above limit is trusted and nothing is read.
    """
    declared = request.headers.get("content-length", "")
    if declared.isdigit() and int(declared) > limit:
        return b"", int(declared)

    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if len(body) > limit:
            break
    return bytes(body[: limit + 1]), len(body)


async def create_user(
    request: Request,
    metadata: RequestMetadata = Depends(get_request_metadata),
    pipeline: RequestPipeline = Depends(get_pipeline),
    responses: ResponseBuilder = Depends(get_response_builder),
) -> Response:
    """
    Register a new user.

    Body: `{"email": "...", "password": "..."}` (password 8-255 bytes).
    Returns an empty 200 on success.
    """
    raw_body, payload_size = await read_bounded_body(request, pipeline.max_payload_bytes)
    outcome = await run_in_threadpool(
        pipeline.handle_create_user, raw_body, metadata, payload_size
    )
    return await run_in_threadpool(responses.build_response, outcome)


async def health_check(
    metadata: RequestMetadata = Depends(get_request_metadata),
    pipeline: RequestPipeline = Depends(get_pipeline),
    responses: ResponseBuilder = Depends(get_response_builder),
) -> Response:
    """Returns an empty 200 if the database is reachable."""
    outcome = await run_in_threadpool(pipeline.handle_health_check, metadata)
    return await run_in_threadpool(responses.build_response, outcome)


def create_router(settings: Settings) -> APIRouter:
    """Build the API router for the configured endpoint paths."""
    router = APIRouter(tags=["users"])
    router.add_api_route(
        settings.create_user_path,
        create_user,
        methods=["POST"],
        responses=_ERROR_RESPONSES,
        summary="Register a new user",
    )
    router.add_api_route(
        settings.health_check_path,
        health_check,
        methods=["GET"],
        responses={500: _ERROR_RESPONSES[500]},
        summary="Health check",
    )
    return router
