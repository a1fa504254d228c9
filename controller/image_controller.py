# controller/image_controller.py
from typing import Dict, Optional
from fastapi import APIRouter, Depends, Header
from fastapi.responses import PlainTextResponse, StreamingResponse
from starlette.background import BackgroundTask
from starlette.responses import Response
from config.settings import settings
from core.entities import ImageOutcome
from controller.controller_dependencies import get_image_service
from service.image_service import ImageService
from util.constants import DEFAULT_CONTENT_TYPE, InternalURIs, PLAIN_TEXT
from util.enums import ErrorMessage, OutcomeKind

image_router = APIRouter()

_FAILURES: Dict[OutcomeKind, ErrorMessage] = {
    OutcomeKind.COLD_CACHE: ErrorMessage.COLD_CACHE,
    OutcomeKind.INDEX_INCONSISTENT: ErrorMessage.INDEX_INCONSISTENT,
    OutcomeKind.INTERNAL_ERROR: ErrorMessage.INTERNAL_ERROR,
}


def plain_error(error: ErrorMessage) -> PlainTextResponse:
    return PlainTextResponse(
        error.value.message,
        status_code=error.value.http_status,
        media_type=PLAIN_TEXT,
    )


def to_response(outcome: ImageOutcome) -> Response:
    # Flow: tagged outcome -> HTTP. Only SUCCESS carries a body stream.
    if outcome.kind is not OutcomeKind.SUCCESS or outcome.blob is None:
        return plain_error(_FAILURES.get(outcome.kind, ErrorMessage.INTERNAL_ERROR))

    blob = outcome.blob
    headers = {"Cache-Control": settings.cache_control}
    if blob.http_etag:
        headers["ETag"] = blob.http_etag
    if blob.size is not None:
        headers["Content-Length"] = str(blob.size)
    return StreamingResponse(
        blob.body,
        media_type=blob.content_type or DEFAULT_CONTENT_TYPE,
        headers=headers,
        background=BackgroundTask(blob.release),
    )


@image_router.get(InternalURIs.ROOT, response_class=StreamingResponse)
@image_router.get(InternalURIs.WALLPAPER_RANDOM, response_class=StreamingResponse)
async def random_image(
    user_agent: Optional[str] = Header(default=None),
    service: ImageService = Depends(get_image_service),
) -> Response:
    outcome = await service.serve(user_agent)
    return to_response(outcome)
