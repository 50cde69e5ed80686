import logging
from typing import AsyncIterator, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, StreamingResponse

from ainoz.core import config
from ainoz.relayer.providers.factory import get_generate
from ainoz.relayer.services.generation import new_request_id, paced_chunks, split_into_chunks
from ainoz.schemas.generate import ErrorResponse, GenerationResponse, RelayerRequest

router = APIRouter(prefix="/v1", tags=["generate"])
logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields: model and prompt"


def _missing_fields(req: Optional[RelayerRequest]) -> bool:
    # an absent body counts as missing fields, not as a malformed one
    return req is None or not req.model or not req.prompt


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post("/generate", response_model=GenerationResponse)
async def generate(req: Optional[RelayerRequest] = None):
    if _missing_fields(req):
        return _error(400, MISSING_FIELDS)

    try:
        generate_text = get_generate(req.model)
        text = await generate_text(req.prompt, model=req.model)
        request_id = new_request_id()
    except Exception as e:
        logger.exception("error in /v1/generate: %s", e)
        return _error(500, "Internal server error")

    logger.info("generated %s model=%s chars=%d", request_id, req.model, len(text))
    return GenerationResponse(text=text, request_id=request_id)


@router.post("/generate/stream")
async def generate_stream(request: Request, req: Optional[RelayerRequest] = None):
    if _missing_fields(req):
        return _error(400, MISSING_FIELDS)

    # everything that can still become a JSON error has to happen before the StreamingResponse
    try:
        generate_text = get_generate(req.model)
        text = await generate_text(req.prompt, model=req.model)
        chunks = split_into_chunks(text)
    except Exception as e:
        logger.exception("error in /v1/generate/stream: %s", e)
        return _error(500, "Internal server error")

    interval = config.STREAM_INTERVAL_MS / 1000

    async def streamer() -> AsyncIterator[bytes]:
        try:
            async for chunk in paced_chunks(chunks, interval=interval, is_disconnected=request.is_disconnected):
                yield chunk.encode("utf-8")
        except Exception as e:
            # status and headers are already sent, the client only sees a short body
            logger.exception("streaming error occurred: %s", e)

    logger.info("streaming %d chunks model=%s", len(chunks), req.model)
    # no content length, so the server sends the body with chunked transfer encoding
    return StreamingResponse(streamer(), media_type="text/plain; charset=utf-8")
