import asyncio
import logging
import time
from typing import AsyncIterator, Awaitable, Callable, List
from uuid import uuid4

from ainoz.schemas.generate import StreamChunk

logger = logging.getLogger(__name__)


def new_request_id() -> str:
    # millisecond clock + random suffix keeps ids unique across concurrent requests
    return f"req_{int(time.time() * 1000)}_{uuid4().hex[:9]}"


def split_into_chunks(text: str) -> List[StreamChunk]:
    """
    Split text on single spaces: the first chunk is the first word, every later
    chunk is the next word with its leading space. Joining the chunks gives
    back the original text exactly.
    """
    words = text.split(" ")
    return [StreamChunk(data=word if i == 0 else f" {word}") for i, word in enumerate(words)]


async def paced_chunks(
    chunks: List[StreamChunk],
    *,
    interval: float,
    is_disconnected: Callable[[], Awaitable[bool]],
) -> AsyncIterator[str]:
    """
    Yield one chunk per `interval` seconds.

    The disconnect check runs before every chunk; once the client is gone the
    generator returns without sleeping again, so nothing stays scheduled for a
    dead connection.
    """
    for sent, chunk in enumerate(chunks):
        if interval > 0:
            await asyncio.sleep(interval)
        if await is_disconnected():
            logger.info("client disconnected, stopping stream after %d of %d chunks", sent, len(chunks))
            return
        yield chunk.data
