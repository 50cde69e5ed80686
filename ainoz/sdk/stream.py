"""
Event channel returned by AinozClient.stream_generate().

A single producer task puts DATA events followed by exactly one END or ERROR
event on an asyncio.Queue; TextStream is the consumer side:

    stream = client.stream_generate(req)
    async for event in stream:
        if event.type is StreamEventType.DATA:
            print(event.data, end="")
        elif event.type is StreamEventType.ERROR:
            raise event.error
"""
from __future__ import annotations

import asyncio
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ainoz.sdk.errors import AinozError


class StreamEventType(str, Enum):
    DATA = "data"
    END = "end"
    ERROR = "error"


@dataclass(frozen=True)
class StreamEvent:
    type: StreamEventType
    data: str = ""
    error: Optional[AinozError] = None

    @classmethod
    def chunk(cls, data: str) -> "StreamEvent":
        return cls(StreamEventType.DATA, data=data)

    @classmethod
    def end(cls) -> "StreamEvent":
        return cls(StreamEventType.END)

    @classmethod
    def failure(cls, error: AinozError) -> "StreamEvent":
        return cls(StreamEventType.ERROR, error=error)

    @property
    def is_terminal(self) -> bool:
        return self.type is not StreamEventType.DATA


class TextStream:
    def __init__(self, queue: "asyncio.Queue[StreamEvent]", task: "asyncio.Task[None]") -> None:
        self._queue = queue
        # keep a reference so the producer is not garbage collected mid-stream
        self._task = task
        self._finished = False

    @property
    def finished(self) -> bool:
        return self._finished

    def __aiter__(self) -> "TextStream":
        return self

    async def __anext__(self) -> StreamEvent:
        if self._finished:
            raise StopAsyncIteration
        event = await self._queue.get()
        if event.is_terminal:
            self._finished = True
        return event

    async def collect(self) -> str:
        """Drain the stream and return the concatenated text; raise the stream's error if it failed."""
        parts: list[str] = []
        async for event in self:
            if event.type is StreamEventType.DATA:
                parts.append(event.data)
            elif event.error is not None:
                raise event.error
        return "".join(parts)
