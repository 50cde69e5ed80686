"""AINOZ text generation: async SDK client and the relay service it talks to."""
from ainoz.schemas.generate import GenerationRequest, GenerationResponse, StreamChunk
from ainoz.sdk import (
    AinozClient,
    AinozError,
    ClientConfig,
    ErrorKind,
    NetworkError,
    StreamEvent,
    StreamEventType,
    TextStream,
    ValidationError,
)

__version__ = "0.1.0"

__all__ = [
    "AinozClient",
    "AinozError",
    "ClientConfig",
    "ErrorKind",
    "GenerationRequest",
    "GenerationResponse",
    "NetworkError",
    "StreamChunk",
    "StreamEvent",
    "StreamEventType",
    "TextStream",
    "ValidationError",
]
