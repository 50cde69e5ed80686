from ainoz.sdk.client import AinozClient, ClientConfig, DEFAULT_TIMEOUT_MS
from ainoz.sdk.errors import AinozError, ErrorKind, NetworkError, ValidationError
from ainoz.sdk.stream import StreamEvent, StreamEventType, TextStream

__all__ = [
    "AinozClient",
    "ClientConfig",
    "DEFAULT_TIMEOUT_MS",
    "AinozError",
    "ErrorKind",
    "NetworkError",
    "ValidationError",
    "StreamEvent",
    "StreamEventType",
    "TextStream",
]
