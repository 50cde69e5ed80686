import asyncio
import codecs
import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

import httpx

from ainoz.core import config
from ainoz.schemas.generate import GenerationRequest, GenerationResponse
from ainoz.sdk.errors import AinozError, NetworkError, ValidationError
from ainoz.sdk.stream import StreamEvent, TextStream

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_MS = 30000

RequestLike = Union[GenerationRequest, Mapping[str, Any]]


@dataclass(frozen=True)
class ClientConfig:
    relayer_url: str
    api_key: Optional[str] = None
    timeout_ms: int = DEFAULT_TIMEOUT_MS


def _normalize_relayer_url(relayer_url: Any) -> str:
    if not relayer_url:
        raise ValidationError("relayerUrl is required")
    if not isinstance(relayer_url, str):
        raise ValidationError("relayerUrl must be a valid URL")
    try:
        url = httpx.URL(relayer_url)
    except httpx.InvalidURL:
        raise ValidationError("relayerUrl must be a valid URL") from None
    # relative references like "not-a-url" parse fine but have neither scheme nor host
    if not url.scheme or not url.host:
        raise ValidationError("relayerUrl must be a valid URL")
    return relayer_url.rstrip("/")


def _validate_request(request: RequestLike) -> Dict[str, str]:
    """Check request parameters and return the JSON body to send."""
    if isinstance(request, GenerationRequest):
        fields: Mapping[str, Any] = request.model_dump()
    elif isinstance(request, Mapping):
        fields = request
    else:
        raise ValidationError("request must be a GenerationRequest or a mapping")

    model = fields.get("model")
    prompt = fields.get("prompt")
    wallet = fields.get("wallet")
    if not model or not isinstance(model, str):
        raise ValidationError("model must be a non-empty string")
    if not prompt or not isinstance(prompt, str):
        raise ValidationError("prompt must be a non-empty string")
    if wallet is not None and not isinstance(wallet, str):
        raise ValidationError("wallet must be a string")

    payload = {"model": model, "prompt": prompt}
    if wallet is not None:
        payload["wallet"] = wallet
    return payload


class AinozClient:
    """
    Async client for the AINOZ relayer.

    Every call opens its own httpx.AsyncClient and is bounded by timeout_ms as a
    whole, so one instance can serve several concurrent calls. `transport` lets
    callers plug in any httpx transport (an ASGITransport around the relayer app,
    a test double, ...).
    """

    def __init__(
        self,
        relayer_url: str,
        *,
        api_key: Optional[str] = None,
        timeout_ms: int = DEFAULT_TIMEOUT_MS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        base_url = _normalize_relayer_url(relayer_url)
        if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int) or timeout_ms <= 0:
            raise ValidationError("timeoutMs must be a positive integer")
        self._config = ClientConfig(relayer_url=base_url, api_key=api_key or None, timeout_ms=timeout_ms)
        self._transport = transport

    @classmethod
    def from_env(cls, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> "AinozClient":
        return cls(
            config.RELAYER_URL,
            api_key=config.API_KEY,
            timeout_ms=config.TIMEOUT_MS,
            transport=transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def relayer_url(self) -> str:
        return self._config.relayer_url

    @property
    def _timeout_s(self) -> float:
        return self._config.timeout_ms / 1000

    def _headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self._config.api_key:
            headers["Authorization"] = f"Bearer {self._config.api_key}"
        return headers

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=httpx.Timeout(self._timeout_s), transport=self._transport)

    # ---- single shot ----

    async def generate_text(self, request: RequestLike) -> GenerationResponse:
        payload = _validate_request(request)
        try:
            return await asyncio.wait_for(self._post_generate(payload), timeout=self._timeout_s)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            raise NetworkError(f"Request timeout after {self._config.timeout_ms}ms") from None
        except AinozError:
            raise
        except httpx.HTTPError as e:
            raise NetworkError(f"Request failed: {e}") from e
        except Exception as e:
            logger.exception("unexpected request error: %s", e)
            raise NetworkError(f"Request failed: {e}") from e

    async def _post_generate(self, payload: Dict[str, str]) -> GenerationResponse:
        async with self._http_client() as client:
            r = await client.post(f"{self.relayer_url}/v1/generate", json=payload, headers=self._headers())

        if not r.is_success:
            raise NetworkError(f"HTTP {r.status_code}: {r.reason_phrase}")
        try:
            data = r.json()
        except ValueError:
            raise NetworkError("Invalid response format from relayer") from None

        text = data.get("text") if isinstance(data, dict) else None
        request_id = data.get("requestId") if isinstance(data, dict) else None
        if not text or not request_id or not isinstance(text, str) or not isinstance(request_id, str):
            raise NetworkError("Invalid response format from relayer")
        return GenerationResponse(text=text, request_id=request_id)

    # ---- streaming ----

    def stream_generate(self, request: RequestLike) -> TextStream:
        """
        Start a streaming generation and return its event stream right away.

        Validation happens here, synchronously; everything after that is reported
        as events. Must be called while an event loop is running.
        """
        payload = _validate_request(request)
        queue: "asyncio.Queue[StreamEvent]" = asyncio.Queue()
        task = asyncio.get_running_loop().create_task(self._produce_stream(payload, queue))
        return TextStream(queue, task)

    async def _produce_stream(self, payload: Dict[str, str], queue: "asyncio.Queue[StreamEvent]") -> None:
        # exactly one terminal event is put on the queue, whatever happens below
        try:
            await asyncio.wait_for(self._pump_stream(payload, queue), timeout=self._timeout_s)
        except (asyncio.TimeoutError, httpx.TimeoutException):
            terminal = StreamEvent.failure(NetworkError(f"Stream timeout after {self._config.timeout_ms}ms"))
        except AinozError as e:
            terminal = StreamEvent.failure(e)
        except httpx.HTTPError as e:
            terminal = StreamEvent.failure(NetworkError(f"Stream failed: {e}"))
        except Exception as e:
            logger.exception("unexpected streaming error: %s", e)
            terminal = StreamEvent.failure(NetworkError(f"Unknown streaming error: {e}"))
        else:
            terminal = StreamEvent.end()
        queue.put_nowait(terminal)

    async def _pump_stream(self, payload: Dict[str, str], queue: "asyncio.Queue[StreamEvent]") -> None:
        url = f"{self.relayer_url}/v1/generate/stream"
        async with self._http_client() as client:
            async with client.stream("POST", url, json=payload, headers=self._headers()) as r:
                if not r.is_success:
                    raise NetworkError(f"HTTP {r.status_code}: {r.reason_phrase}")
                # always UTF-8, whatever charset the response declares;
                # multi-byte characters split across reads are held until complete
                decoder = codecs.getincrementaldecoder("utf-8")()
                async for raw in r.aiter_bytes():
                    text = decoder.decode(raw)
                    if text:
                        queue.put_nowait(StreamEvent.chunk(text))
                tail = decoder.decode(b"", final=True)
                if tail:
                    queue.put_nowait(StreamEvent.chunk(tail))
