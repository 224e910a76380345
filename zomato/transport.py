"""HTTP transport and authentication for the Zomato API.

Requests are described by plain ``RawRequest`` values produced by a
``Requester``. Authentication is a function that wraps one requester in
another, so nothing here touches the network until ``Transport.execute``.
"""

from __future__ import annotations

import enum
import logging
import math
import threading
import time
from contextlib import contextmanager
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol, Sequence, Tuple

import httpx

from zomato import config
from zomato.errors import APIError, Cancelled, MissingCredential, RequestBuildError, TransportError

logger = logging.getLogger(__name__)

# Unread body bytes slurped before closing so the connection can be reused
MAX_BODY_SLURP_SIZE = 2 << 10


@dataclass(frozen=True)
class RawRequest:
    """An outbound request that has not been sent yet."""

    method: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)

    def with_header(self, name: str, value: str) -> "RawRequest":
        return replace(self, headers={**self.headers, name: value})


class Requester(Protocol):
    """Anything that can produce a ``RawRequest``."""

    def request(self) -> RawRequest:
        ...


class RequesterFunc:
    """Adapts a zero-argument callable to the ``Requester`` interface."""

    def __init__(self, fn: Callable[[], RawRequest]):
        self._fn = fn

    def request(self) -> RawRequest:
        return self._fn()


# ---------------------------------------------------------------------------
# Request building
# ---------------------------------------------------------------------------

def _format_float(value: float) -> str:
    # Plain decimal notation, never an exponent
    text = format(Decimal(repr(float(value))), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _encode_scalar(name: str, value: Any) -> str:
    if isinstance(value, enum.Enum):
        value = value.value
    if isinstance(value, bool):
        raise RequestBuildError(name, "boolean parameters are not supported")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise RequestBuildError(name, f"not a finite number: {value!r}")
        return _format_float(value)
    if isinstance(value, str):
        return value
    raise RequestBuildError(name, f"unsupported type {type(value).__name__}")


def _encode_value(name: str, value: Any) -> Optional[str]:
    """Encode one query value; ``None`` means the parameter is omitted.

    Zero values omit the whole parameter. Items of a list are kept even
    when zero; only ``None`` items are skipped.
    """
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        items = [_encode_scalar(name, item) for item in value if item is not None]
        return ",".join(items) or None
    text = _encode_scalar(name, value)
    if not text or (isinstance(value, (int, float)) and value == 0):
        return None
    return text


def build_request(path: str, params: Sequence[Tuple[str, Any]] = ()) -> RawRequest:
    """Build a GET request for ``path`` under the versioned API prefix.

    Parameters holding a zero value (``None``, ``0``, ``0.0``, ``""`` or an
    empty list) are left out of the query string.
    """
    url = config.DEFAULT_BASE_URL + config.API_VERSION_PREFIX + path

    encoded: List[Tuple[str, str]] = []
    for name, value in params:
        text = _encode_value(name, value)
        if text is not None:
            encoded.append((name, text))

    if encoded:
        url += "?" + str(httpx.QueryParams(encoded))
    return RawRequest(method="GET", url=url)


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

def new_auth(api_key: str) -> Callable[[Requester], Requester]:
    """Return an authenticator adding ``api_key`` to every request.

    Assign it to ``Client.auth`` (or use ``new_client``) so client methods
    authenticate their requests.
    """

    def authenticate(requester: Requester) -> Requester:
        def request() -> RawRequest:
            if not api_key:
                raise MissingCredential("empty API key")
            return requester.request().with_header(config.AUTH_HEADER, api_key)

        return RequesterFunc(request)

    return authenticate


# ---------------------------------------------------------------------------
# Cancellation
# ---------------------------------------------------------------------------

class CancelToken:
    """Cancellation signal shared between a caller and an in-flight call.

    The token is checked before the request is sent, once the response
    headers arrive, and between body chunks; ``cancel()`` may be called from
    any thread. A call blocked waiting for response headers only notices the
    token when they arrive, so pass ``timeout=`` to bound that wait.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise Cancelled("request cancelled")


# ---------------------------------------------------------------------------
# Transport
# ---------------------------------------------------------------------------

@contextmanager
def _translate_errors() -> Iterator[None]:
    try:
        yield
    except httpx.TimeoutException as exc:
        raise Cancelled(f"HTTP request timed out: {exc}") from exc
    except httpx.HTTPError as exc:
        raise TransportError(f"HTTP request failed: {exc}") from exc


def _drain(response: httpx.Response) -> None:
    # Failures here only cost connection reuse.
    try:
        if not response.is_stream_consumed:
            read = 0
            for chunk in response.iter_raw():
                read += len(chunk)
                if read >= MAX_BODY_SLURP_SIZE:
                    break
    except httpx.HTTPError as exc:
        logger.debug(f"Draining response body failed: {exc}")
    finally:
        response.close()


class Transport:
    """Sends ``RawRequest`` values and returns the raw success body.

    Configuration is fixed at construction, so one transport can serve many
    threads at once.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        user_agent: Optional[str] = None,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        self._base_url = httpx.URL(base_url or config.BASE_URL)
        self._user_agent = config.USER_AGENT if user_agent is None else user_agent
        self._timeout = config.TIMEOUT_SECONDS if timeout is None else timeout
        self._owns_client = http_client is None
        self._http_client = http_client if http_client is not None else httpx.Client(timeout=self._timeout)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    @property
    def user_agent(self) -> str:
        return self._user_agent

    @property
    def timeout(self) -> float:
        return self._timeout

    def close(self) -> None:
        if self._owns_client:
            self._http_client.close()

    def _rebase(self, url: str) -> httpx.URL:
        return httpx.URL(url).copy_with(
            scheme=self._base_url.scheme,
            host=self._base_url.host,
            port=self._base_url.port,
        )

    def execute(
        self,
        raw: RawRequest,
        cancel: Optional[CancelToken] = None,
        timeout: Optional[float] = None,
    ) -> bytes:
        """Send ``raw`` and return the body of a 200 response.

        Raises:
            Cancelled: ``cancel`` fired or the call timed out
            TransportError: the request could not be completed
            APIError: the status code is not 200
        """
        if cancel is not None:
            cancel.raise_if_cancelled()

        headers = dict(raw.headers)
        if self._user_agent:
            headers["User-Agent"] = self._user_agent
        headers["Content-Type"] = "application/json"
        headers["Accept"] = "application/json"

        request = self._http_client.build_request(
            raw.method,
            self._rebase(raw.url),
            headers=headers,
            timeout=self._timeout if timeout is None else timeout,
        )

        start_time = time.time()
        with _translate_errors():
            response = self._http_client.send(request, stream=True)

        try:
            if cancel is not None:
                cancel.raise_if_cancelled()

            chunks: List[bytes] = []
            with _translate_errors():
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
                    if cancel is not None:
                        cancel.raise_if_cancelled()
            body = b"".join(chunks)

            elapsed = time.time() - start_time
            logger.debug(f"{request.method} {request.url} -> {response.status_code} in {elapsed:.2f} seconds")

            if response.status_code != httpx.codes.OK:
                raise APIError(
                    status_code=response.status_code,
                    url=str(request.url),
                    headers=response.headers,
                    body=body or None,
                )
            return body
        finally:
            _drain(response)
