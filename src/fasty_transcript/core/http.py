"""HTTP session management and size-bounded reads."""

import json
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

from .config import NetworkConfig, get_config
from .exceptions import CaptionShapeError, TransportError

YOUTUBE = "https://www.youtube.com"
CHUNK_SIZE = 64 * 1024


def new_session(network: Optional[NetworkConfig] = None) -> requests.Session:
    """Create a session with retry on throttling/server errors and YouTube consent cookies."""
    network = network or get_config().network
    s = requests.Session()
    retries = Retry(total=network.retry_total, connect=network.retry_total, read=network.retry_total,
                    backoff_factor=network.retry_backoff,
                    status_forcelist=[429, 500, 502, 503, 504],
                    allowed_methods=["HEAD", "GET", "POST", "OPTIONS"],
                    raise_on_status=False)
    s.mount("https://", HTTPAdapter(max_retries=retries))
    s.mount("http://", HTTPAdapter(max_retries=retries))
    s.headers.update({
        "Accept": "*/*",
        "Accept-Language": "en-US,en;q=0.9",
    })
    s.cookies.set("CONSENT", "YES+1", domain=".youtube.com")
    s.cookies.set("PREF", "hl=en", domain=".youtube.com")
    return s


@contextmanager
def session_scope(session: Optional[requests.Session] = None,
                  network: Optional[NetworkConfig] = None) -> Iterator[requests.Session]:
    """Yield ``session`` if given, else a fresh session closed on exit."""
    if session is not None:
        yield session
        return
    owned = new_session(network)
    try:
        yield owned
    finally:
        owned.close()


@dataclass
class HttpResponse:
    """Fully read, size-checked response body."""
    status_code: int
    text: str
    url: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON, raising CaptionShapeError when it is not."""
        try:
            return json.loads(self.text)
        except ValueError as e:
            raise CaptionShapeError("response was not valid JSON") from e


def _read_limited(response: requests.Response, max_bytes: int, timeout: float) -> bytes:
    """Read the body, bounded by size and by total elapsed time."""
    deadline = time.monotonic() + timeout
    body = bytearray()
    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
        if time.monotonic() > deadline:
            raise TransportError(f"response took longer than {timeout:g}s")
        if not chunk:
            continue
        body.extend(chunk)
        if len(body) > max_bytes:
            raise TransportError(f"response exceeded {max_bytes} bytes")
    return bytes(body)


def _decode(body: bytes, encoding: Optional[str]) -> str:
    try:
        return body.decode(encoding or "utf-8", errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


def fetch(
    session: requests.Session,
    method: str,
    url: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, str]] = None,
    json_body: Optional[Dict[str, Any]] = None,
    network: Optional[NetworkConfig] = None
) -> HttpResponse:
    """
    Issue one request and read the body within the configured size cap.

    Non-success statuses are returned, not raised; callers word their own
    failure messages. Network errors, timeouts and oversize bodies raise
    TransportError.
    """
    network = network or get_config().network
    try:
        with session.request(
            method,
            url,
            headers=headers,
            params=params,
            json=json_body,
            timeout=network.http_timeout,
            stream=True
        ) as response:
            body = _read_limited(response, network.max_response_bytes, network.http_timeout)
            return HttpResponse(
                status_code=response.status_code,
                text=_decode(body, response.encoding),
                url=response.url or url
            )
    except requests.Timeout as e:
        raise TransportError(f"request timed out after {network.http_timeout:g}s") from e
    except requests.RequestException as e:
        raise TransportError(f"request failed: {e}") from e
