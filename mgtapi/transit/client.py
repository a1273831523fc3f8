"""
Moscow transport API client (stop_v2 endpoint).
One pooled httpx client per instance, 10s timeout, no retries, no caching and no cookies.
"""
import logging
import threading
from http.cookiejar import CookieJar, DefaultCookiePolicy
from typing import Protocol, runtime_checkable
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from mgtapi.transit.errors import (
    DecodeError,
    NetworkError,
    RequestConstructionError,
    UnexpectedStatusError,
)
from mgtapi.transit.models import StopData

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.moscowapp.mos.ru/v8.2/"
USER_AGENT_HEADER = "Mozilla/5.0"
ACCEPT_HEADER = "application/json"
REQUEST_TIMEOUT_SECONDS = 10.0
MAX_REDIRECTS = 10
STOP_ENDPOINT = "stop_v2/"


@runtime_checkable
class StopDataFetcher(Protocol):
    """Anything that can fetch a stop snapshot by id (the client, or a test double)."""

    def get_stop_data(self, stop_id: str) -> StopData:
        ...


class TransitClient:
    """
    Client for the stop_v2 endpoint.

    Raises RequestConstructionError, NetworkError, UnexpectedStatusError or DecodeError;
    all are TransitAPIError subclasses. Error response bodies go to `diagnostics` at DEBUG
    (defaults to this module's logger, silent unless logging is configured).
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        diagnostics: logging.Logger | None = None,
        transport: httpx.BaseTransport | None = None,
        escape_stop_id: bool = False,
    ):
        self._base_url = base_url
        self._base_url_lock = threading.Lock()
        self._log = diagnostics or logger
        self._escape_stop_id = escape_stop_id
        self._http = httpx.Client(
            timeout=timeout,
            headers={"User-Agent": USER_AGENT_HEADER, "Accept": ACCEPT_HEADER},
            transport=transport,
            follow_redirects=True,
            max_redirects=MAX_REDIRECTS,
            # Calls are independent: refuse every Set-Cookie from upstream
            cookies=CookieJar(policy=DefaultCookiePolicy(allowed_domains=[])),
        )

    @property
    def base_url(self) -> str:
        with self._base_url_lock:
            return self._base_url

    def set_base_url(self, url: str) -> None:
        """Replace the base URL (no validation). Must end with '/' since endpoints are appended as-is."""
        with self._base_url_lock:
            self._base_url = url

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> "TransitClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _get(self, endpoint: str) -> bytes:
        """GET base_url + endpoint, following redirects; return the body of a final 200 response."""
        url = self.base_url + endpoint
        try:
            request = self._http.build_request("GET", url)
        except httpx.InvalidURL as e:
            raise RequestConstructionError(f"failed to create request: {e}") from e

        try:
            response = self._http.send(request)
        except httpx.UnsupportedProtocol as e:
            raise RequestConstructionError(f"failed to create request: {e}") from e
        except httpx.RequestError as e:
            self._log.warning("telemetry transit_network_error endpoint=%s error=%s", endpoint, str(e))
            raise NetworkError(f"request error: {e}") from e

        if response.status_code != 200:
            body = ""
            try:
                body = response.text
            except (UnicodeDecodeError, LookupError):
                pass
            self._log.debug("telemetry transit_error_body status=%s body=%s", response.status_code, body)
            self._log.warning(
                "telemetry transit_status_error status=%s endpoint=%s",
                response.status_code,
                endpoint,
            )
            raise UnexpectedStatusError(response.status_code, body)

        return response.content

    def get_stop_data(self, stop_id: str) -> StopData:
        """Fetch and decode stop_v2/{stop_id}. stop_id is inserted verbatim unless escape_stop_id was set."""
        segment = quote(stop_id, safe="") if self._escape_stop_id else stop_id
        body = self._get(STOP_ENDPOINT + segment)
        try:
            data = StopData.from_json(body)
        except ValidationError as e:
            self._log.warning("telemetry transit_decode_error stop_id=%s errors=%s", stop_id, e.error_count())
            raise DecodeError(f"decode error: {e}") from e
        self._log.info(
            "telemetry transit_stop_fetched stop_id=%s routes=%s",
            stop_id,
            len(data.route_path),
        )
        return data
